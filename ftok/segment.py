# ftok/segment.py
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .config import TokenizerMode
from .tokenizer_word import split_words
from .vocab import SPECIALS, UNK, Vocabulary


def greedy_pieces(text: str, vocab: Vocabulary) -> Iterator[Optional[str]]:
    """
    Greedy longest-match segmentation, left to right, no backtracking.

    Yields the matched vocabulary token at each position, or None when not even
    the single character there is known (the cursor then moves by one).
    The result is locally greedy, not a minimal token count.
    """
    n = len(text)
    start = 0
    # no token is longer than max_token_len, so shorter probes give the same match
    longest = max(vocab.max_token_len, 1)
    while start < n:
        end = min(n, start + longest)
        match = None
        while end > start:
            piece = text[start:end]
            if piece in vocab:
                match = piece
                break
            end -= 1

        if match is None:
            yield None
            start += 1
        else:
            yield match
            start += len(match)


def encode_as_tokens(text: str, vocab: Vocabulary, mode: TokenizerMode) -> List[str]:
    if mode == TokenizerMode.WORD:
        return [w if w in vocab else UNK for w in split_words(text)]
    return [UNK if p is None else p for p in greedy_pieces(text, vocab)]


def encode_as_ids(
    text: str,
    vocab: Vocabulary,
    mode: TokenizerMode,
    add_sos: bool = False,
    add_eos: bool = False,
) -> List[int]:
    unk = vocab.unk_fallback_id()
    if mode == TokenizerMode.WORD:
        ids = [vocab.token_to_id(w) for w in split_words(text)]
    else:
        ids = [unk if p is None else vocab.token_to_index[p] for p in greedy_pieces(text, vocab)]

    if add_sos and vocab.sos_id is not None:
        ids.insert(0, vocab.sos_id)
    if add_eos and vocab.eos_id is not None:
        ids.append(vocab.eos_id)
    return ids


def join_pieces(pieces: Iterable[str], mode: TokenizerMode) -> str:
    sep = " " if mode == TokenizerMode.WORD else ""
    return sep.join(pieces)


def decode_ids(
    ids: Iterable[int],
    vocab: Vocabulary,
    mode: TokenizerMode,
    skip_specials: bool = False,
) -> str:
    pieces = []
    for i in ids:
        tok = vocab.id_to_token(i)
        if skip_specials and tok in SPECIALS:
            continue
        pieces.append(tok)
    return join_pieces(pieces, mode)


def decode_tokens(tokens: Iterable[str], vocab: Vocabulary, mode: TokenizerMode) -> str:
    return join_pieces((t if t in vocab else UNK for t in tokens), mode)
