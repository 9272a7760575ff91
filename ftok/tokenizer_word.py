# ftok/tokenizer_word.py
from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List, Tuple

from .vocab import Vocabulary

# ASCII whitespace only; U+00A0 and friends stay inside a word
_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def split_words(text: str) -> List[str]:
    return [w for w in _WHITESPACE.split(text) if w]


def count_words(lines: Iterable[str]) -> Counter:
    counts: Counter = Counter()
    for line in lines:
        counts.update(split_words(line))
    return counts


def rank_words(counts: Counter) -> List[Tuple[str, int]]:
    # most frequent first; equal counts fall back to lexicographic order so
    # the same corpus always gives the same vocabulary
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def add_user_symbols(vocab: Vocabulary, user_defined_symbols: Iterable[str]) -> None:
    """Append user symbols after training. Not capped by vocab_size."""
    for sym in user_defined_symbols:
        # an empty line cannot survive save/load
        if sym:
            vocab.add(sym)


def train_word_level(
    lines: Iterable[str],
    vocab_size: int,
    user_defined_symbols: Iterable[str] = (),
) -> Vocabulary:
    """
    Build a whole-word vocabulary:
    - specials at ids 0-3
    - then up to vocab_size corpus words, most frequent first
    - then every user symbol not already present
    """
    ranked = rank_words(count_words(lines))

    vocab = Vocabulary()
    to_add = vocab_size
    for word, _ in ranked:
        if to_add <= 0:
            break
        if vocab.add(word):
            to_add -= 1

    add_user_symbols(vocab, user_defined_symbols)
    return vocab
