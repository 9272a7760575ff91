# ftok/tokenizer_bpe.py
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from .config import MAX_MERGES
from .tokenizer_word import add_user_symbols, split_words
from .vocab import Vocabulary

Word = Tuple[str, ...]
Pair = Tuple[str, str]


def word_counts(lines: Iterable[str]) -> Dict[Word, int]:
    """Distinct whitespace words as character tuples, in first-seen order, with counts."""
    counts: Counter = Counter()
    for line in lines:
        for w in split_words(line):
            counts[tuple(w)] += 1
    return dict(counts)


def get_stats(words: Dict[Word, int]) -> Dict[Pair, int]:
    # insertion order = words in first-seen order, positions left to right
    stats: Dict[Pair, int] = {}
    for w, freq in words.items():
        for i in range(len(w) - 1):
            pair = (w[i], w[i+1])
            stats[pair] = stats.get(pair, 0) + freq
    return stats


def best_pair(stats: Dict[Pair, int]) -> Tuple[Pair, int]:
    # max() keeps the first of equal maxima, i.e. the first pair enumerated
    return max(stats.items(), key=lambda kv: kv[1])


def merge_word(w: Word, pair: Pair, merged: str) -> Word:
    a, b = pair
    out = []
    i = 0
    while i < len(w):
        if i < len(w) - 1 and w[i] == a and w[i+1] == b:
            out.append(merged)
            i += 2
        else:
            out.append(w[i])
            i += 1
    return tuple(out)


def merge_pair(words: Dict[Word, int], pair: Pair, merged: str) -> Dict[Word, int]:
    out: Dict[Word, int] = {}
    for w, freq in words.items():
        nw = merge_word(w, pair, merged)
        out[nw] = out.get(nw, 0) + freq
    return out


def train_bpe(
    lines: Iterable[str],
    vocab_size: int,
    user_defined_symbols: Iterable[str] = (),
    max_merges: int = MAX_MERGES,
    verbose: bool = False,
    log_every: int = 1000,
) -> Tuple[Vocabulary, List[Pair]]:
    """
    Byte-pair-encoding style training over characters.

    - seed: specials, then every distinct character in first-seen order
    - repeat: merge the most frequent adjacent pair (weighted by word count)
      until the vocabulary holds vocab_size tokens, max_merges merges were
      done, or no word has two symbols left
    - finally: user symbols, not capped by vocab_size

    Returns the vocabulary and the merges in the order they were applied.
    """
    words = word_counts(lines)

    vocab = Vocabulary()
    for w in words:
        for ch in w:
            vocab.add(ch)

    merges: List[Pair] = []
    while vocab.size() < vocab_size and len(merges) < max_merges:
        stats = get_stats(words)
        if not stats:
            break
        (a, b), freq = best_pair(stats)
        merged = a + b
        vocab.add(merged)
        merges.append((a, b))
        words = merge_pair(words, (a, b), merged)

        if verbose and len(merges) % log_every == 0:
            print(f"[ftok] merge {len(merges)}: {a!r} + {b!r} (freq {freq}), vocab_size = {vocab.size()}")

    if verbose and 0 < max_merges <= len(merges) and vocab.size() < vocab_size:
        print(f"[ftok] stopped at max_merges={max_merges}")

    add_user_symbols(vocab, user_defined_symbols)
    return vocab, merges
