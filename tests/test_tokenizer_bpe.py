"""Tests for BPE vocabulary training."""

from ftok.tokenizer_bpe import best_pair, get_stats, merge_word, train_bpe, word_counts
from ftok.vocab import SPECIALS


def test_word_counts_keep_first_seen_order():
    words = word_counts(["ba ab", "ba"])
    assert list(words.items()) == [(("b", "a"), 2), (("a", "b"), 1)]


def test_pair_counts_are_weighted_by_word_frequency():
    stats = get_stats(word_counts(["aa aa ab"]))
    assert stats == {("a", "a"): 2, ("a", "b"): 1}


def test_first_merge_is_most_frequent_pair():
    vocab, merges = train_bpe(["aa aa ab"], vocab_size=7)
    assert merges == [("a", "a")]
    assert vocab.snapshot() == SPECIALS + ["a", "b", "aa"]


def test_ties_go_to_first_enumerated_pair():
    stats = get_stats(word_counts(["cd ab"]))
    assert best_pair(stats) == (("c", "d"), 1)


def test_merge_is_left_to_right_and_non_overlapping():
    assert merge_word(("a", "a", "a"), ("a", "a"), "aa") == ("aa", "a")
    assert merge_word(("a", "a", "a", "a"), ("a", "a"), "aa") == ("aa", "aa")
    assert merge_word(("b", "a"), ("a", "a"), "aa") == ("b", "a")


def test_characters_seeded_in_first_seen_order():
    vocab, merges = train_bpe(["zyx xyz"], vocab_size=0)
    assert merges == []
    assert vocab.snapshot() == SPECIALS + ["z", "y", "x"]


def test_stops_when_no_pairs_remain():
    vocab, merges = train_bpe(["ab ab"], vocab_size=1000)
    assert merges == [("a", "b")]
    assert vocab.snapshot() == SPECIALS + ["a", "b", "ab"]


def test_stops_at_max_merges():
    vocab, merges = train_bpe(["abcdefgh"], vocab_size=1000, max_merges=2)
    assert len(merges) == 2
    assert vocab.size() == 4 + 8 + 2


def test_multi_char_tokens_are_built_from_earlier_tokens():
    lines = ["low lower lowest newer wider new low low"]
    vocab, _ = train_bpe(lines, vocab_size=40)
    tokens = vocab.snapshot()
    assert len(set(tokens)) == len(tokens)
    for i, tok in enumerate(tokens):
        if tok in SPECIALS or len(tok) == 1:
            continue
        earlier = set(tokens[:i])
        assert any(tok[:k] in earlier and tok[k:] in earlier for k in range(1, len(tok)))


def test_user_symbols_are_appended_past_vocab_size():
    vocab, _ = train_bpe(["ab"], vocab_size=6, user_defined_symbols=["<mask>", "a"])
    assert vocab.snapshot() == SPECIALS + ["a", "b", "<mask>"]


def test_training_is_deterministic():
    lines = ["the quick brown fox", "jumps over the lazy dog", "the end"]
    v1, m1 = train_bpe(lines, vocab_size=60)
    v2, m2 = train_bpe(lines, vocab_size=60)
    assert v1.snapshot() == v2.snapshot()
    assert m1 == m2


def test_verbose_prints_progress(capsys):
    train_bpe(["abab abab"], vocab_size=100, verbose=True, log_every=1)
    out = capsys.readouterr().out
    assert "[ftok] merge 1:" in out


def test_no_break_space_is_a_symbol_not_a_separator():
    words = word_counts(["a\u00a0b a\u00a0b"])
    assert words == {("a", "\u00a0", "b"): 2}
    vocab, _ = train_bpe(["a\u00a0b"], vocab_size=0)
    assert vocab.snapshot() == SPECIALS + ["a", "\u00a0", "b"]


def test_max_merges_message_only_after_merging(capsys):
    train_bpe(["abcd"], vocab_size=100, max_merges=0, verbose=True)
    assert "max_merges" not in capsys.readouterr().out

    train_bpe(["abcd"], vocab_size=100, max_merges=1, verbose=True)
    assert "[ftok] stopped at max_merges=1" in capsys.readouterr().out
