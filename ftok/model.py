# ftok/model.py
from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from . import segment
from .config import MAX_MERGES, TokenizerConfig, TokenizerMode
from .fileio import read_lines
from .tokenizer_bpe import train_bpe
from .tokenizer_word import train_word_level
from .vocab import Vocabulary


class TokenizerModel:
    """
    One vocabulary, one mode, one lock.

    Every public method runs under a re-entrant lock, so calls on the same
    model are serialized and may nest. Independent models share nothing.

    - train*: replace the vocabulary with a freshly trained one and set the mode
    - load:   replace the vocabulary with the token list of a file
    - everything else only reads the vocabulary
    """

    def __init__(self, mode: str | TokenizerMode = TokenizerMode.WORD):
        self._lock = threading.RLock()
        self._mode = TokenizerMode.parse(mode)
        self._vocab = Vocabulary()
        self.merges: List[Tuple[str, str]] = []

    @classmethod
    def from_file(cls, path: str | Path, mode: str | TokenizerMode = TokenizerMode.WORD) -> "TokenizerModel":
        model = cls(mode)
        model.load(path)
        return model

    # -----------------------------
    # training
    # -----------------------------
    def train(
        self,
        corpus_path: str | Path,
        vocab_size: int = 10000,
        user_symbols: Sequence[str] = (),
        mode: str | TokenizerMode | None = None,
        max_merges: int = MAX_MERGES,
        verbose: bool = False,
    ) -> None:
        """Train from a UTF-8 corpus file. Raises FileAccessError if it cannot be read."""
        with self._lock:
            lines = read_lines(corpus_path)
            self.train_from_iterator(lines, vocab_size, user_symbols, mode, max_merges, verbose)

    def train_from_config(self, corpus_path: str | Path, cfg: TokenizerConfig) -> None:
        self.train(
            corpus_path,
            vocab_size=cfg.vocab_size,
            user_symbols=cfg.user_defined_symbols,
            mode=cfg.mode,
            max_merges=cfg.max_merges,
            verbose=cfg.verbose,
        )

    def train_from_iterator(
        self,
        lines: Iterable[str],
        vocab_size: int = 10000,
        user_symbols: Sequence[str] = (),
        mode: str | TokenizerMode | None = None,
        max_merges: int = MAX_MERGES,
        verbose: bool = False,
    ) -> None:
        mode = self._mode if mode is None else TokenizerMode.parse(mode)
        if vocab_size < 0:
            raise ValueError(f"vocab_size must be >= 0, got {vocab_size}")

        with self._lock:
            if mode == TokenizerMode.WORD:
                vocab = train_word_level(lines, vocab_size, user_symbols)
                merges = []
            else:
                vocab, merges = train_bpe(
                    lines, vocab_size, user_symbols, max_merges=max_merges, verbose=verbose
                )

            self._vocab = vocab
            self.merges = merges
            self._mode = mode

            if verbose:
                print(f"[ftok] trained {mode.value} vocabulary")
                print(f"    vocab_size = {vocab.size()}, merges = {len(merges)}")

    def train_word_level(self, corpus_path: str | Path, vocab_size: int, user_symbols: Sequence[str] = ()) -> None:
        self.train(corpus_path, vocab_size, user_symbols, mode=TokenizerMode.WORD)

    def train_bpe(
        self,
        corpus_path: str | Path,
        vocab_size: int,
        user_symbols: Sequence[str] = (),
        max_merges: int = MAX_MERGES,
    ) -> None:
        self.train(corpus_path, vocab_size, user_symbols, mode=TokenizerMode.BPE, max_merges=max_merges)

    # -----------------------------
    # persistence
    # -----------------------------
    def save(self, path: str | Path) -> None:
        with self._lock:
            self._vocab.save(path)

    def load(self, path: str | Path, mode: str | TokenizerMode | None = None) -> None:
        """
        Replace the vocabulary with the file's tokens. The file has no mode, so
        the current one is kept unless given. Merge history is not stored.
        """
        with self._lock:
            vocab = Vocabulary.load(path)
            self._vocab = vocab
            self.merges = []
            if mode is not None:
                self._mode = TokenizerMode.parse(mode)

    # -----------------------------
    # encode / decode
    # -----------------------------
    def encode_as_ids(self, text: str, add_sos: bool = False, add_eos: bool = False) -> List[int]:
        with self._lock:
            return segment.encode_as_ids(text, self._vocab, self._mode, add_sos=add_sos, add_eos=add_eos)

    def encode_as_tokens(self, text: str) -> List[str]:
        with self._lock:
            return segment.encode_as_tokens(text, self._vocab, self._mode)

    def decode_ids(self, ids: Iterable[int], skip_specials: bool = False) -> str:
        with self._lock:
            return segment.decode_ids(ids, self._vocab, self._mode, skip_specials=skip_specials)

    def decode_tokens(self, tokens: Iterable[str]) -> str:
        with self._lock:
            return segment.decode_tokens(tokens, self._vocab, self._mode)

    # -----------------------------
    # lookups
    # -----------------------------
    def token_to_id(self, token: str) -> int:
        with self._lock:
            return self._vocab.token_to_id(token)

    def id_to_token(self, idx: int) -> str:
        with self._lock:
            return self._vocab.id_to_token(idx)

    def size(self) -> int:
        with self._lock:
            return self._vocab.size()

    def vocab_snapshot(self) -> List[str]:
        with self._lock:
            return self._vocab.snapshot()

    @property
    def vocab_size(self) -> int:
        return self.size()

    @property
    def mode(self) -> TokenizerMode:
        with self._lock:
            return self._mode

    @property
    def pad_id(self) -> Optional[int]:
        with self._lock:
            return self._vocab.pad_id

    @property
    def unk_id(self) -> Optional[int]:
        with self._lock:
            return self._vocab.unk_id

    @property
    def sos_id(self) -> Optional[int]:
        with self._lock:
            return self._vocab.sos_id

    @property
    def eos_id(self) -> Optional[int]:
        with self._lock:
            return self._vocab.eos_id

    # older method names
    train_from_textfile = train
    save_model = save
    load_model = load
    get_token_size = size
    get_vocab = vocab_snapshot
