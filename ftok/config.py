# ftok/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

MAX_MERGES = 50000


class TokenizerMode(str, Enum):
    WORD = "word"
    BPE = "bpe"

    @classmethod
    def parse(cls, value: "str | TokenizerMode") -> "TokenizerMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            raise ValueError(
                f"Unknown tokenizer mode={value!r}. Supported: {[m.value for m in cls]}"
            ) from None


@dataclass
class TokenizerConfig:
    mode: TokenizerMode = TokenizerMode.WORD
    vocab_size: int = 10000             # word: tokens added after specials, bpe: total size
    user_defined_symbols: List[str] = field(default_factory=list)
    max_merges: int = MAX_MERGES        # bpe only; safety valve for pathological corpora
    verbose: bool = False

    def __post_init__(self):
        self.mode = TokenizerMode.parse(self.mode)
        if self.vocab_size < 0:
            raise ValueError(f"vocab_size must be >= 0, got {self.vocab_size}")
        if self.max_merges < 0:
            raise ValueError(f"max_merges must be >= 0, got {self.max_merges}")
        self.user_defined_symbols = list(self.user_defined_symbols)


@dataclass
class DataConfig:
    block_size: int = 64
    train_frac: float = 0.9

    # Tokenization controls
    tokenizer_path: str = ""            # vocabulary file written by TokenizerModel.save
    tokenizer_mode: str = "word"        # "word" or "bpe"

    def __post_init__(self):
        if not 0.0 < self.train_frac <= 1.0:
            raise ValueError(f"train_frac must be in (0, 1], got {self.train_frac}")
