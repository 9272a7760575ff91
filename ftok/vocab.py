# ftok/vocab.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .fileio import read_lines, write_lines

SPECIAL_TOKENS = {"pad": "<pad>", "unk": "<unk>", "sos": "<sos>", "eos": "<eos>"}
SPECIALS = list(SPECIAL_TOKENS.values())
UNK = SPECIAL_TOKENS["unk"]

INVALID_ID = -1


class Vocabulary:
    """
    Bidirectional token <-> id mapping.

    - index_to_token: list, position = id, append-only
    - token_to_index: dict view of the same bijection
    - specials: logical name ("pad", "unk", "sos", "eos") -> id, or None when
      the reserved token is missing (only possible after loading a file)

    Both views are only mutated through _append so they never drift apart.
    """

    def __init__(self, tokens: Iterable[str] | None = None):
        self.token_to_index: Dict[str, int] = {}
        self.index_to_token: List[str] = []
        self.specials: Dict[str, Optional[int]] = {name: None for name in SPECIAL_TOKENS}
        self.max_token_len = 0

        if tokens is None:
            self.reset_with_specials()
        else:
            for tok in tokens:
                self._append(tok)
            self.refresh_specials()

    # -----------------------------
    # mutation
    # -----------------------------
    def _append(self, token: str) -> int:
        idx = len(self.index_to_token)
        self.index_to_token.append(token)
        # a hand-edited file may repeat a line; the last id wins
        self.token_to_index[token] = idx
        self.max_token_len = max(self.max_token_len, len(token))
        return idx

    def add(self, token: str) -> bool:
        """Append token with id == size() unless present. Returns True if added."""
        if token in self.token_to_index:
            return False
        self._append(token)
        return True

    def clear(self) -> None:
        self.token_to_index.clear()
        self.index_to_token.clear()
        self.max_token_len = 0
        self.refresh_specials()

    def reset_with_specials(self) -> None:
        """Seed the four reserved tokens at ids 0-3. A non-empty store is left as is."""
        if self.index_to_token:
            return
        for tok in SPECIALS:
            self._append(tok)
        self.refresh_specials()

    def refresh_specials(self) -> None:
        for name, tok in SPECIAL_TOKENS.items():
            self.specials[name] = self.token_to_index.get(tok)

    # -----------------------------
    # lookups (total, <unk> fallback)
    # -----------------------------
    @property
    def pad_id(self) -> Optional[int]:
        return self.specials["pad"]

    @property
    def unk_id(self) -> Optional[int]:
        return self.specials["unk"]

    @property
    def sos_id(self) -> Optional[int]:
        return self.specials["sos"]

    @property
    def eos_id(self) -> Optional[int]:
        return self.specials["eos"]

    def __len__(self) -> int:
        return len(self.index_to_token)

    def __contains__(self, token: str) -> bool:
        return token in self.token_to_index

    def size(self) -> int:
        return len(self.index_to_token)

    def snapshot(self) -> List[str]:
        return list(self.index_to_token)

    def unk_fallback_id(self) -> int:
        unk = self.unk_id
        return INVALID_ID if unk is None else unk

    def token_to_id(self, token: str) -> int:
        return self.token_to_index.get(token, self.unk_fallback_id())

    def id_to_token(self, idx: int) -> str:
        if 0 <= idx < len(self.index_to_token):
            return self.index_to_token[idx]
        unk = self.unk_id
        return UNK if unk is None else self.index_to_token[unk]

    # -----------------------------
    # persistence: one token per line, line 1 = id 0
    # -----------------------------
    def save(self, path: str | Path) -> None:
        write_lines(path, self.index_to_token)

    @staticmethod
    def load(path: str | Path) -> "Vocabulary":
        return Vocabulary(line for line in read_lines(path) if line)
