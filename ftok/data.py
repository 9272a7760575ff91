# ftok/data.py
import torch
from typing import Tuple

from .config import DataConfig
from .model import TokenizerModel


def load_tokenizer(cfg: DataConfig) -> TokenizerModel:
    if not cfg.tokenizer_path:
        raise ValueError("DataConfig.tokenizer_path is required to load a tokenizer")
    return TokenizerModel.from_file(cfg.tokenizer_path, mode=cfg.tokenizer_mode)


class TokenDataset:
    """
    Token-level dataset driven by a trained TokenizerModel (word or BPE).

    Responsible for:
    - encoding the whole text once
    - splitting train/val by cfg.train_frac
    - providing random (x, y) next-token batches
    """

    def __init__(self, text: str, cfg: DataConfig, tokenizer: TokenizerModel):
        self.cfg = cfg
        self.tokenizer = tokenizer
        self.vocab_size = tokenizer.size()

        ids = tokenizer.encode_as_ids(text)
        data = torch.tensor(ids, dtype=torch.long)

        n = int(cfg.train_frac * len(data))
        self.train_data = data[:n]
        self.val_data = data[n:]

    def encode(self, s: str):
        return self.tokenizer.encode_as_ids(s)

    def decode(self, ids):
        return self.tokenizer.decode_ids(ids)

    def get_batch(self, split: str, batch_size: int) -> Tuple[torch.Tensor, torch.Tensor]:
        data = self.train_data if split == "train" else self.val_data
        block_size = self.cfg.block_size

        if len(data) <= block_size + 1:
            raise ValueError(
                f"{split} split holds {len(data)} token ids; "
                f"need more than block_size + 1 = {block_size + 1}"
            )
        # each row is a window of block_size + 1 ids; x and y are its two shifted views
        starts = torch.randint(0, len(data) - block_size, (batch_size, 1))
        windows = data[starts + torch.arange(block_size + 1)]
        return windows[:, :-1], windows[:, 1:]
