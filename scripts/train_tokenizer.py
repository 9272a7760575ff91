# scripts/train_tokenizer.py
import argparse

from ftok.config import TokenizerConfig
from ftok.model import TokenizerModel


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Train a word-level or BPE vocabulary on a text corpus.")
    p.add_argument("--corpus-path", type=str, required=True)
    p.add_argument("--out", type=str, required=True,
                   help="Output vocabulary file (one token per line)")
    p.add_argument("--mode", type=str, default="word", choices=["word", "bpe"])
    p.add_argument("--vocab-size", type=int, default=10000)
    p.add_argument("--user-symbol", action="append", default=[],
                   help="Symbol that always gets a slot; may be repeated")
    p.add_argument("--max-merges", type=int, default=50000)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    cfg = TokenizerConfig(
        mode=args.mode,
        vocab_size=args.vocab_size,
        user_defined_symbols=args.user_symbol,
        max_merges=args.max_merges,
        verbose=args.verbose,
    )
    tok = TokenizerModel(cfg.mode)
    tok.train_from_config(args.corpus_path, cfg)
    tok.save(args.out)
    print(f"[ftok] saved {args.out}")
    print(f"    mode = {cfg.mode.value}, vocab_size = {tok.size()}, merges = {len(tok.merges)}")


if __name__ == "__main__":
    main()
