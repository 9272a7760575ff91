# scripts/encode_text.py
import argparse

from ftok.model import TokenizerModel


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Segment text with a saved ftok vocabulary.")
    parser.add_argument("--model-path", type=str, required=True,
                        help="Vocabulary file written by train_tokenizer.py")
    parser.add_argument("--mode", type=str, default="word", choices=["word", "bpe"],
                        help="Mode the vocabulary was trained in")
    parser.add_argument("--text", type=str, required=True)
    parser.add_argument("--ids", action="store_true",
                        help="Print ids instead of tokens")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    tok = TokenizerModel.from_file(args.model_path, mode=args.mode)

    if args.ids:
        ids = tok.encode_as_ids(args.text)
        print(" ".join(str(i) for i in ids))
        print(f"[ftok] decoded: {tok.decode_ids(ids)}")
    else:
        print(" | ".join(tok.encode_as_tokens(args.text)))


if __name__ == "__main__":
    main()
