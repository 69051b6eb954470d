# src/cli.py
import argparse

from src.tokenizer.train_wordpiece import WordPieceConfig, train_wordpiece
from src.utils.config import add_common_overrides, apply_overrides, load_yaml
from src.utils.io import list_files_with_ext

def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"intero atteso, trovato '{value}'")
    if n < 1:
        raise argparse.ArgumentTypeError(f"deve essere positivo, trovato {n}")
    return n

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="train-vocab", description="Train a WordPiece vocabulary from a directory of text files.")
    ap.add_argument("--input-files-dir-path", required=True, help="Directory con i file di testo grezzo")
    ap.add_argument("--input-file-ext", required=True, help="Estensione dei file di input (es. txt)")
    ap.add_argument("--output-vocab-file-dir-path", required=True, help="Directory in cui scrivere vocab.json")
    ap.add_argument("--vocab-size", required=True, type=_positive_int, help="Dimensione target del vocabolario")
    add_common_overrides(ap)   # --cfg ... --override k=v ...
    return ap

def cmd_train_vocab(args):
    # 1) file di input
    files = list_files_with_ext(args.input_files_dir_path, args.input_file_ext)

    # 2) config del trainer + override da CLI
    cfg = load_yaml(args.cfg)
    cfg = apply_overrides(cfg, args.override)
    config = WordPieceConfig.from_dict(args.vocab_size, cfg)

    # 3) training + salvataggio
    return train_wordpiece(files, args.output_vocab_file_dir_path, config)

def main(argv=None):
    args = build_parser().parse_args(argv)
    cmd_train_vocab(args)

if __name__ == "__main__":
    main()
