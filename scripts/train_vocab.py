#!/usr/bin/env python
"""
Allena un vocabolario WordPiece da una directory di file di testo.

Usage:
  python scripts/train_vocab.py \
    --input-files-dir-path data/raw/corpus \
    --input-file-ext txt \
    --output-vocab-file-dir-path data/vocab \
    --vocab-size 30000 \
    [--cfg configs/tokenizer/wordpiece.yaml] [--override limit_alphabet=500]
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.cli import main

if __name__ == "__main__":
    main()
