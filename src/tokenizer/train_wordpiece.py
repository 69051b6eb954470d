"""
Training di un vocabolario WordPiece con HF ``tokenizers``.

Pipeline: BertNormalizer (tutto disattivato) -> pre-tokenizer whitespace
custom -> modello WordPiece -> post-processor BERT, decoder WordPiece.
Il risultato viene salvato come ``<out_dir>/vocab.json`` (JSON indentato).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Sequence, Tuple

from tokenizers import AddedToken, Tokenizer, decoders
from tokenizers.models import WordPiece
from tokenizers.normalizers import BertNormalizer
from tokenizers.processors import BertProcessing
from tokenizers.trainers import WordPieceTrainer

from src.tokenizer.pre_tokenizer import serializable_pre_tokenizer, whitespace_pre_tokenizer
from src.utils.logging import get_logger

logger = get_logger("wordpiece")

VOCAB_FILE_NAME = "vocab.json"
PAD, UNK, CLS, SEP, MASK = "[PAD]", "[UNK]", "[CLS]", "[SEP]", "[MASK]"

# Marcatori di script / entità: non vengono mai spezzati
SPECIAL_TOKENS: Tuple[str, ...] = (
    PAD, UNK, CLS, SEP, MASK,
    "[AMOUNT]", "[ARAB]", "[ARMN]", "[BRAI]", "[CURR]", "[CYRL]", "[DATE]",
    "[EMAIL]", "[FOREIGN]", "[GEOR]", "[GREK]", "[HANG]", "[HANI]", "[HEBR]",
    "[HIND]", "[ISBN]", "[JAPN]", "[THAI]", "[TIME]", "[URL]", "[YEAR]",
)

# id di default di BertProcessing, sostituiti con quelli reali dopo il training
_DEFAULT_SEP_ID, _DEFAULT_CLS_ID = 102, 101


@dataclass(frozen=True)
class WordPieceConfig:
    """Parametri del trainer, immutabili per tutta la run."""

    vocab_size: int
    limit_alphabet: int = 1000
    continuing_subword_prefix: str = "##"
    special_tokens: Tuple[str, ...] = SPECIAL_TOKENS
    show_progress: bool = True
    min_frequency: int = 0

    def __post_init__(self):
        if not isinstance(self.vocab_size, int) or self.vocab_size < 1:
            raise ValueError(f"vocab_size deve essere un intero positivo, trovato {self.vocab_size!r}")
        if self.limit_alphabet < 1:
            raise ValueError(f"limit_alphabet deve essere positivo, trovato {self.limit_alphabet!r}")
        if not self.continuing_subword_prefix:
            raise ValueError("continuing_subword_prefix non può essere vuoto")
        missing = [t for t in (UNK, CLS, SEP) if t not in self.special_tokens]
        if missing:
            raise ValueError(f"special_tokens deve contenere {', '.join(missing)}")
        if len(set(self.special_tokens)) != len(self.special_tokens):
            raise ValueError("special_tokens contiene duplicati")

    @classmethod
    def from_dict(cls, vocab_size: int, cfg: Optional[Mapping[str, Any]] = None) -> "WordPieceConfig":
        """Costruisce la config da un mapping YAML (chiavi di WordPieceConfig tranne vocab_size)."""
        cfg = dict(cfg or {})
        allowed = {f.name for f in fields(cls)} - {"vocab_size"}
        unknown = sorted(set(cfg) - allowed)
        if unknown:
            raise ValueError(f"Chiavi di config sconosciute: {', '.join(unknown)}")
        if "special_tokens" in cfg:
            tokens = cfg["special_tokens"]
            if not isinstance(tokens, (list, tuple)) or not all(isinstance(t, str) for t in tokens):
                raise ValueError(f"special_tokens deve essere una lista di stringhe, trovato {tokens!r}")
            cfg["special_tokens"] = tuple(tokens)
        for k in ("limit_alphabet", "min_frequency"):
            if k in cfg:
                cfg[k] = int(cfg[k])
        if "show_progress" in cfg:
            if not isinstance(cfg["show_progress"], bool):
                raise ValueError(f"show_progress deve essere true/false, trovato {cfg['show_progress']!r}")
        return cls(vocab_size=vocab_size, **cfg)

    def added_tokens(self):
        return [AddedToken(t, single_word=True, special=True) for t in self.special_tokens]


def build_trainer(config: WordPieceConfig) -> WordPieceTrainer:
    return WordPieceTrainer(
        vocab_size=config.vocab_size,
        min_frequency=config.min_frequency,
        show_progress=config.show_progress,
        special_tokens=config.added_tokens(),
        limit_alphabet=config.limit_alphabet,
        continuing_subword_prefix=config.continuing_subword_prefix,
    )


def build_tokenizer(config: WordPieceConfig) -> Tokenizer:
    tok = Tokenizer(WordPiece(unk_token=UNK, continuing_subword_prefix=config.continuing_subword_prefix))
    tok.normalizer = BertNormalizer(
        clean_text=False,
        handle_chinese_chars=False,
        strip_accents=False,
        lowercase=False,
    )
    tok.pre_tokenizer = whitespace_pre_tokenizer()
    tok.decoder = decoders.WordPiece(prefix=config.continuing_subword_prefix, cleanup=False)
    tok.post_processor = BertProcessing((SEP, _DEFAULT_SEP_ID), (CLS, _DEFAULT_CLS_ID))
    return tok


def train_wordpiece(files: Sequence[str], out_dir: str, config: WordPieceConfig) -> Tokenizer:
    """
    Allena il tokenizer sui ``files`` e lo salva in ``out_dir/vocab.json``.
    Nessun errore viene recuperato: I/O e training propagano.
    """
    if not files:
        raise ValueError("nessun file di training: la directory di input non contiene file con l'estensione richiesta")

    tok = build_tokenizer(config)
    trainer = build_trainer(config)
    logger.info(
        f"training on {len(files)} file(s): vocab_size={config.vocab_size}, "
        f"limit_alphabet={config.limit_alphabet}, special_tokens={len(config.special_tokens)}"
    )
    tok.train(list(files), trainer=trainer)

    tok.post_processor = BertProcessing((SEP, tok.token_to_id(SEP)), (CLS, tok.token_to_id(CLS)))
    tok.pre_tokenizer = serializable_pre_tokenizer()

    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, VOCAB_FILE_NAME)
    tok.save(out_path, pretty=True)
    print(f"[tokenizer] saved -> {out_path} (vocab={tok.get_vocab_size()})")
    return tok
