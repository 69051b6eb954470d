import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.tokenizer.train_wordpiece import SPECIAL_TOKENS, WordPieceConfig
from src.utils.config import apply_overrides, load_yaml


def test_default_config_values():
    cfg = WordPieceConfig(vocab_size=500)
    assert cfg.limit_alphabet == 1000
    assert cfg.continuing_subword_prefix == "##"
    assert cfg.show_progress is True
    assert cfg.special_tokens == SPECIAL_TOKENS
    assert len(SPECIAL_TOKENS) == 26
    assert len(set(SPECIAL_TOKENS)) == len(SPECIAL_TOKENS)
    assert SPECIAL_TOKENS[:5] == ("[PAD]", "[UNK]", "[CLS]", "[SEP]", "[MASK]")


def test_config_is_immutable():
    cfg = WordPieceConfig(vocab_size=500)
    with pytest.raises(FrozenInstanceError):
        cfg.vocab_size = 10


@pytest.mark.parametrize("bad", [0, -3])
def test_config_rejects_non_positive_vocab_size(bad):
    with pytest.raises(ValueError):
        WordPieceConfig(vocab_size=bad)


def test_added_tokens_are_special_single_word():
    added = WordPieceConfig(vocab_size=100).added_tokens()
    assert [t.content for t in added] == list(SPECIAL_TOKENS)
    assert all(t.special and t.single_word for t in added)


def test_from_dict_applies_yaml_and_overrides(tmp_path):
    path = tmp_path / "wp.yaml"
    path.write_text("limit_alphabet: 200\nshow_progress: false\n", encoding="utf-8")

    raw = apply_overrides(load_yaml(str(path)), ["min_frequency=2"])
    cfg = WordPieceConfig.from_dict(64, raw)

    assert cfg.vocab_size == 64
    assert cfg.limit_alphabet == 200
    assert cfg.show_progress is False
    assert cfg.min_frequency == 2
    assert cfg.special_tokens == SPECIAL_TOKENS


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="sconosciute"):
        WordPieceConfig.from_dict(64, {"vocab": 10})


def test_from_dict_requires_unk_token():
    with pytest.raises(ValueError):
        WordPieceConfig.from_dict(64, {"special_tokens": ["[CLS]", "[SEP]"]})


def test_bundled_yaml_matches_defaults():
    raw = load_yaml(str(ROOT / "configs" / "tokenizer" / "wordpiece.yaml"))
    assert WordPieceConfig.from_dict(30, raw) == WordPieceConfig(vocab_size=30)


def test_load_yaml_none_is_empty():
    assert load_yaml(None) == {}


def test_apply_overrides_nested_and_typed():
    cfg = apply_overrides({}, ["a.b=3", "c=0.5", "d=true", "e=name"])
    assert cfg == {"a": {"b": 3}, "c": 0.5, "d": True, "e": "name"}


def test_apply_overrides_rejects_missing_equals():
    with pytest.raises(ValueError):
        apply_overrides({}, ["nokey"])


@pytest.mark.parametrize("value", ["no", "yes", 1, 0])
def test_from_dict_rejects_non_bool_show_progress(value):
    with pytest.raises(ValueError, match="show_progress"):
        WordPieceConfig.from_dict(64, {"show_progress": value})


def test_from_dict_rejects_non_bool_show_progress_override():
    raw = apply_overrides({}, ["show_progress=no"])
    with pytest.raises(ValueError, match="show_progress"):
        WordPieceConfig.from_dict(64, raw)


@pytest.mark.parametrize("value", ["[UNK] [CLS] [SEP]", ["[UNK]", "[CLS]", 3], {"[UNK]": 1}])
def test_from_dict_rejects_non_list_special_tokens(value):
    with pytest.raises(ValueError, match="special_tokens"):
        WordPieceConfig.from_dict(64, {"special_tokens": value})
