"""
Caricamento semplice di YAML in dict, con override ``chiave=valore`` da CLI.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, Optional
import yaml, argparse

def load_yaml(path: Optional[str]) -> Dict[str, Any]:
    """Carica un file YAML; ``None`` o file vuoto -> dict vuoto."""
    if path is None:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path}: atteso un mapping YAML, trovato {type(cfg).__name__}")
    return cfg

def add_common_overrides(ap: argparse.ArgumentParser):
    ap.add_argument("--cfg", default=None, help="path yaml (es. configs/tokenizer/wordpiece.yaml)")
    ap.add_argument("--override", nargs="*", default=[], help="chiave=valore (facoltative)")

def _coerce(v: str):
    # prova a castare numeri/bool
    if v.lower() in ("true", "false"):
        return v.lower() == "true"
    try:
        return float(v) if "." in v else int(v)
    except ValueError:
        return v

def apply_overrides(cfg: dict, kv_list: Iterable[str]):
    for kv in kv_list:
        if "=" not in kv:
            raise ValueError(f"Override non valido '{kv}': atteso chiave=valore")
        k, v = kv.split("=", 1)
        # supporto chiavi annidate a punto
        cur, *rest = k.split(".")
        node = cfg
        while rest:
            if cur not in node: node[cur] = {}
            node = node[cur]; cur, *rest = rest
        node[cur] = _coerce(v)
    return cfg
