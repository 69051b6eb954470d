"""
Funzioni di I/O per la raccolta dei file di training.
"""

from __future__ import annotations
import os
from typing import List, Optional

from src.utils.logging import get_logger

logger = get_logger("io")

def _extension(name: str) -> Optional[str]:
    """
    Estensione dopo l'ultimo punto, ``None`` se non c'è. ``.txt`` (solo dotfile)
    non ha estensione; ``trail.`` ha estensione vuota.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext

def list_files_with_ext(dir_path: str, ext: str) -> List[str]:
    """
    File regolari direttamente dentro ``dir_path`` (non ricorsivo) con
    estensione esattamente uguale a ``ext``. Ordinati per path.
    Se la directory non esiste o non è leggibile l'errore OS viene propagato.
    """
    files: List[str] = []
    with os.scandir(dir_path) as it:
        for entry in it:
            if entry.is_file() and _extension(entry.name) == ext:
                files.append(entry.path)
    files.sort()
    logger.info(f"{len(files)} file *.{ext} in {dir_path}")
    return files
