"""
Pre-tokenizer custom: spezza il testo su ogni carattere di whitespace
scartando i delimitatori.

I componenti Python custom non sono serializzabili da ``tokenizers``: al
salvataggio va usato ``serializable_pre_tokenizer()``, che ha lo stesso
comportamento.
"""
from __future__ import annotations

from typing import List

from tokenizers import NormalizedString, PreTokenizedString, Regex
from tokenizers.pre_tokenizers import PreTokenizer, WhitespaceSplit

WHITESPACE = Regex(r"\s+")


class WhitespaceSplitter:
    def whitespace_split(self, i: int, normalized_string: NormalizedString) -> List[NormalizedString]:
        return normalized_string.split(WHITESPACE, "removed")

    def pre_tokenize(self, pretok: PreTokenizedString):
        pretok.split(self.whitespace_split)


def whitespace_pre_tokenizer() -> PreTokenizer:
    return PreTokenizer.custom(WhitespaceSplitter())


def serializable_pre_tokenizer() -> PreTokenizer:
    return WhitespaceSplit()
