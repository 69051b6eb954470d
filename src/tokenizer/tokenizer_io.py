from typing import Dict, List

from tokenizers import Tokenizer

class TokWrapper:
    def __init__(self, path: str):
        self.tk = Tokenizer.from_file(path)
        self._unk_id = self.tk.token_to_id("[UNK]")
        if self._unk_id is None:
            raise ValueError(f"Tokenizer {path} privo di [UNK]: rigenera il vocabolario WordPiece.")

    def encode(self, text: str) -> List[int]:
        return self.tk.encode(text).ids

    def tokens(self, text: str) -> List[str]:
        return self.tk.encode(text).tokens

    def decode(self, ids: List[int]) -> str:
        return self.tk.decode(ids)

    def token_to_id(self, tok: str):
        return self.tk.token_to_id(tok)

    @property
    def unk_id(self): return self._unk_id

    def vocab_size(self): return self.tk.get_vocab_size()

    def get_vocab(self) -> Dict[str, int]:
        return self.tk.get_vocab()
