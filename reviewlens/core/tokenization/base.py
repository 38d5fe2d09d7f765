from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class Tokenizer(ABC):
    """Port: split raw review text into tokens and sentences."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]: ...

    @abstractmethod
    def split_sentences(self, text: str) -> List[str]: ...
