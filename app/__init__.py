"""Kölner Phonetik (Cologne phonetics) encoding for German words."""

from .classify import classify, code_for
from .collapse import collapse
from .normalize import normalize
from .phonetic import encode_words, phonetic_code, phonetic_string

__all__ = [
    "classify",
    "code_for",
    "collapse",
    "normalize",
    "encode_words",
    "phonetic_code",
    "phonetic_string",
]
