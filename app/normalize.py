"""
Word normalization, the first stage of the encoder.

Rules:
- trim, then lowercase (str.lower is locale-independent)
- apply the substitution table once, in order, as literal replaces
- drop anything that is not an ASCII letter, ASCII digit or space
"""

from __future__ import annotations

import re

from .rules import ALLOWED_CHARS_PATTERN, SUBSTITUTIONS

_DISALLOWED = re.compile(ALLOWED_CHARS_PATTERN)


def substitute(text: str) -> str:
    for pattern, replacement in SUBSTITUTIONS:
        text = text.replace(pattern, replacement)
    return text


def normalize(word: str) -> str:
    """
    Normalize a raw word for classification.

    Digits and interior spaces survive; they are classified as "no code"
    later on.
    """
    text = word.strip()
    if not text:
        return ""

    text = substitute(text.lower())
    return _DISALLOWED.sub("", text)
