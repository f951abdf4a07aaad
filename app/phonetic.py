"""
Kölner Phonetik (Cologne phonetics) encoder.

Pipeline:
- normalize: lowercase, substitute, filter
- classify: one context-sensitive code per character
- collapse: merge duplicates, drop silent slots

Words that sound alike share a code:

    >>> phonetic_string("Meier") == phonetic_string("Mayr")
    True
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from .classify import classify
from .collapse import collapse
from .normalize import normalize

logger = logging.getLogger(__name__)


def phonetic_code(word: str) -> List[str]:
    """Encode a word into its list of code digits. Never raises for str input."""
    text = word.strip()
    logger.debug("input: %r", text)
    if not text:
        return []

    normalized = normalize(text)
    logger.debug("normalized: %r", normalized)
    if not normalized:
        return []

    codes = classify(normalized)
    logger.debug("codes: %s", "".join(c or "-" for c in codes))

    result = collapse(codes)
    logger.debug("result: %s (%d)", "".join(result), len(result))
    return result


def phonetic_string(word: str) -> str:
    return "".join(phonetic_code(word))


def encode_words(words: Iterable[str]) -> List[Dict[str, Any]]:
    """
    Encode many words, preserving input order.
    Returns dicts matching the API's CodeResult model.
    """
    results: List[Dict[str, Any]] = []
    for word in words:
        digits = phonetic_code(word)
        results.append({
            "word": word,
            "normalized": normalize(word),
            "code": "".join(digits),
            "digits": digits,
        })
    return results
