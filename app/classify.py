"""Per-character classification of a normalized word into code slots."""

from __future__ import annotations

from typing import List, Optional

from .rules import NO_CODE, RULES, Context, Slots


def code_for(char: str, prev: Optional[str], nxt: Optional[str], position: int) -> Slots:
    """
    Return the slots for one character.

    Most characters yield a single slot. "x" outside of "cx", "kx", "qx"
    yields two ("4", "8"). Characters without a rule yield NO_CODE.
    """
    ctx = Context(char, prev, nxt, position)
    for rule in RULES:
        if rule.matches(ctx):
            return rule.slots
    return NO_CODE


def classify(word: str) -> List[Optional[str]]:
    # Neighbours are positional: spaces and digits count as neighbours.
    codes: List[Optional[str]] = []
    last = len(word) - 1
    for i, char in enumerate(word):
        prev = word[i - 1] if i > 0 else None
        nxt = word[i + 1] if i < last else None
        codes.extend(code_for(char, prev, nxt, i))
    return codes
