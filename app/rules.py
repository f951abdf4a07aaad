"""
Deterministic encoding rules.

Everything in here is read-only and built once at import time:
- the substitution table applied during normalization
- the ordered classification rules (first match wins)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple

# Applied in order, each as a global literal replace.
SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("ç", "c"),
    ("v", "f"),
    ("w", "f"),
    ("j", "i"),
    ("y", "i"),
    ("ph", "f"),
    ("ä", "a"),
    ("ö", "o"),
    ("ü", "u"),
    ("ß", "ss"),
    ("é", "e"),
    ("è", "e"),
    ("ê", "e"),
    ("à", "a"),
    ("á", "a"),
    ("â", "a"),
    ("ë", "e"),
)

ALLOWED_CHARS_PATTERN = r"[^A-Za-z0-9 ]"

INITIAL_C_HARD = frozenset("ahkloqrux")
C_HARD = frozenset("ahkoqux")
C_SOFT_AFTER = frozenset("sz")
DT_SOFT_BEFORE = frozenset("csz")
X_SOFT_AFTER = frozenset("ckq")

# Slot values produced for one input character.
Slots = Tuple[Optional[str], ...]
NO_CODE: Slots = (None,)


class Context(NamedTuple):
    char: str
    prev: Optional[str]
    next: Optional[str]
    position: int


@dataclass(frozen=True)
class Rule:
    """A single classification rule.

    Matches when `context.char` is in `letters` and `when` accepts the context.
    """
    letters: str
    slots: Slots
    when: Optional[Callable[[Context], bool]] = None

    def matches(self, ctx: Context) -> bool:
        if ctx.char not in self.letters:
            return False
        return self.when is None or self.when(ctx)


def _initial(ctx: Context) -> bool:
    return ctx.position == 0


def _initial_alone(ctx: Context) -> bool:
    return ctx.position == 0 and ctx.next is None


def _initial_hard(ctx: Context) -> bool:
    return ctx.position == 0 and ctx.next in INITIAL_C_HARD


def _last(ctx: Context) -> bool:
    return ctx.next is None


def _before_soft_dt(ctx: Context) -> bool:
    return ctx.next in DT_SOFT_BEFORE


def _hard_after_sibilant(ctx: Context) -> bool:
    return ctx.next in C_HARD and ctx.prev in C_SOFT_AFTER


def _hard(ctx: Context) -> bool:
    return ctx.next in C_HARD


def _after_ckq(ctx: Context) -> bool:
    return ctx.prev in X_SOFT_AFTER


RULES: Tuple[Rule, ...] = (
    # word-initial c
    Rule("c", ("8",), _initial_alone),
    Rule("c", ("4",), _initial_hard),
    Rule("c", ("8",), _initial),
    Rule("aeiou", ("0",)),
    Rule("bp", ("1",)),
    Rule("dt", ("8",), _before_soft_dt),
    Rule("dt", ("2",)),
    Rule("f", ("3",)),
    Rule("gkq", ("4",)),
    Rule("c", ("4",), _last),
    Rule("c", ("8",), _hard_after_sibilant),
    Rule("c", ("4",), _hard),
    Rule("c", ("8",)),
    Rule("x", ("8",), _after_ckq),
    Rule("x", ("4", "8")),
    Rule("l", ("5",)),
    Rule("mn", ("6",)),
    Rule("r", ("7",)),
    Rule("sz", ("8",)),
)
