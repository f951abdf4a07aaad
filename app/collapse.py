"""
Collapsing of code slots into the final code.

NOTE: this keeps the historical behaviour of the encoder rather than the
textbook algorithm:
- duplicates are merged pair-wise, so runs longer than two may leave a
  repeated digit ("5555" -> "55")
- the final slot is never emitted
- "0" is dropped everywhere, including at the start of the word
Codes therefore stay comparable with ones produced by earlier versions.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

SILENT = (None, "0")


def collapse(codes: Sequence[Optional[str]]) -> List[str]:
    out: List[str] = []
    i = 0
    n = len(codes)
    while i < n - 1:
        current = codes[i]
        if current not in SILENT:
            out.append(current)
        if current == codes[i + 1]:
            i += 2
        else:
            i += 1
    return out
