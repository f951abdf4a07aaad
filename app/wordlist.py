"""
Word list decoding for file uploads.

Responsibilities:
- encoding detection + decoding
- dialect detection for CSV word lists
- extracting the words to encode
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Dict, List, Tuple

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

CSV_DELIMITERS = [",", ";", "\t", "|"]


def decode_bytes(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - If decode fails, fall back to UTF-8 and then to replacement characters.
    - A leading UTF-8 BOM is never part of the text.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
        except UnicodeDecodeError:
            # Last resort: keep going with replacement characters
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True
        logger.warning("decode with %r failed, used %r", detected, decode_used)

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    return text, report


def _csv_cells(text: str) -> Tuple[List[str], str, bool]:
    sample = text[:4096]
    delimiter = ","
    sniffed = False
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=CSV_DELIMITERS)
        delimiter = dialect.delimiter
        sniffed = True
    except csv.Error:
        delimiter = ","  # default

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    cells = [cell for row in reader for cell in row]
    return cells, delimiter, sniffed


def extract_words(raw: bytes, filename: str) -> Tuple[List[str], Dict[str, Any]]:
    """
    Decode a .txt or .csv upload into its words.

    .txt files hold one word per line; .csv files contribute every cell.
    Blank entries are skipped, surrounding whitespace is removed.
    """
    text, report = decode_bytes(raw)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    if filename.lower().endswith(".csv"):
        entries, delimiter, sniffed = _csv_cells(text)
        report["delimiter"] = {"detected": delimiter, "sniffed": sniffed}
    else:
        entries = text.split("\n")

    words = [e.strip() for e in entries if e.strip()]
    return words, report
