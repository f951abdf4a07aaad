"""Command-line interface: print Kölner Phonetik codes.

Words come from the arguments, or one per line from a file / stdin.
Output is "<word>\\t<code>" per word.
"""

from __future__ import annotations
import argparse
import contextlib
import logging
import sys
from typing import BinaryIO, ContextManager

from .phonetic import encode_words
from .wordlist import decode_bytes


def _open_bytes(path: str) -> ContextManager[BinaryIO]:
    if path == "-":
        return contextlib.nullcontext(sys.stdin.buffer)
    return open(path, "rb")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="koelner-phonetik", description="Encode words with the Kölner Phonetik.")
    p.add_argument("words", nargs="*", help="Words to encode")
    p.add_argument("--file", metavar="PATH", help="Read one word per line from PATH or '-' for stdin")
    p.add_argument("--verbose", action="store_true", help="Log every encoding stage to stderr")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    words = list(args.words)
    if args.file:
        try:
            with _open_bytes(args.file) as fh:
                raw = fh.read()
        except OSError as ex:
            sys.stderr.write(f"error: {ex}\n")
            return 2
        # same encoding detection as uploads
        text, _ = decode_bytes(raw)
        words.extend(line.strip() for line in text.splitlines() if line.strip())

    if not words:
        p.print_help()
        return 2

    for result in encode_words(words):
        sys.stdout.write(f"{result['word']}\t{result['code']}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
