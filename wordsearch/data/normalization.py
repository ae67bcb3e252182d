"""Helpers that turn free-form word lists into generator input."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

SEPARATOR_RE = re.compile(r"[\n,]+")
WORD_RE = re.compile(r"[^A-Za-z]")


def clean_word(text: str) -> str:
    """Return an uppercase ASCII-letters-only representation of ``text``."""

    if not text:
        return ""
    return WORD_RE.sub("", text).upper()


def parse_word_list(
    text: str,
    min_length: int = 2,
    unique: bool = False,
    letters_only: bool = False,
) -> List[str]:
    """Split newline or comma separated input into uppercase words.

    Entries shorter than ``min_length`` after trimming are dropped. With
    ``unique`` the first occurrence of each word is kept; ``letters_only``
    strips everything but ASCII letters first.
    """

    words: List[str] = []
    seen = set()
    for chunk in SEPARATOR_RE.split(text or ""):
        word = clean_word(chunk) if letters_only else chunk.strip().upper()
        if len(word) < min_length:
            continue
        if unique:
            if word in seen:
                continue
            seen.add(word)
        words.append(word)
    return words


def read_words_file(
    path: Path | str,
    min_length: int = 2,
    unique: bool = False,
    letters_only: bool = False,
) -> List[str]:
    """Read words from a file. Blank lines and # comments are skipped."""

    lines: List[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    return parse_word_list(
        "\n".join(lines), min_length=min_length, unique=unique, letters_only=letters_only
    )


__all__ = ["clean_word", "parse_word_list", "read_words_file"]
