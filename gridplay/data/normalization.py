"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Accented letters are folded onto their base letter and anything that is
    not a letter is dropped, so ``"Café-au-lait"`` becomes ``"CAFEAULAIT"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_word = decomposed.encode("ascii", "ignore").decode("ascii").upper()
    return WORD_RE.sub("", ascii_word)


def is_alphabetic(text: str) -> bool:
    return bool(text) and all(char.isascii() and char.isalpha() for char in text)


__all__ = ["clean_word", "is_alphabetic"]
