from __future__ import annotations

import re
import unicodedata

import regex


_SPACES = re.compile(r"\s+")
_GRAPHEME = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """
    Split text into extended grapheme clusters.

    The text is not normalized, so joining the result gives back the input.
    """
    if not text:
        return []
    return _GRAPHEME.findall(text)


def normalize_pinyin_text(text: str) -> str:
    # Display only; the parser always sees the raw input.
    text = unicodedata.normalize("NFC", text)
    text = text.strip()
    text = _SPACES.sub(" ", text)
    return text
