from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .graphemes import split_graphemes


class Alphabet(Enum):
    B = "b"
    P = "p"
    M = "m"
    F = "f"
    D = "d"
    T = "t"
    N = "n"
    L = "l"
    G = "g"
    K = "k"
    H = "h"
    J = "j"
    Q = "q"
    X = "x"
    R = "r"
    Y = "y"
    W = "w"
    Z = "z"
    C = "c"
    S = "s"
    A = "a"
    E = "e"
    O = "o"
    I = "i"  # noqa: E741
    U = "u"
    NG = "ŋ"


class Diacritic(Enum):
    MACRON = "\u0304"
    ACUTE = "\u0301"
    CARON = "\u030c"
    GRAVE = "\u0300"
    CIRCUMFLEX = "\u0302"
    DIAERESIS = "\u0308"
    BREVE = "\u0306"


_LETTERS = {a.value: a for a in Alphabet}
_MARKS = {d.value: d for d in Diacritic}


@dataclass(frozen=True)
class AlphabeticToken:
    letter: Alphabet
    diacritics: tuple[Diacritic, ...] = ()
    uppercase: bool = False
    text: str = ""

    def to_str(self, preserve_capitalization: bool = False, strict: bool = False) -> str:
        from .render import render_token

        return render_token(self, preserve_capitalization=preserve_capitalization, strict=strict)


@dataclass(frozen=True)
class PunctuationToken:
    text: str


@dataclass(frozen=True)
class SpaceToken:
    text: str


PinyinToken = Union[AlphabeticToken, PunctuationToken, SpaceToken]


def _dedupe(marks: list[Diacritic]) -> tuple[Diacritic, ...]:
    return tuple(dict.fromkeys(marks))


def to_token(grapheme: str) -> PinyinToken:
    """
    Classify one grapheme cluster.

    - Whitespace becomes a SpaceToken.
    - A pinyin letter (any case, precomposed or combining marks) becomes an
      AlphabeticToken, provided every mark on it is a known diacritic.
    - `v` is read as `ü`.
    - Everything else is a PunctuationToken.
    """
    if grapheme.isspace():
        return SpaceToken(grapheme)

    decomposed = unicodedata.normalize("NFD", grapheme)
    if not decomposed:
        return PunctuationToken(grapheme)
    base, rest = decomposed[0], decomposed[1:]

    marks: list[Diacritic] = []
    lower = base.lower()
    if lower == "v":
        lower = "u"
        marks.append(Diacritic.DIAERESIS)
    letter = _LETTERS.get(lower)
    if letter is None:
        return PunctuationToken(grapheme)

    for ch in rest:
        mark = _MARKS.get(ch)
        if mark is None:
            return PunctuationToken(grapheme)
        marks.append(mark)

    return AlphabeticToken(
        letter=letter,
        diacritics=_dedupe(marks),
        uppercase=base.isupper(),
        text=grapheme,
    )


def tokenize(text: str) -> list[PinyinToken]:
    return [to_token(g) for g in split_graphemes(text)]
