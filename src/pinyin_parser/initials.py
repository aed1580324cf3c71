from __future__ import annotations

from enum import Enum


class SpellingInitial(Enum):
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
    ZH = "zh"
    CH = "ch"
    SH = "sh"
    R = "r"
    Z = "z"
    C = "c"
    S = "s"
    Y = "y"
    W = "w"
    # Syllable opens directly on a, e or o.
    ZERO_AEO = ""


class ZCS(Enum):
    Z = "z"
    C = "c"
    S = "s"

    @property
    def plain(self) -> SpellingInitial:
        return SpellingInitial(self.value)

    @property
    def retroflex(self) -> SpellingInitial:
        return SpellingInitial(self.value + "h")
