from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from .pinyin_token import Diacritic

if TYPE_CHECKING:
    from .pinyin_token import AlphabeticToken


# Marks that loose input commonly uses in place of the standard tone mark.
_LOOSE_EQUIVALENTS = {
    Diacritic.BREVE: Diacritic.CARON,
}


def render_token(token: AlphabeticToken, preserve_capitalization: bool = False, strict: bool = False) -> str:
    """
    Render one alphabetic token as display text.

    Letters are lowercased unless `preserve_capitalization` is set and the
    token was written uppercase. In loose mode a breve is shown as a caron;
    strict mode keeps every mark as written.
    """
    letter = token.letter.value
    if preserve_capitalization and token.uppercase:
        letter = letter.upper()

    marks = token.diacritics
    if not strict:
        marks = tuple(dict.fromkeys(_LOOSE_EQUIVALENTS.get(m, m) for m in marks))

    return unicodedata.normalize("NFC", letter + "".join(m.value for m in marks))
