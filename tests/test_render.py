import unicodedata

from pinyin_parser.pinyin_token import to_token
from pinyin_parser.render import render_token


def test_render_lowercases_by_default():
    assert render_token(to_token("\u1e3e")) == "\u1e3f"


def test_render_preserves_capitalization():
    assert render_token(to_token("\u1e3e"), preserve_capitalization=True) == "\u1e3e"


def test_render_composes_combining_marks():
    assert render_token(to_token("n\u0301")) == "\u0144"


def test_loose_render_maps_breve_to_caron():
    assert render_token(to_token("n\u0306")) == "\u0148"


def test_strict_render_keeps_breve():
    assert render_token(to_token("n\u0306"), strict=True) == "n\u0306"


def test_render_keeps_mark_order():
    out = render_token(to_token("z\u0302\u0301"))
    assert out == unicodedata.normalize("NFC", "z\u0302\u0301")


def test_to_str_matches_render_token():
    tok = to_token("M\u0300")
    assert tok.to_str(True, False) == render_token(tok, preserve_capitalization=True)
