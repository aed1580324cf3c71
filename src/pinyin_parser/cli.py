from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .errors import UnimplementedPathError
from .graphemes import normalize_pinyin_text
from .options import ParserOptions, load_options
from .parser import PinyinParser, PinyinParserIter
from .pinyin_token import AlphabeticToken, PunctuationToken, tokenize
from .report import write_html, write_json
from .schemas import SegmentationResult, TokenRecord


app = typer.Typer(
    add_completion=False,
    help="Segment tone-marked pinyin at syllable initials.",
    pretty_exceptions_show_locals=False,
)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _ensure_parent(path: str | Path | None) -> None:
    if not path:
        return
    p = Path(path)
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)


def _resolve_options(
    config: Optional[str],
    strict: bool,
    preserve_spaces: bool,
    preserve_punctuations: bool,
    preserve_capitalization: bool,
) -> ParserOptions:
    opts = load_options(config) if config else ParserOptions()
    # Command-line flags can only switch options on.
    if strict:
        opts = opts.with_strict(True)
    if preserve_spaces:
        opts = opts.with_preserve_spaces(True)
    if preserve_punctuations:
        opts = opts.with_preserve_punctuations(True)
    if preserve_capitalization:
        opts = opts.with_preserve_capitalization(True)
    return opts


def run_segmentation(text: str, options: ParserOptions) -> SegmentationResult:
    """
    Drive the parser to the end and record what it produced.

    Units emitted before an unimplemented path are kept; the error and the
    cursor position are stored on the result.
    """
    it: PinyinParserIter = PinyinParser(options).parse(text)
    units: list[str] = []
    try:
        for unit in it:
            units.append(unit)
    except UnimplementedPathError as e:
        return SegmentationResult(
            input=text,
            options=options.to_config(),
            units=units,
            completed=False,
            error=str(e),
            error_position=it.cursor.position,
        )
    return SegmentationResult(input=text, options=options.to_config(), units=units)


@app.command()
def doctor() -> None:
    """
    Print library versions.
    """
    import platform
    import sys

    typer.echo(f"python: {sys.version.split()[0]}")
    typer.echo(f"platform: {platform.platform()}")

    import pydantic
    import regex
    import yaml

    typer.echo(f"regex: {getattr(regex, '__version__', '?')}")
    typer.echo(f"pydantic: {getattr(pydantic, '__version__', '?')}")
    typer.echo(f"pyyaml: {getattr(yaml, '__version__', '?')}")
    typer.echo(f"typer: {getattr(typer, '__version__', '?')}")


@app.command()
def tokens(text: str = typer.Argument(..., help="Text to classify.")) -> None:
    """
    Print one JSON record per grapheme token.
    """
    for tok in tokenize(text):
        if isinstance(tok, AlphabeticToken):
            record = TokenRecord(
                kind="alphabetic",
                text=tok.text,
                letter=tok.letter.value,
                diacritics=[d.name.lower() for d in tok.diacritics],
                uppercase=tok.uppercase,
            )
        elif isinstance(tok, PunctuationToken):
            record = TokenRecord(kind="punctuation", text=tok.text)
        else:
            record = TokenRecord(kind="space", text=tok.text)
        typer.echo(record.model_dump_json())


@app.command()
def segment(
    text: str = typer.Argument(..., help="Pinyin text."),
    strict: bool = typer.Option(False, "--strict", help="Render marks exactly as written."),
    preserve_spaces: bool = typer.Option(False, "--preserve-spaces", help="Emit whitespace units."),
    preserve_punctuations: bool = typer.Option(
        False, "--preserve-punctuations", help="Emit punctuation units."
    ),
    preserve_capitalization: bool = typer.Option(
        False, "--preserve-capitalization", help="Keep uppercase letters."
    ),
    config: Optional[str] = typer.Option(None, "--config", help="YAML/JSON options file."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON report."),
    out_html: Optional[str] = typer.Option(None, "--out-html", help="Write HTML report."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser transitions."),
) -> None:
    _configure_logging(verbose)
    opts = _resolve_options(config, strict, preserve_spaces, preserve_punctuations, preserve_capitalization)
    result = run_segmentation(text, opts)

    if out_json:
        _ensure_parent(out_json)
        write_json(result, out_json)
    if out_html:
        _ensure_parent(out_html)
        write_html(result, out_html)
    if not out_json and not out_html:
        for unit in result.units:
            typer.echo(repr(unit))

    if result.error is not None:
        typer.echo(
            f"stopped at token {result.error_position} of {normalize_pinyin_text(text)!r}: {result.error}",
            err=True,
        )
        raise typer.Exit(code=1)
