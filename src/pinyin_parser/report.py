from __future__ import annotations

import html
from pathlib import Path

from .schemas import SegmentationResult


def write_json(result: SegmentationResult, path: str | Path) -> None:
    Path(path).write_text(result.model_dump_json(indent=2), encoding="utf-8")


def _fmt_flag(b: bool) -> str:
    return "on" if b else "off"


def write_html(result: SegmentationResult, path: str | Path) -> None:
    rows = []
    for i, unit in enumerate(result.units):
        cls = "space" if unit.isspace() else "unit"
        rows.append(
            "<tr>"
            f"<td>{i}</td>"
            f"<td class='mono {cls}'>{html.escape(repr(unit))}</td>"
            "</tr>"
        )
    unit_body = "".join(rows) or "<tr><td colspan='2'>(none)</td></tr>"

    opts = result.options
    flags = (
        f"strict: {_fmt_flag(opts.strict)}, "
        f"spaces: {_fmt_flag(opts.preserve_spaces)}, "
        f"punctuation: {_fmt_flag(opts.preserve_punctuations)}, "
        f"capitalization: {_fmt_flag(opts.preserve_capitalization)}"
    )

    error_block = ""
    if result.error is not None:
        error_block = (
            f"<p class='err'><b>Stopped at token {result.error_position}:</b> "
            f"{html.escape(result.error)}</p>"
        )

    html_doc = f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>Pinyin Segmentation Report</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, Segoe UI, Roboto, Helvetica, Arial; margin: 24px; }}
    .mono {{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", "Courier New", monospace; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 8px; vertical-align: top; }}
    th {{ background: #f7f7f7; text-align: left; }}
    .space {{ color: #6b7280; }}
    .err {{ color: #b91c1c; }}
  </style>
</head>
<body>
  <h1>Pinyin Segmentation Report</h1>
  <p><b>Input:</b> <span class='mono'>{html.escape(result.input)}</span></p>
  <p><b>Options:</b> {html.escape(flags)}</p>
  <p><b>Completed:</b> {'yes' if result.completed else 'no'}</p>
  {error_block}

  <h2>Units</h2>
  <table>
    <thead>
      <tr><th>#</th><th>Text</th></tr>
    </thead>
    <tbody>
      {unit_body}
    </tbody>
  </table>
</body>
</html>
"""
    Path(path).write_text(html_doc, encoding="utf-8")
