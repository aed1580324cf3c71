from __future__ import annotations

import argparse
from pathlib import Path

from pinyin_parser.cli import run_segmentation
from pinyin_parser.options import ParserOptions, load_options
from pinyin_parser.report import write_html, write_json


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("text_file")
    ap.add_argument("--config", default=None)
    ap.add_argument("--out-dir", default="outputs")
    args = ap.parse_args()

    text = Path(args.text_file).read_text(encoding="utf-8")
    opts = load_options(args.config) if args.config else ParserOptions()
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    stem = Path(args.text_file).stem
    result = run_segmentation(text, opts)
    write_json(result, out_dir / f"{stem}.json")
    write_html(result, out_dir / f"{stem}.html")
    return 0 if result.completed else 1


if __name__ == "__main__":
    raise SystemExit(main())
