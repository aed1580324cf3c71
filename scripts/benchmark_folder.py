from __future__ import annotations

import argparse
from pathlib import Path
from time import perf_counter

from pinyin_parser.pinyin_token import tokenize


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("folder")
    args = ap.parse_args()

    folder = Path(args.folder)
    files = [p for p in folder.glob("*") if p.suffix.lower() in {".txt", ".md"}]
    if not files:
        print("No text files found.")
        return 1

    t0 = perf_counter()
    total = 0
    for p in files:
        toks = tokenize(p.read_text(encoding="utf-8"))
        total += len(toks)
        print(p.name, len(toks))
    dt = perf_counter() - t0
    print(f"Classified {total} tokens from {len(files)} files in {dt:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
