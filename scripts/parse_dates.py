#!/usr/bin/env python3
"""Parse finding-aid date strings and print the normalized ranges as JSON lines.

Reads the strings given as arguments, or one per line from stdin.

Usage:
  PYTHONPATH=. python3 scripts/parse_dates.py "1.3.1950 - 4.3.1950" "1950-1960"
  cut -f3 unitdates.tsv | PYTHONPATH=. python3 scripts/parse_dates.py
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ead_reader.config import Settings
from ead_reader.context import RecordLog
from ead_reader.date import parse_date_range, year_range_label


def main() -> None:
    settings = Settings.from_env()

    ap = argparse.ArgumentParser()
    ap.add_argument("texts", nargs="*", help="Date strings (default: read lines from stdin)")
    ap.add_argument("--source-id", default=settings.source_id)
    ap.add_argument("--log-level", default=None, help="Override EAD_READER_LOG_LEVEL")
    args = ap.parse_args()

    logging.basicConfig(level=(args.log_level or settings.log_level), format="%(levelname)s %(name)s: %(message)s")

    texts = args.texts or [ln.rstrip("\n") for ln in sys.stdin]

    for i, text in enumerate(texts, start=1):
        ctx = RecordLog(source_id=args.source_id, record_id=str(i))
        rng = parse_date_range(text, ctx)
        row = {
            "text": text,
            "start": rng.start if rng else None,
            "end": rng.end if rng else None,
            "label": year_range_label(rng),
            "warnings": ctx.warnings,
        }
        print(json.dumps(row, ensure_ascii=False))


if __name__ == "__main__":
    main()
