#!/usr/bin/env python3
"""Map EAD records to Solr documents (one JSON object per line).

Inputs are local files or http(s) URLs, each holding one EAD document or a
single split-out component (<c>/<archdesc>).

Usage:
  PYTHONPATH=. python3 scripts/ead_to_solr.py --source-id finna records/*.xml > docs.jsonl
"""

from __future__ import annotations

import argparse
import json
import logging

from ead_reader.config import Settings
from ead_reader.record import EadRecord
from ead_reader.source import load_ead


def main() -> None:
    settings = Settings.from_env()

    ap = argparse.ArgumentParser()
    ap.add_argument("inputs", nargs="+", help="EAD XML paths or URLs")
    ap.add_argument("--source-id", default=settings.source_id)
    ap.add_argument("--timeout-s", type=int, default=settings.fetch_timeout_s)
    ap.add_argument("--log-level", default=None, help="Override EAD_READER_LOG_LEVEL")
    ap.add_argument("--with-warnings", action="store_true", help="Add a 'warnings' list to each document")
    args = ap.parse_args()

    logging.basicConfig(level=(args.log_level or settings.log_level), format="%(levelname)s %(name)s: %(message)s")

    for loc in args.inputs:
        rec = EadRecord.from_xml(load_ead(loc, timeout_s=int(args.timeout_s)), args.source_id)
        data = rec.to_solr_dict()
        if args.with_warnings and rec.warnings:
            data["warnings"] = list(rec.warnings)
        print(json.dumps(data, ensure_ascii=False))


if __name__ == "__main__":
    main()
