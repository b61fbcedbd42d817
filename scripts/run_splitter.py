#!/usr/bin/env python3
"""
Split header + detail documents from a JSON Lines file using a YAML config.
"""

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from headerdetail import HeaderDetailSplitter, RecordProcessor, load_splitter_config
from headerdetail.utils import setup_logging


def main() -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Split header/detail documents into records.")
    parser.add_argument("config", help="Path to splitter config YAML")
    parser.add_argument("input", help="JSON Lines file with one input record per line")
    parser.add_argument("--output", help="Output JSON Lines file (default: stdout)")
    parser.add_argument(
        "--on-record-error",
        choices=["discard", "to_error", "stop_pipeline"],
        help="Override the error policy from the config",
    )
    parser.add_argument(
        "--log-level", default=os.getenv("HEADERDETAIL_LOG_LEVEL", "INFO"), help="Logging level"
    )
    args = parser.parse_args()

    setup_logging(args.log_level)

    cfg = load_splitter_config(args.config)
    processor = RecordProcessor(HeaderDetailSplitter(cfg), on_record_error=args.on_record_error)

    with Path(args.input).open("r", encoding="utf-8") as f:
        records = [json.loads(line) for line in f if line.strip()]

    result = processor.process(records)

    out = Path(args.output).open("w", encoding="utf-8") if args.output else sys.stdout
    try:
        for record in result.records:
            out.write(json.dumps(record, ensure_ascii=False) + "\n")
    finally:
        if out is not sys.stdout:
            out.close()

    for error in result.errors:
        print(json.dumps(error.as_dict()), file=sys.stderr)


if __name__ == "__main__":
    main()
