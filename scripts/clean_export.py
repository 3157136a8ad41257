"""Clean a Sumobrain, Lens.org or Google Patents CSV export into canonical records."""

from __future__ import annotations

import argparse
import csv
import dataclasses
import json
import logging
from collections import Counter
from pathlib import Path

from patentclean.services.cleaning import (
    CleaningConfig,
    PatentTable,
    PRESETS,
    SourcePreset,
    clean_patent_data,
    get_preset,
)

LOGGER = logging.getLogger("clean_export")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Clean a patent export CSV into canonical records")
    parser.add_argument("--input", type=Path, required=True, help="CSV file exported from the source")
    parser.add_argument("--source", default="sumobrain", choices=sorted(PRESETS), help="Export layout of the input file")
    parser.add_argument("--config", type=Path, help="Optional JSON config overriding cleaning defaults")
    parser.add_argument("--output", type=Path, help="Write cleaned records as JSON to this path")
    parser.add_argument("--no-dedup", action="store_true", help="Keep app/grant pairs sharing an application number")
    parser.add_argument("--keep-type", help="Document type kept within a duplicate group (default: grant)")
    parser.add_argument("--encoding", default="utf-8", help="Text encoding of the input file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(asctime)s %(levelname)s %(message)s")


def load_export(path: Path, preset: SourcePreset, encoding: str = "utf-8") -> PatentTable:
    if not path.exists():
        raise FileNotFoundError(f"Export file not found: {path}")
    with path.open("r", encoding=encoding, errors="replace", newline="") as handle:
        for _ in range(preset.skip_lines):
            handle.readline()
        reader = csv.reader(handle)
        header = next(reader, [])
        rows = [row for row in reader if any(cell.strip() for cell in row)]
    LOGGER.info("Loaded %s rows with %s columns from %s", len(rows), len(header), path)
    return PatentTable(columns=header, rows=rows)


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    preset = get_preset(args.source)
    config = CleaningConfig.load(args.config)
    if args.no_dedup:
        config = dataclasses.replace(config, deduplicate=False)
    if args.keep_type:
        config = dataclasses.replace(config, keep_type=args.keep_type)

    table = load_export(args.input, preset, args.encoding)
    records = clean_patent_data(table, preset, config)
    rows = [record.to_row() for record in records]

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(rows, indent=2), encoding="utf-8")
        LOGGER.info("Wrote %s records to %s", len(rows), args.output)
        return

    print("Records:", len(rows))
    doc_types = Counter(row.get("doc_type", "NA") for row in rows)
    for doc_type, count in doc_types.most_common():
        print(f" - {doc_type}: {count}")


if __name__ == "__main__":
    main()
