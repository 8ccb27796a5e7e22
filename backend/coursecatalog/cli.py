"""
Command-line extractor for the course spreadsheet.

USAGE:
    python -m coursecatalog.cli path/to/aus-uni.xlsx [--header-rows 2] [--verbose]
    python -m coursecatalog.cli path/to/aus-uni.xlsx --match-headers [--header-row 1]

Prints the institution groups as JSON. Exits with status 1 and the error
message on stderr when the file cannot be read or parsed.
With --match-headers the role columns are located by the configured header
text (HEADER_PROVIDER_CODE, HEADER_INSTITUTION_NAME, ...) instead of position.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from coursecatalog.core.exceptions import CatalogException
from coursecatalog.models.schemas import ColumnLayout
from coursecatalog.services.catalog_loader import header_names_from_settings
from coursecatalog.services.parser import extract_institutions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Group the courses in a spreadsheet by institution"
    )
    parser.add_argument("path", type=Path, help="Workbook file (.xlsx)")
    parser.add_argument(
        "--header-rows",
        type=int,
        default=2,
        help="Leading rows to discard before grouping (default: 2)"
    )
    parser.add_argument(
        "--match-headers",
        action="store_true",
        help="Locate columns by header text instead of position"
    )
    parser.add_argument(
        "--header-row",
        type=int,
        default=1,
        help="Row holding the column headers for --match-headers (default: 1)"
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent")
    parser.add_argument("--verbose", action="store_true", help="Log per-row decisions")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.header_rows < 0:
        parser.error("--header-rows must be >= 0")
    if args.header_row < 0:
        parser.error("--header-row must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        data = args.path.read_bytes()
    except OSError as e:
        print(f"Failed to read {args.path}: {e}", file=sys.stderr)
        return 1

    try:
        layout = ColumnLayout(header_rows=args.header_rows)
        groups = extract_institutions(
            data,
            layout=layout,
            filename=args.path.name,
            header_names=header_names_from_settings() if args.match_headers else None,
            header_row=args.header_row
        )
    except CatalogException as e:
        print(e.message, file=sys.stderr)
        return 1

    payload = [group.model_dump(by_alias=True) for group in groups]
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
