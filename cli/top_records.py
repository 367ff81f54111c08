"""Print the highest-scoring records from a `<score>:<json>` data file.

Usage (from repo root):
    python -m cli.top_records data.txt 3
    cat data.txt | python -m cli.top_records - 3
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from src.records import ErrorKind, RecordValidationError, top_records
from src.records.parser import parse_int_prefix


logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad usage; this tool reserves 2 for bad data."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ErrorKind.USAGE_ERROR.exit_code, f"{self.prog}: error: {message}\n")


def _fail(kind: ErrorKind, message: str) -> NoReturn:
    logger.error("%s: %s", kind.value, message)
    raise SystemExit(kind.exit_code)


def _parse_count(raw: str) -> int:
    try:
        count = parse_int_prefix(raw.strip())
    except ValueError:
        count = None
    if count is None or count <= 0:
        _fail(ErrorKind.INVALID_COUNT, f"count must be a positive integer, got {raw!r}")
    return count


def _read_input(data_path: str) -> str:
    source = "<stdin>" if data_path == "-" else data_path
    try:
        if data_path == "-":
            return sys.stdin.buffer.read().decode("utf-8")
        return Path(data_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        _fail(ErrorKind.FILE_NOT_FOUND, f"file not found: {source}")
    except (OSError, UnicodeDecodeError) as exc:
        _fail(ErrorKind.OTHER_IO_ERROR, f"could not read {source}: {exc}")


def main(argv: Sequence[str] | None = None) -> None:
    parser = _ArgumentParser(
        prog="top_records",
        description="Print the top-N records of a score file as a JSON array.",
    )
    parser.add_argument("data_file", help="Path to the data file, or '-' for stdin.")
    parser.add_argument("count", help="Number of records to print (positive integer).")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostic verbosity on stderr (default: WARNING).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    count = _parse_count(args.count)
    text = _read_input(args.data_file)

    try:
        ranked = top_records(text, count)
    except RecordValidationError as exc:
        logger.error("%s", exc)
        raise SystemExit(exc.kind.exit_code) from exc

    print(json.dumps([entry.to_json() for entry in ranked], indent=2))


if __name__ == "__main__":
    main()
