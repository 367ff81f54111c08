"""Parse and validate `<score>:<json record>` lines."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import re
from typing import Any

from src.records.errors import ErrorKind, RecordValidationError


logger = logging.getLogger(__name__)

# Leading-prefix integer: "42abc" -> 42, "-7.5" -> -7.
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class ScoredRecord:
    """One validated input line."""

    score: int
    record: dict[str, Any]
    line_no: int


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a block of score-record text."""

    records: list[ScoredRecord]
    skipped_lines: int


def parse_int_prefix(token: str) -> int | None:
    """Return the base-10 integer at the start of `token`, or None if there is none.

    Raises:
        ValueError: if the prefix has more digits than the interpreter's
            integer string conversion limit allows.
    """

    match = _INT_PREFIX_RE.match(token)
    if match is None:
        return None
    return int(match.group(1))


def parse_score(token: str, *, line_no: int | None = None) -> int:
    """Parse a score token using leading-prefix integer semantics."""

    try:
        value = parse_int_prefix(token)
    except ValueError as exc:
        raise RecordValidationError(
            ErrorKind.INVALID_SCORE,
            f"score has too many digits ({exc})",
            line_no=line_no,
        ) from exc
    if value is None:
        raise RecordValidationError(
            ErrorKind.INVALID_SCORE,
            f"score is not an integer: {token!r}",
            line_no=line_no,
        )
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_record(token: str, *, line_no: int | None = None) -> dict[str, Any]:
    """Parse a record token; it must be a JSON object with an "id" key."""

    try:
        record = json.loads(token, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise RecordValidationError(
            ErrorKind.INVALID_RECORD_JSON,
            f"record is not valid JSON ({exc})",
            line_no=line_no,
        ) from exc

    if not isinstance(record, dict):
        raise RecordValidationError(
            ErrorKind.INVALID_RECORD_SHAPE,
            f"record is not a JSON object (got {type(record).__name__})",
            line_no=line_no,
        )
    if "id" not in record:
        raise RecordValidationError(
            ErrorKind.INVALID_RECORD_MISSING_ID,
            'record is missing the "id" field',
            line_no=line_no,
        )
    return record


def parse_line(line: str, *, line_no: int | None = None) -> ScoredRecord:
    """Split a trimmed line on its first colon and validate both halves."""

    score_token, sep, record_token = line.partition(":")
    if not sep:
        raise RecordValidationError(
            ErrorKind.INVALID_SCORE,
            "missing ':' separator between score and record",
            line_no=line_no,
        )

    score = parse_score(score_token.strip(), line_no=line_no)
    record = parse_record(record_token.strip(), line_no=line_no)
    return ScoredRecord(score=score, record=record, line_no=line_no or 0)


def parse_records(text: str) -> ParseResult:
    """Parse every non-blank line of `text`, stopping at the first invalid one.

    Lines are numbered from 1 over the raw text, so blank lines still count
    towards the line numbers reported in errors.
    """

    records: list[ScoredRecord] = []
    skipped_lines = 0

    # A leading byte-order mark belongs to the encoding, not the first line.
    text = text.removeprefix("\ufeff")
    for line_no, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            skipped_lines += 1
            continue
        records.append(parse_line(line, line_no=line_no))

    logger.debug("Parsed %d records (%d blank lines skipped).", len(records), skipped_lines)
    return ParseResult(records=records, skipped_lines=skipped_lines)
