"""Parsing, validation and ranking of score-tagged JSON records."""

from __future__ import annotations

from src.records.errors import ErrorKind, RecordValidationError
from src.records.parser import ParseResult, ScoredRecord, parse_records
from src.records.ranker import RankedEntry, rank_records


def top_records(text: str, count: int) -> list[RankedEntry]:
    """Parse `text` and return its `count` highest-scoring entries."""

    return rank_records(parse_records(text).records, count)


__all__ = [
    "ErrorKind",
    "RecordValidationError",
    "ScoredRecord",
    "ParseResult",
    "RankedEntry",
    "parse_records",
    "rank_records",
    "top_records",
]
