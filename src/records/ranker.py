"""Stable top-N selection over parsed score records."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Sequence

from src.records.parser import ScoredRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedEntry:
    """Output row: a score paired with the id of its record."""

    score: int
    record_id: Any

    def to_json(self) -> dict[str, Any]:
        # The id is published under "record" for compatibility with existing consumers.
        return {"score": self.score, "record": self.record_id}


def rank_records(records: Sequence[ScoredRecord], count: int) -> list[RankedEntry]:
    """Return the `count` highest-scoring records, best first.

    Ties keep their input order. A non-positive `count` yields an empty list.
    """

    if count <= 0:
        return []

    ordered = sorted(records, key=lambda r: r.score, reverse=True)
    ranked = [RankedEntry(score=r.score, record_id=r.record["id"]) for r in ordered[:count]]
    logger.debug("Selected %d of %d records (count=%d).", len(ranked), len(records), count)
    return ranked
