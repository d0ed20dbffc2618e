"""Records for one analysis API response.

Created fresh on every successful fetch and replaced as a unit by the next
one. Nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Combination:
    """One recommended set of numbers with its theme label."""

    theme: str
    numbers: tuple[int, ...]


@dataclass(frozen=True)
class HotNumber:
    number: int
    count: int


@dataclass(frozen=True)
class Stats:
    """Visualization statistics, trusted as sent by the server."""

    latest_drw_no: int
    hot_numbers: tuple[HotNumber, ...] = ()
    cold_numbers: tuple[int, ...] = ()
    # Oldest first.
    recent_sums: tuple[int, ...] = ()
    # (range label, count) pairs in received order; a tuple keeps Stats hashable.
    section_map: tuple[tuple[str, int], ...] = ()


@dataclass(frozen=True)
class AnalysisResponse:
    report: str
    combinations: tuple[Combination, ...] = ()
    # None means "not yet loaded"
    stats: Stats | None = None
