"""Pure display rules derived from the analysis payload."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from lotto_viewer.models.analysis import HotNumber, Stats


HOT_COLD_DISPLAY_LIMIT = 3
LATEST_LABEL = "최신"
SUM_TREND_CAPTION = "* 보통 120~160 사이가 안정적 범위입니다."


class BallBand(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @property
    def color(self) -> str:
        return _BAND_COLORS[self]


_BAND_COLORS = {
    BallBand.A: "#fbc400",
    BallBand.B: "#69c8f2",
    BallBand.C: "#ff7272",
    BallBand.D: "#aaa",
    BallBand.E: "#b0d840",
}


def ball_band(number: int) -> BallBand:
    """Map a number to its color band; total over all integers."""

    n = int(number)
    if n <= 10:
        return BallBand.A
    if n <= 20:
        return BallBand.B
    if n <= 30:
        return BallBand.C
    if n <= 40:
        return BallBand.D
    return BallBand.E


def hot_for_display(stats: Stats, limit: int = HOT_COLD_DISPLAY_LIMIT) -> list[HotNumber]:
    # Server already sorts by count; keep its order.
    return list(stats.hot_numbers[:limit])


def cold_for_display(stats: Stats, limit: int = HOT_COLD_DISPLAY_LIMIT) -> list[int]:
    return list(stats.cold_numbers[:limit])


@dataclass(frozen=True)
class TrendPoint:
    label: str
    value: int


def trend_label(draws_before_latest: int) -> str:
    if draws_before_latest <= 0:
        return LATEST_LABEL
    return f"{draws_before_latest}전"


def sum_trend(recent_sums: Sequence[int]) -> list[TrendPoint]:
    """Label sums oldest to newest; the last one is the latest draw.

    >>> [p.label for p in sum_trend([120, 135, 140, 128, 155])]
    ['4전', '3전', '2전', '1전', '최신']
    """

    total = len(recent_sums)
    return [
        TrendPoint(label=trend_label(total - 1 - i), value=int(v))
        for i, v in enumerate(recent_sums)
    ]


def trend_polyline(
    points: Sequence[TrendPoint],
    *,
    width: int = 300,
    height: int = 120,
    padding: int = 10,
) -> list[tuple[float, float]]:
    """Scale trend points into SVG coordinates (y grows downward)."""

    if not points:
        return []

    values = [p.value for p in points]
    lo, hi = min(values), max(values)
    span = hi - lo
    inner_w = width - 2 * padding
    inner_h = height - 2 * padding
    step = inner_w / (len(points) - 1) if len(points) > 1 else 0.0

    coords: list[tuple[float, float]] = []
    for i, v in enumerate(values):
        x = padding + step * i if len(points) > 1 else width / 2
        # A flat series sits on the vertical middle.
        ratio = (v - lo) / span if span else 0.5
        y = padding + inner_h * (1.0 - ratio)
        coords.append((round(x, 1), round(y, 1)))
    return coords


@dataclass(frozen=True)
class SectionRow:
    label: str
    count: int


def _section_lower_bound(label: str) -> int | None:
    head, sep, _ = label.partition("-")
    if not sep:
        return None
    try:
        return int(head.strip())
    except ValueError:
        return None


def section_rows(section_map: Mapping[str, int] | Iterable[tuple[str, int]]) -> list[SectionRow]:
    """Order decade buckets ('1-10', '11-20', ...) by their lower bound.

    Labels that are not numeric ranges follow, in received order.
    """

    ranged: list[tuple[int, SectionRow]] = []
    other: list[SectionRow] = []
    pairs = section_map.items() if isinstance(section_map, Mapping) else section_map
    for label, count in pairs:
        row = SectionRow(label=str(label), count=int(count))
        lower = _section_lower_bound(row.label)
        if lower is None:
            other.append(row)
        else:
            ranged.append((lower, row))

    ranged.sort(key=lambda item: item[0])
    return [row for _, row in ranged] + other
