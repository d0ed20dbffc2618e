"""Fetch/display state for the analysis screen."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Any, Protocol

from lotto_viewer.errors import AnalysisFetchError
from lotto_viewer.models.analysis import AnalysisResponse, Combination, Stats
from lotto_viewer.services import display_rules


logger = logging.getLogger(__name__)

INITIAL_REPORT = "아직 분석된 내용이 없습니다."
LOADING_REPORT = "최근 30회차 데이터를 정밀 분석 중입니다..."
ERROR_TITLE = "오류"


class AnalysisSource(Protocol):
    def fetch(self) -> AnalysisResponse: ...


class ScreenState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


class TriggerOutcome(str, Enum):
    LOADED = "loaded"
    FAILED = "failed"
    BUSY = "busy"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str


@dataclass(frozen=True)
class ScreenSnapshot:
    state: ScreenState
    report: str
    combinations: tuple[Combination, ...]
    stats: Stats | None

    @property
    def is_loading(self) -> bool:
        return self.state is ScreenState.LOADING


class ScreenService:
    """Hold the screen's data and run at most one fetch at a time.

    Report, combinations and stats are replaced together, and only when a
    fetch succeeds. A failed fetch leaves them untouched and queues exactly
    one notification.
    """

    def __init__(self, source: AnalysisSource) -> None:
        self._source = source
        self._fetch_lock = Lock()
        self._state_lock = Lock()
        self._state = ScreenState.IDLE
        self._report = INITIAL_REPORT
        self._combinations: tuple[Combination, ...] = ()
        self._stats: Stats | None = None
        self._has_loaded = False
        self._notifications: deque[Notification] = deque()

    @property
    def state(self) -> ScreenState:
        with self._state_lock:
            return self._state

    def trigger(self, *, notify: bool = True) -> TriggerOutcome:
        """Fetch a new analysis unless one is already in flight.

        With `notify=False` a failure queues no notification; the caller
        reports it itself.
        """

        if not self._fetch_lock.acquire(blocking=False):
            logger.info("Analysis already in progress; ignoring trigger")
            return TriggerOutcome.BUSY

        try:
            with self._state_lock:
                self._state = ScreenState.LOADING

            try:
                result = self._source.fetch()
            except AnalysisFetchError as exc:
                self._fail(exc, notify)
                return TriggerOutcome.FAILED
            except Exception:
                logger.exception("Unexpected error fetching analysis")
                self._fail(AnalysisFetchError(details={"reason": "unexpected"}), notify)
                return TriggerOutcome.FAILED

            with self._state_lock:
                self._report = result.report
                self._combinations = result.combinations
                self._stats = result.stats
                self._has_loaded = True
                self._state = ScreenState.LOADED
            return TriggerOutcome.LOADED
        finally:
            self._fetch_lock.release()

    def _fail(self, exc: AnalysisFetchError, notify: bool) -> None:
        with self._state_lock:
            if notify:
                self._notifications.append(Notification(title=ERROR_TITLE, message=exc.message))
            # Back to whatever was on screen before the fetch.
            self._state = ScreenState.LOADED if self._has_loaded else ScreenState.IDLE
        logger.warning("Analysis fetch failed: %s", exc.details)

    def snapshot(self) -> ScreenSnapshot:
        with self._state_lock:
            return ScreenSnapshot(
                state=self._state,
                report=self._report,
                combinations=self._combinations,
                stats=self._stats,
            )

    def pop_notifications(self) -> list[Notification]:
        """Return pending notifications; each is returned only once."""

        with self._state_lock:
            pending = list(self._notifications)
            self._notifications.clear()
        return pending


def build_view(snapshot: ScreenSnapshot, notifications: list[Notification] | None = None) -> dict[str, Any]:
    """Turn a snapshot into the plain dict the template and JSON API render."""

    loading = snapshot.is_loading
    stats = snapshot.stats
    view: dict[str, Any] = {
        "state": snapshot.state.value,
        "is_loading": loading,
        "report": LOADING_REPORT if loading else snapshot.report,
        "combinations": [
            {
                "theme": c.theme,
                "balls": [
                    {"number": n, "band": display_rules.ball_band(n).value, "color": display_rules.ball_band(n).color}
                    for n in c.numbers
                ],
            }
            for c in snapshot.combinations
        ],
        "stats": None,
        "notifications": [{"title": n.title, "message": n.message} for n in notifications or []],
    }

    # Stats stay hidden during a fetch even though the previous bundle is kept.
    if stats is not None and not loading:
        trend = display_rules.sum_trend(stats.recent_sums)
        view["stats"] = {
            "latest_drw_no": stats.latest_drw_no,
            "hot": [{"number": h.number, "count": h.count} for h in display_rules.hot_for_display(stats)],
            "cold": display_rules.cold_for_display(stats),
            "sum_trend": [{"label": p.label, "value": p.value} for p in trend],
            "sum_trend_polyline": display_rules.trend_polyline(trend),
            "sum_trend_caption": display_rules.SUM_TREND_CAPTION,
            "sections": [{"label": r.label, "count": r.count} for r in display_rules.section_rows(stats.section_map)],
        }

    return view
