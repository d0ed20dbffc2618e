"""JSON routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app

from lotto_viewer.errors import AnalysisFetchError
from lotto_viewer.services.screen_service import ScreenService, TriggerOutcome, build_view
from lotto_viewer.utils.responses import ok


api_bp = Blueprint("api", __name__)


def _screen() -> ScreenService:
    return current_app.extensions["screen"]


@api_bp.get("/state")
def get_state():
    """Current screen view; pending notifications are consumed."""

    screen = _screen()
    return ok(build_view(screen.snapshot(), screen.pop_notifications()))


@api_bp.post("/analyze")
def analyze():
    """Run one fetch.

    Returns `started: false` when a fetch is already in flight, and a
    `fetch_failed` error when the analysis API could not be read.
    """

    screen = _screen()
    # The error envelope is the notification for JSON callers.
    outcome = screen.trigger(notify=False)

    if outcome is TriggerOutcome.FAILED:
        raise AnalysisFetchError()

    # Pending notifications stay queued for the next screen render.
    view = build_view(screen.snapshot())
    view["started"] = outcome is not TriggerOutcome.BUSY
    return ok(view)
