"""Health check routes."""

from __future__ import annotations

from flask import Blueprint, current_app

from lotto_viewer.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint; reports the screen state, never calls the API."""

    screen = current_app.extensions["screen"]
    return ok({"status": "ok", "screen": screen.state.value})
