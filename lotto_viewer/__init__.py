"""Flask application package."""

from __future__ import annotations

from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]


def create_app(overrides: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Optional config values applied after the environment
            config (used by tests and scripts).

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from lotto_viewer.clients.analysis_client import AnalysisClient
    from lotto_viewer.config import get_config
    from lotto_viewer.error_handlers import register_error_handlers
    from lotto_viewer.logging_config import configure_logging
    from lotto_viewer.routes.api import api_bp
    from lotto_viewer.routes.health import health_bp
    from lotto_viewer.routes.web import web_bp
    from lotto_viewer.services.screen_service import ScreenService

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    register_error_handlers(app)

    client = app.config.get("ANALYSIS_CLIENT") or AnalysisClient.from_config(app.config)
    app.extensions["screen"] = ScreenService(client)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
