"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, redirect, render_template, url_for

from lotto_viewer.services.screen_service import build_view


web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    screen = current_app.extensions["screen"]
    view = build_view(screen.snapshot(), screen.pop_notifications())
    return render_template("index.html", view=view)


@web_bp.post("/analyze")
def analyze():
    # Failures are queued as notifications and shown on the next render.
    current_app.extensions["screen"].trigger()
    return redirect(url_for("web.index"))


@web_bp.get("/favicon.ico")
def favicon() -> Response:
        svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
        <linearGradient id='g' x1='0' y1='0' x2='1' y2='1'>
            <stop offset='0%' stop-color='#6a11cb'/>
            <stop offset='100%' stop-color='#2575fc'/>
        </linearGradient>
    </defs>
    <circle cx='32' cy='32' r='28' fill='url(#g)'/>
    <circle cx='32' cy='32' r='28' fill='none' stroke='rgba(0,255,204,0.35)' stroke-width='2'/>
    <text x='32' y='39' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='20' font-weight='800' fill='#fff'>🍀</text>
</svg>"""

        return Response(svg, mimetype="image/svg+xml")
