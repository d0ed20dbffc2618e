"""Fetch one analysis report and print what the screen would show.

Useful for checking a deployment's ANALYSIS_API_URL before opening the UI.

Usage:
  python scripts/fetch_analysis.py
  python scripts/fetch_analysis.py --url http://10.0.2.2:3000/lotto/analyze --json
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

from lotto_viewer.clients.analysis_client import AnalysisClient, build_http_session
from lotto_viewer.config import resolve_analysis_api_url
from lotto_viewer.services.screen_service import ScreenService, TriggerOutcome, build_view


logger = logging.getLogger(__name__)


def _print_view(view: dict) -> None:
    print(view["report"])
    print()

    stats = view["stats"]
    if stats:
        print(f"Latest draw: {stats['latest_drw_no']}")
        print("Hot : " + ", ".join(f"{h['number']}({h['count']})" for h in stats["hot"]))
        print("Cold: " + ", ".join(str(n) for n in stats["cold"]))
        print("Sums: " + "  ".join(f"{p['label']}={p['value']}" for p in stats["sum_trend"]))
        if stats["sections"]:
            print("Sections: " + ", ".join(f"{r['label']}:{r['count']}" for r in stats["sections"]))
        print()

    for combo in view["combinations"]:
        balls = " ".join(f"{b['number']:>2}[{b['band']}]" for b in combo["balls"])
        print(f"{combo['theme']}: {balls}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch one lotto analysis report")
    parser.add_argument("--url", dest="url", type=str, default=None, help="Default: ANALYSIS_API_URL")
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=30.0)
    parser.add_argument("--retries", dest="retries", type=int, default=0)
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the view as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if load_dotenv is not None:
        load_dotenv()

    url = args.url or resolve_analysis_api_url()
    logger.info("Analysis API: %s", url)

    client = AnalysisClient(
        url,
        timeout_seconds=float(args.timeout_seconds),
        http=build_http_session(retries=int(args.retries)),
    )
    screen = ScreenService(client)
    if screen.trigger() is not TriggerOutcome.LOADED:
        for note in screen.pop_notifications():
            logger.error("%s: %s", note.title, note.message)
        return 1

    view = build_view(screen.snapshot())
    if args.as_json:
        print(json.dumps(view, ensure_ascii=False, indent=2))
    else:
        _print_view(view)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
