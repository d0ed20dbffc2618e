from __future__ import annotations

import threading
from typing import Any

import pytest

from lotto_viewer import create_app
from lotto_viewer.errors import AnalysisFetchError
from lotto_viewer.schemas.analysis import AnalysisResponseSchema


def sample_payload() -> dict[str, Any]:
    return {
        "report": "최근 30회차 기준 균형 잡힌 조합을 추천합니다.",
        "combinations": [
            {"theme": "균형 잡힌 조합", "numbers": [3, 14, 22, 31, 38, 45]},
            {"theme": "미출현 번호 위주", "numbers": [1, 2, 3, 4, 5, 6]},
        ],
        "stats": {
            "latestDrwNo": 1150,
            "hotNumbers": [
                {"number": 34, "count": 9},
                {"number": 12, "count": 8},
                {"number": 27, "count": 7},
                {"number": 5, "count": 6},
                {"number": 43, "count": 6},
            ],
            "coldNumbers": [9, 41, 17, 30],
            "recentSums": [120, 135, 140, 128, 155],
            "sectionMap": {"11-20": 40, "1-10": 35, "41-45": 12, "21-30": 38, "31-40": 39},
        },
    }


class FakeSource:
    """Stands in for AnalysisClient; replays queued results or errors."""

    def __init__(self, *results: Any) -> None:
        self._results = list(results)
        self.calls = 0
        self.started = threading.Event()
        self.release = threading.Event()
        self.block = False

    def fetch(self):
        self.calls += 1
        if self.block:
            self.started.set()
            self.release.wait(timeout=5)
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return AnalysisResponseSchema().load(result)


@pytest.fixture()
def payload() -> dict[str, Any]:
    return sample_payload()


@pytest.fixture()
def source(payload):
    return FakeSource(payload, AnalysisFetchError(), payload)


@pytest.fixture()
def app(source):
    return create_app(
        {
            "TESTING": True,
            "ANALYSIS_API_URL": "http://analysis.test/lotto/analyze",
            "ANALYSIS_CLIENT": source,
        }
    )


@pytest.fixture()
def client(app):
    return app.test_client()
