"""HTTP client for the remote lotto analysis API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests
from marshmallow import ValidationError as MarshmallowValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lotto_viewer.errors import AnalysisFetchError
from lotto_viewer.models.analysis import AnalysisResponse
from lotto_viewer.schemas.analysis import AnalysisResponseSchema


logger = logging.getLogger(__name__)

_schema = AnalysisResponseSchema()


def build_http_session(retries: int = 0, backoff_factor: float = 0.3) -> requests.Session:
    """Create a requests session; `retries=0` disables automatic retries."""

    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class AnalysisClient:
    """Fetch and decode one analysis report.

    Every failure mode (connection error, timeout, HTTP error status,
    non-JSON body, payload not matching the schema) is raised as
    `AnalysisFetchError`.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 30.0,
        http: requests.Session | None = None,
    ) -> None:
        self.url = url
        self._timeout = timeout_seconds
        self._http = http or build_http_session()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "AnalysisClient":
        retries = int(config.get("ANALYSIS_API_RETRIES") or 0)
        return cls(
            str(config["ANALYSIS_API_URL"]),
            timeout_seconds=float(config.get("ANALYSIS_API_TIMEOUT") or 30.0),
            http=build_http_session(retries=retries),
        )

    def fetch(self) -> AnalysisResponse:
        try:
            resp = self._http.get(self.url, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("API Error: GET %s failed: %s", self.url, exc)
            raise AnalysisFetchError(details={"reason": type(exc).__name__}) from exc

        try:
            payload = resp.json()
        except (ValueError, RecursionError) as exc:
            # RecursionError: nesting too deep for the JSON decoder
            logger.error("API Error: GET %s returned a non-JSON body", self.url)
            raise AnalysisFetchError(details={"reason": "invalid_json"}) from exc

        if not isinstance(payload, dict):
            logger.error("API Error: GET %s returned %s, expected an object", self.url, type(payload).__name__)
            raise AnalysisFetchError(details={"reason": "invalid_payload"})

        try:
            result: AnalysisResponse = _schema.load(payload)
        except MarshmallowValidationError as exc:
            logger.error("API Error: payload from %s failed validation: %s", self.url, exc.messages)
            raise AnalysisFetchError(details={"reason": "invalid_payload", "fields": exc.messages}) from exc

        logger.info(
            "Fetched analysis: %s combinations, latest draw %s",
            len(result.combinations),
            result.stats.latest_drw_no if result.stats else None,
        )
        return result
