"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


FETCH_FAILED_MESSAGE = "서버 연결 실패. IP 주소와 서버 상태를 확인하세요."


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class AnalysisFetchError(AppError):
    """Any failure fetching or decoding the analysis payload.

    Transport errors, timeouts, bad status codes and malformed bodies all
    collapse into this one kind.
    """

    def __init__(self, message: str = FETCH_FAILED_MESSAGE, details: Any | None = None) -> None:
        super().__init__(code="fetch_failed", message=message, status_code=502, details=details)
