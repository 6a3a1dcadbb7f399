"""Result of a call against an upstream data source."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from transit_live.domain.models.error_details import ErrorDetails

T = TypeVar("T")


class FetchStatus(Enum):
    """Outcome of an upstream fetch."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Distinguishes data, no data, and a failed fetch.

    Callers that only care about "is there something to use" check ``is_ok``;
    callers that must react to failures (e.g. the leg enricher aborting) check
    ``is_failed``.
    """

    status: FetchStatus
    value: T | None = None
    error: ErrorDetails | None = None

    @classmethod
    def ok(cls, value: T) -> "FetchResult[T]":
        return cls(status=FetchStatus.OK, value=value)

    @classmethod
    def empty(cls) -> "FetchResult[T]":
        return cls(status=FetchStatus.EMPTY)

    @classmethod
    def failed(
        cls, reason: str, status_code: int | None = None, upstream: str | None = None
    ) -> "FetchResult[T]":
        return cls(
            status=FetchStatus.FAILED,
            error=ErrorDetails(reason=reason, status_code=status_code, upstream=upstream),
        )

    @classmethod
    def failed_from(
        cls, other: "FetchResult[Any]", default_reason: str = "upstream call failed"
    ) -> "FetchResult[T]":
        """Failed result carrying the error of another, differently typed result."""
        error = other.error or ErrorDetails(reason=default_reason)
        return cls(status=FetchStatus.FAILED, error=error)

    @property
    def is_ok(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def is_empty(self) -> bool:
        return self.status is FetchStatus.EMPTY

    @property
    def is_failed(self) -> bool:
        return self.status is FetchStatus.FAILED

    def describe_error(self) -> str:
        return self.error.describe() if self.error else ""
