"""Upstream failure details."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why a call to HERE or the carrier failed.

    ``status_code`` is only set when the upstream answered with an HTTP error;
    timeouts, connection errors and malformed bodies leave it empty.
    """

    model_config = ConfigDict(frozen=True)

    reason: str
    status_code: int | None = None
    upstream: str | None = None

    @property
    def is_http_error(self) -> bool:
        return self.status_code is not None

    def describe(self) -> str:
        prefix = f"{self.upstream}: " if self.upstream else ""
        if self.is_http_error:
            return f"{prefix}HTTP {self.status_code} ({self.reason})"
        return f"{prefix}{self.reason}"
