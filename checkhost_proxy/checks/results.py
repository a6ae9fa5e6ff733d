from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

OutcomeStatus = Literal["ok", "pending", "error"]

PENDING_MESSAGE = "Results not ready yet. Try again later."


@dataclass(frozen=True)
class CheckOutcome:
    """Terminal result of one check: ok, pending or error.

    ``attempts`` and ``fetch_errors`` record how many result fetches were
    issued and how many of them failed; they are diagnostics only and never
    reach the response envelope.
    """

    status: OutcomeStatus
    message: str | None = None
    data: Any = None
    attempts: int = 0
    fetch_errors: int = 0

    @classmethod
    def ok(cls, data: Any, *, attempts: int = 0, fetch_errors: int = 0) -> CheckOutcome:
        return cls(status="ok", data=data, attempts=attempts, fetch_errors=fetch_errors)

    @classmethod
    def pending(
        cls,
        message: str = PENDING_MESSAGE,
        *,
        attempts: int = 0,
        fetch_errors: int = 0,
    ) -> CheckOutcome:
        return cls(
            status="pending",
            message=message,
            attempts=attempts,
            fetch_errors=fetch_errors,
        )

    @classmethod
    def error(cls, message: str, data: Any = None) -> CheckOutcome:
        return cls(status="error", message=message, data=data)

    @property
    def http_status(self) -> int:
        return 500 if self.status == "error" else 200

    def to_response(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status}
        if self.message:
            payload["message"] = self.message
        if self.data is not None:
            payload["data"] = self.data
        return payload
