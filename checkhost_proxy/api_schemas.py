from __future__ import annotations

from typing import Any, Literal
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    check_host_base_url: str
    nodes: list[str]
    submit_timeout_s: float = Field(gt=0)
    fetch_timeout_s: float | None = Field(default=None)
    poll_max_attempts: int = Field(ge=1)
    poll_interval_s: float = Field(ge=0)


class CheckResponse(BaseModel):
    status: Literal["ok", "pending", "error"]
    message: str | None = Field(default=None, description="Human-readable detail")
    data: Any = Field(
        default=None,
        description="Per-node results on success, raw upstream payload on error",
    )
