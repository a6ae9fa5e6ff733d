from __future__ import annotations

from typing import Any, Dict, Literal, get_args
from pydantic import BaseModel, Field

CheckMethod = Literal["http", "ping", "dns"]

SUPPORTED_METHODS: tuple[str, ...] = get_args(CheckMethod)

# Node name -> per-node result, or None while the node has not reported.
UpstreamResultSet = Dict[str, Any]


class CheckRequest(BaseModel):
    target: str = Field(..., min_length=1)
    method: CheckMethod
