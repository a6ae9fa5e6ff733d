from __future__ import annotations

from typing import Any

import requests

from checkhost_proxy.checks.request_builder import CHECK_HOST_BASE_URL, build_result_url
from checkhost_proxy.models import UpstreamResultSet

JSON_HEADERS = {"Accept": "application/json"}


class CheckHostClientError(RuntimeError):
    """Failure talking to check-host.net.

    ``kind`` is one of ``transport``, ``http_status``, ``decode`` or
    ``contract``; ``raw`` keeps whatever upstream sent back for diagnostics.
    """

    def __init__(self, message: str, *, kind: str, raw: Any = None) -> None:
        self.kind = kind
        self.raw = raw
        super().__init__(message)


def _get(url: str, timeout_s: float | None) -> requests.Response:
    try:
        return requests.get(url, headers=JSON_HEADERS, timeout=timeout_s)
    except requests.Timeout as exc:
        raise CheckHostClientError(
            f"check-host.net timed out after {timeout_s}s", kind="transport"
        ) from exc
    except requests.ConnectionError as exc:
        raise CheckHostClientError(
            f"check-host.net connection error: {exc.__class__.__name__}: {exc}",
            kind="transport",
        ) from exc
    except requests.RequestException as exc:
        raise CheckHostClientError(
            f"Failed to reach check-host.net: {exc.__class__.__name__}: {exc}",
            kind="transport",
        ) from exc


def _decode_json(resp: requests.Response) -> Any:
    if resp.status_code >= 400:
        raise CheckHostClientError(
            f"check-host.net returned HTTP {resp.status_code}",
            kind="http_status",
            raw=resp.text[:240],
        )
    try:
        return resp.json()
    except (ValueError, RecursionError) as exc:
        raise CheckHostClientError(
            "check-host.net returned non-JSON response",
            kind="decode",
            raw=resp.text,
        ) from exc


def submit_check(url: str, *, timeout_s: float = 10.0) -> str:
    """Submit a check and return the ``request_id`` used to poll it."""
    payload = _decode_json(_get(url, timeout_s))
    request_id = payload.get("request_id") if isinstance(payload, dict) else None
    if not isinstance(request_id, str) or not request_id:
        raise CheckHostClientError(
            "No request_id in response", kind="contract", raw=payload
        )
    return request_id


def fetch_result(
    request_id: str,
    *,
    base_url: str = CHECK_HOST_BASE_URL,
    timeout_s: float | None = None,
) -> UpstreamResultSet:
    payload = _decode_json(_get(build_result_url(request_id, base_url=base_url), timeout_s))
    if not isinstance(payload, dict):
        raise CheckHostClientError(
            "check-host.net result payload is not a JSON object",
            kind="contract",
            raw=payload,
        )
    return payload
