from __future__ import annotations

from typing import Any, Dict

from checkhost_proxy.checks.results import CheckOutcome


def count_reported_nodes(result_set: Dict[str, Any]) -> tuple[int, int]:
    reported = sum(1 for value in result_set.values() if value is not None)
    return reported, len(result_set)


def format_outcome(outcome: CheckOutcome, request: Dict[str, Any]) -> str:
    parts = [
        f"[{outcome.status.upper()}] {request['method']} {request['target']}",
        f"attempts={outcome.attempts}",
        f"fetch_errors={outcome.fetch_errors}",
    ]
    if outcome.status == "ok" and isinstance(outcome.data, dict):
        reported, total = count_reported_nodes(outcome.data)
        parts.append(f"nodes={reported}/{total}")
    if outcome.message:
        parts.append(f"message={outcome.message}")
    return " | ".join(parts)
