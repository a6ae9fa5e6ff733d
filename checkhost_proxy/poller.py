from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from checkhost_proxy.checks.results import CheckOutcome
from checkhost_proxy.clients.check_host import CheckHostClientError, fetch_result
from checkhost_proxy.models import UpstreamResultSet

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], UpstreamResultSet]


@dataclass(frozen=True)
class PollPolicy:
    max_attempts: int = 60
    interval_s: float = 1.0


def results_ready(result_set: Any) -> bool:
    """True once upstream has populated at least one node's result."""
    if not isinstance(result_set, dict) or not result_set:
        return False
    return any(value is not None for value in result_set.values())


def poll_results(
    request_id: str,
    *,
    fetch: FetchFn = fetch_result,
    policy: PollPolicy = PollPolicy(),
    sleep: Callable[[float], None] = time.sleep,
) -> CheckOutcome:
    fetch_errors = 0

    for attempt in range(1, policy.max_attempts + 1):
        if attempt > 1:
            sleep(policy.interval_s)

        try:
            result_set = fetch(request_id)
        except CheckHostClientError as exc:
            # Counts as "not ready"; only exhaustion is surfaced.
            fetch_errors += 1
            logger.debug(
                "Result fetch failed | request_id=%s | attempt=%s | kind=%s | error=%s",
                request_id,
                attempt,
                exc.kind,
                exc,
            )
            continue

        if results_ready(result_set):
            return CheckOutcome.ok(result_set, attempts=attempt, fetch_errors=fetch_errors)

    return CheckOutcome.pending(attempts=policy.max_attempts, fetch_errors=fetch_errors)
