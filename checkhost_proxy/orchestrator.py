from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from functools import partial
from typing import Callable

from checkhost_proxy.checks.request_builder import build_check_url
from checkhost_proxy.checks.results import CheckOutcome
from checkhost_proxy.clients.check_host import CheckHostClientError, fetch_result, submit_check
from checkhost_proxy.config import settings
from checkhost_proxy.formatting import format_outcome
from checkhost_proxy.models import CheckRequest
from checkhost_proxy.poller import FetchFn, PollPolicy, poll_results

logger = logging.getLogger(__name__)

SubmitFn = Callable[..., str]


def default_policy() -> PollPolicy:
    return PollPolicy(
        max_attempts=settings.CHECK_POLL_MAX_ATTEMPTS,
        interval_s=settings.CHECK_POLL_INTERVAL_SECONDS,
    )


def default_fetch() -> FetchFn:
    return partial(
        fetch_result,
        base_url=settings.CHECK_HOST_BASE_URL,
        timeout_s=settings.CHECK_FETCH_TIMEOUT_SECONDS,
    )


def run_check(
    request: CheckRequest,
    url: str,
    *,
    submit: SubmitFn = submit_check,
    fetch: FetchFn | None = None,
    policy: PollPolicy | None = None,
    submit_timeout_s: float | None = None,
    sleep: Callable[[float], None] | None = None,
) -> CheckOutcome:
    """Submit one check and poll it to a terminal outcome. Never raises."""
    timeout_s = settings.CHECK_SUBMIT_TIMEOUT_SECONDS if submit_timeout_s is None else submit_timeout_s

    logger.info("Submitting check | method=%s | target=%s | url=%s", request.method, request.target, url)
    try:
        request_id = submit(url, timeout_s=timeout_s)
    except CheckHostClientError as exc:
        logger.error("Check submission failed | kind=%s | error=%s", exc.kind, exc)
        if exc.kind == "decode":
            logger.info("Non-JSON response from check-host.net: %s", exc.raw)
        return CheckOutcome.error(str(exc), data=exc.raw)

    logger.info("Polling check | request_id=%s", request_id)
    poll_kwargs = {"fetch": fetch or default_fetch(), "policy": policy or default_policy()}
    if sleep is not None:
        poll_kwargs["sleep"] = sleep
    outcome = poll_results(request_id, **poll_kwargs)

    logger.info("Check finished | request_id=%s | %s", request_id, format_outcome(outcome, request.model_dump()))
    return outcome


def _resolve(future: Future, request: CheckRequest, url: str, kwargs: dict) -> None:
    try:
        outcome = run_check(request, url, **kwargs)
    except Exception as exc:
        logger.exception("Check worker crashed | method=%s | target=%s", request.method, request.target)
        outcome = CheckOutcome.error(f"internal error: {exc.__class__.__name__}: {exc}")
    future.set_result(outcome)


def prepare_check(target: str, method: str) -> tuple[CheckRequest, str]:
    """Validate the inbound pair and build the submission URL.

    Raises ``UnsupportedMethodError`` for an unknown method; no network call
    is made here.
    """
    url = build_check_url(target, method, base_url=settings.CHECK_HOST_BASE_URL)
    return CheckRequest(target=target, method=method), url


def start_check(request: CheckRequest, url: str, **kwargs) -> Future:
    """Run the check on its own thread.

    The returned future is resolved exactly once with a ``CheckOutcome``.
    Nothing cancels the worker once it has started.
    """
    future: Future = Future()
    future.set_running_or_notify_cancel()
    worker = threading.Thread(
        target=_resolve,
        args=(future, request, url, kwargs),
        name=f"check-{request.method}-{request.target}",
        daemon=True,
    )
    worker.start()
    return future


def execute_check(request: CheckRequest, url: str, **kwargs) -> CheckOutcome:
    return start_check(request, url, **kwargs).result()
