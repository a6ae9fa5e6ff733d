import logging

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from checkhost_proxy.api_schemas import CheckResponse, ConfigResponse, HealthResponse
from checkhost_proxy.checks.request_builder import CHECK_HOST_NODES, UnsupportedMethodError
from checkhost_proxy.config import settings
from checkhost_proxy.models import SUPPORTED_METHODS
from checkhost_proxy.orchestrator import execute_check, prepare_check

logger = logging.getLogger(__name__)

MISSING_PARAMS_MESSAGE = "Missing 'target' (or 'ip') or 'method' query parameter."


app = FastAPI(
    title="Check-Host Proxy",
    version="1.0.0",
    description=(
        "Submits HTTP/ping/DNS checks to check-host.net, polls until the "
        "vantage-point nodes report, and returns one aggregated result."
    ),
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns the upstream endpoint, node list and poll policy in effect.",
)
def config():
    return {
        "check_host_base_url": settings.CHECK_HOST_BASE_URL,
        "nodes": list(CHECK_HOST_NODES),
        "submit_timeout_s": settings.CHECK_SUBMIT_TIMEOUT_SECONDS,
        "fetch_timeout_s": settings.CHECK_FETCH_TIMEOUT_SECONDS,
        "poll_max_attempts": settings.CHECK_POLL_MAX_ATTEMPTS,
        "poll_interval_s": settings.CHECK_POLL_INTERVAL_SECONDS,
    }


@app.get(
    "/check",
    response_model=CheckResponse,
    response_model_exclude_none=True,
    tags=["checks"],
    summary="Run Check",
    description=(
        "Submits a check to check-host.net and blocks until at least one node "
        "reports or the poll budget runs out."
    ),
    responses={
        400: {"model": CheckResponse, "description": "Missing or unsupported parameters"},
        500: {"model": CheckResponse, "description": "Upstream submission failed"},
    },
)
def check(
    target: str | None = Query(default=None, description="Host, URL or IP to check"),
    ip: str | None = Query(default=None, description="Alias of target"),
    method: str | None = Query(default=None, description=f"One of {', '.join(SUPPORTED_METHODS)}"),
):
    target = target or ip
    logger.info("Received request: target=%s, method=%s", target, method)

    if not target or not method:
        return _error_response(400, MISSING_PARAMS_MESSAGE)

    try:
        request, url = prepare_check(target, method)
    except UnsupportedMethodError as exc:
        logger.warning("Rejected check request: %s", exc)
        return _error_response(400, str(exc))

    outcome = execute_check(request, url)
    return JSONResponse(status_code=outcome.http_status, content=outcome.to_response())
