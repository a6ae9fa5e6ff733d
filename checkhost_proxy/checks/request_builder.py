from __future__ import annotations

from urllib.parse import quote, urlencode

CHECK_HOST_BASE_URL = "https://check-host.net"

# Vantage points every check is submitted to, in query order.
CHECK_HOST_NODES: tuple[str, ...] = (
    "ir1.node.check-host.net",
    "ir2.node.check-host.net",
    "ir3.node.check-host.net",
    "ir5.node.check-host.net",
    "ir6.node.check-host.net",
    "ir7.node.check-host.net",
    "ir8.node.check-host.net",
)

METHOD_PATHS: dict[str, str] = {
    "http": "check-http",
    "ping": "check-ping",
    "dns": "check-dns",
}


class UnsupportedMethodError(ValueError):
    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"unsupported method: {method}")


def build_check_url(
    target: str,
    method: str,
    *,
    base_url: str = CHECK_HOST_BASE_URL,
    nodes: tuple[str, ...] = CHECK_HOST_NODES,
) -> str:
    path = METHOD_PATHS.get(method)
    if path is None:
        raise UnsupportedMethodError(method)
    query = urlencode([("host", target)] + [("node", node) for node in nodes])
    return f"{base_url.rstrip('/')}/{path}?{query}"


def build_result_url(request_id: str, *, base_url: str = CHECK_HOST_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/check-result/{quote(request_id, safe='')}"
