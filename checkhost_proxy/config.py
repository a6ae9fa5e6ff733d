import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


def _positive_int(name: str, default: int) -> int:
    return max(1, int(os.getenv(name, default)))


class Settings:
    CHECK_HOST_BASE_URL: str = os.getenv("CHECK_HOST_BASE_URL", "https://check-host.net")
    CHECK_SUBMIT_TIMEOUT_SECONDS: float = float(
        os.getenv("CHECK_SUBMIT_TIMEOUT_SECONDS", "10")
    )
    # Unset means the result fetch runs without a transport timeout.
    CHECK_FETCH_TIMEOUT_SECONDS: float | None = _optional_float("CHECK_FETCH_TIMEOUT_SECONDS")
    CHECK_POLL_MAX_ATTEMPTS: int = _positive_int("CHECK_POLL_MAX_ATTEMPTS", 60)
    CHECK_POLL_INTERVAL_SECONDS: float = float(
        os.getenv("CHECK_POLL_INTERVAL_SECONDS", "1.0")
    )


settings = Settings()
