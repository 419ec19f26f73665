"""
Client configuration.

Environment:
    MISW_API_URL        Default offered at the base URL prompt
    MISW_HTTP_TIMEOUT   Per-request timeout in seconds
    MISW_LOG_LEVEL      Logging level name (DEBUG, INFO, WARNING, ...)

Credentials are always typed in at the prompt, never read from here.
"""

from __future__ import annotations
from dataclasses import dataclass
import os

DEFAULT_BASE_URL = "http://localhost:8321"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ClientConfig:
    """Settings resolved before the first prompt."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ClientConfig:
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        timeout = DEFAULT_TIMEOUT
        raw_timeout = env.get("MISW_HTTP_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"MISW_HTTP_TIMEOUT must be a number, got {raw_timeout!r}")
            if timeout <= 0:
                raise ValueError("MISW_HTTP_TIMEOUT must be positive")

        log_level = (env.get("MISW_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"MISW_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            base_url=env.get("MISW_API_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            log_level=log_level,
        )
