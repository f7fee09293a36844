"""
Structured logging for Synapse.

All modules log through structlog with snake_case event names and keyword
context. Output is a colored console renderer locally and one JSON object
per line when ``LOG_JSON`` is set.

Usage:
    from synapse.logging import get_logger, LogContext

    logger = get_logger("services.synapse")

    with LogContext(user_id=user_id):
        logger.info("matches_computed", matches=3)
"""

import logging
import sys
import time
from collections.abc import Callable, MutableMapping
from functools import wraps
from typing import Any, TypeVar

import structlog
from structlog.types import Processor

F = TypeVar("F", bound=Callable[..., Any])

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine",)

# Probes hit these constantly; request logging skips them
_QUIET_PATHS = frozenset({"/health", "/health/ready"})

_configured = False


def _add_service(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    event_dict.setdefault("service", "synapse")
    return event_dict


def _processors(json_logs: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        _add_service,
    ]
    if json_logs:
        return processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return processors + [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name. Defaults to ``settings.log_level``.
        json_logs: Render JSON lines. Defaults to ``settings.log_json``.
    """
    global _configured

    from .config import get_settings

    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    json_logs = settings.log_json if json_logs is None else json_logs
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)
    logging.getLogger().setLevel(numeric_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger named ``synapse.<name>``, configuring defaults on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(f"synapse.{name}")


# =============================================================================
# Context
# =============================================================================


def bind_context(**kwargs: Any) -> None:
    """Bind values that every following log entry in this context carries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LogContext:
    """
    Bind log context for the duration of a ``with`` block.

    Previous values of the same keys are restored on exit, so nested
    contexts and values bound by middleware survive.
    """

    def __init__(self, **kwargs: Any):
        self._bound = structlog.contextvars.bound_contextvars(**kwargs)

    def __enter__(self) -> "LogContext":
        self._bound.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self._bound.__exit__(exc_type, exc_val, exc_tb)
        return False


def log_timing(operation: str) -> Callable[[F], F]:
    """
    Log how long a synchronous call took and whether it raised.

    Usage:
        @log_timing("compute_matches")
        def compute_matches(self, user_id):
            ...
    """

    def decorator(func: F) -> F:
        logger = get_logger(func.__module__.removeprefix("synapse."))

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            outcome = "error"
            try:
                result = func(*args, **kwargs)
                outcome = "ok"
                return result
            finally:
                logger.info(
                    "operation_timed",
                    operation=operation,
                    outcome=outcome,
                    duration_ms=round((time.perf_counter() - start) * 1000, 1),
                )

        return wrapper  # type: ignore[return-value]

    return decorator


# =============================================================================
# ASGI request logging
# =============================================================================


class RequestLoggingMiddleware:
    """Log one ``http_request`` entry per request with status and latency."""

    def __init__(self, app):
        self.app = app
        self.logger = get_logger("http")

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope.get("path") in _QUIET_PATHS:
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            if status_code >= 500:
                log = self.logger.error
            elif status_code >= 400:
                log = self.logger.warning
            else:
                log = self.logger.info
            log(
                "http_request",
                method=scope.get("method"),
                path=scope.get("path"),
                status_code=status_code,
                request_id=scope.get("state", {}).get("request_id"),
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
            )
            clear_context()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
    "log_timing",
    "RequestLoggingMiddleware",
]
