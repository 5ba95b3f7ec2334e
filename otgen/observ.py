"""Structured observability system using structlog.

Provides:
- Context-aware structured logging
- Linguistic system tracking across a generation run
- JSON output when requested, pretty console for dev
- Performance timing utilities

Usage:
    from otgen.observ import get_logger

    logger = get_logger(__name__)
    logger.info("typology_generated", system="sl", competitions=16)
"""

import sys
import logging
import inspect
from typing import Optional
from contextvars import ContextVar
from functools import wraps
from time import perf_counter

import structlog
from structlog.typing import EventDict, WrappedLogger

from otgen.config import get_settings


# Name of the linguistic system the current run is generating for
system_var: ContextVar[Optional[str]] = ContextVar("system", default=None)


# ═════════════════════════════════════════════════════════════════════════════
# Structlog Configuration
# ═════════════════════════════════════════════════════════════════════════════

def add_context_fields(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict
) -> EventDict:
    """Add context variables to every log entry."""
    system = system_var.get()
    if system:
        event_dict.setdefault("system", system)

    return event_dict


def configure_logging() -> None:
    """Configure structlog based on environment settings."""
    settings = get_settings()

    is_dev = settings.debug or settings.log_level.upper() == "DEBUG"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper())
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_context_fields,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_json and not is_dev:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=is_dev)
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Initialize on module import
configure_logging()


# ═════════════════════════════════════════════════════════════════════════════
# Logger Factory
# ═════════════════════════════════════════════════════════════════════════════

def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Bound logger with automatic context
    """
    return structlog.get_logger(name)


# ═════════════════════════════════════════════════════════════════════════════
# Context Management
# ═════════════════════════════════════════════════════════════════════════════

def set_system(name: str) -> None:
    """Set linguistic system name for current context."""
    system_var.set(name)


def clear_context() -> None:
    """Clear all context variables."""
    system_var.set(None)


# ═════════════════════════════════════════════════════════════════════════════
# Performance Timing
# ═════════════════════════════════════════════════════════════════════════════

def timed(logger: Optional[structlog.stdlib.BoundLogger] = None):
    """Decorator to log function execution time.

    Args:
        logger: Logger to use (creates one if not provided)

    Example:
        @timed(logger)
        def underlying_forms(self, length: int) -> list[UnderlyingForm]:
            ...
    """
    def decorator(func):
        nonlocal logger
        if logger is None:
            logger = get_logger(func.__module__)

        if inspect.iscoroutinefunction(func):
            raise TypeError(f"timed() does not support coroutines: {func.__qualname__}")

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    "function_failed",
                    function=func.__qualname__,
                    duration_ms=round((perf_counter() - start) * 1000, 2),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False
                )
                raise
            logger.debug(
                "function_completed",
                function=func.__qualname__,
                duration_ms=round((perf_counter() - start) * 1000, 2),
                success=True
            )
            return result

        return wrapper

    return decorator


class timer:
    """Context manager for timing code blocks.

    Example:
        with timer(logger, "typology_generation", roots=4, suffixes=4):
            competitions = builder.competitions_1r1s()
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        **context
    ):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = perf_counter()
        self.logger.debug(f"{self.operation}_started", **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = perf_counter() - self.start_time
        if exc_type is None:
            self.logger.info(
                f"{self.operation}_completed",
                duration_ms=round(duration * 1000, 2),
                success=True,
                **self.context
            )
        else:
            self.logger.error(
                f"{self.operation}_failed",
                duration_ms=round(duration * 1000, 2),
                error=str(exc_val),
                error_type=exc_type.__name__,
                success=False,
                **self.context
            )
        return False  # Don't suppress exceptions
