"""Default failure sink: one structlog event on stderr."""

from __future__ import annotations

import sys

import structlog

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.dev.ConsoleRenderer(
        colors=False,
        exception_formatter=structlog.dev.plain_traceback,
    ),
]


def _stderr_logger() -> structlog.typing.BindableLogger:
    # sys.stderr is looked up per call so redirection after import still applies
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=_PROCESSORS,
    )


def default_logger(error: object) -> None:
    """Write a failure to stderr."""
    log = _stderr_logger()
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        log.error(
            "async operation failed",
            error=repr(error),
            error_type=type(error).__name__,
            exc_info=error,
        )
        return
    log.error(
        "async operation failed",
        error=repr(error),
        error_type=type(error).__name__,
    )


__all__ = ("default_logger",)
