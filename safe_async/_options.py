"""
Invocation options.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from safe_async._types import Logger, ProcessError

_KEYS: dict[str, str] = {
    "silent": "silent",
    "logger": "logger",
    "process_error": "process_error",
    "processError": "process_error",
}


@dataclass(frozen=True, slots=True)
class Options:
    """
    Per-call configuration, read once by safe_async().

    - silent: suppress the logging side effect (default True)
    - logger: failure sink; None means the default stderr sink
    - process_error: transform for the raw failure; returning None keeps
      the raw failure and suppresses logging for that call
    """

    silent: bool = True
    logger: Logger[Exception] | None = None
    process_error: ProcessError[Exception] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.silent, bool):
            raise TypeError(f"silent must be bool, got {type(self.silent).__name__}")
        if self.logger is not None and not callable(self.logger):
            raise TypeError("logger must be callable or None")
        if self.process_error is not None and not callable(self.process_error):
            raise TypeError("process_error must be callable or None")

    @classmethod
    def coerce(cls, value: Options | Mapping[str, object] | None) -> Options:
        """
        Normalize user input into Options.

        Mappings may use `process_error` or `processError`; other keys are ignored,
        and None values count as absent.
        """
        if value is None:
            return DEFAULT
        if isinstance(value, Options):
            return value
        if isinstance(value, Mapping):
            fields = {
                _KEYS[k]: v for k, v in value.items() if k in _KEYS and v is not None
            }
            return cls(**fields)  # type: ignore[arg-type]
        raise TypeError(f"expected Options, Mapping or None, got {type(value).__name__}")


DEFAULT = Options()


def options(
    *,
    silent: bool = True,
    logger: Logger[Exception] | None = None,
    process_error: ProcessError[Exception] | None = None,
) -> Options:
    """
    Build invocation options.

    Example:
        err, _ = await safe_async(job(), options(silent=False, logger=log.error))
    """
    return Options(silent=silent, logger=logger, process_error=process_error)


__all__ = ("Options", "DEFAULT", "options")
