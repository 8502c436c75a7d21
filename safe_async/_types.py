"""
Core types for safe_async.

The result pair + callable aliases, with kungfu re-exports.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Callables
# ═══════════════════════════════════════════════════════════════════════════════

type Logger[E] = Callable[[E], None]
"""Side-effecting sink for a failure."""

type ProcessError[E] = Callable[[E], E | None]
"""Transform applied to a raw failure. Returning None keeps it and mutes logging."""

# ═══════════════════════════════════════════════════════════════════════════════
# SafeResult — (error, value) pair
# ═══════════════════════════════════════════════════════════════════════════════


class SafeResult[T, E](NamedTuple):
    """
    Outcome of an awaited computation as an `(error, value)` pair.

    Exactly one slot is populated. The error slot decides: a raised exception
    is never None, so `error is None` means success even when the value is None.

    Example:
        err, user = await safe_async(api.get_user(42))
        if err is not None:
            ...
    """

    error: E | None
    value: T | None

    @classmethod
    def success(cls, value: T) -> SafeResult[T, E]:
        return cls(None, value)

    @classmethod
    def failure(cls, error: E) -> SafeResult[T, E]:
        if error is None:
            raise ValueError("failure requires an error, got None")
        return cls(error, None)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T | None:
        """Return the value, or raise the captured error."""
        if self.error is None:
            return self.value
        if isinstance(self.error, BaseException):
            raise self.error
        raise TypeError(f"unwrap() on failed result: {self.error!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Callables
    "Logger",
    "ProcessError",
    # Pair
    "SafeResult",
)
