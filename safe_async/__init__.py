"""
safe_async — await anything, get `(error, value)` back.

    from safe_async import safe_async, options

    err, user = await safe_async(api.get_user(42))
    err, _ = await safe_async(job(), options(silent=False))

    from safe_async import lift as L  # kungfu Result / LazyCoroResult adapters
"""

from safe_async import lift
from safe_async._logging import default_logger
from safe_async._options import Options, options
from safe_async._types import (
    SafeResult,
    Logger,
    ProcessError,
)
from safe_async._wrap import safe_async

__version__ = "0.1.0"

__all__ = (
    "safe_async",
    "lift",
    "Options",
    "options",
    "SafeResult",
    "Logger",
    "ProcessError",
    "default_logger",
)
