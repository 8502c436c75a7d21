"""
safe_async() — await once, return (error, value).
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Mapping

from safe_async._logging import default_logger
from safe_async._options import Options
from safe_async._types import SafeResult


async def safe_async[T](
    pending: Awaitable[T],
    options: Options | Mapping[str, object] | None = None,
) -> SafeResult[T, Exception]:
    """
    Await `pending` and return its outcome as a pair instead of raising.

    On success: `(None, value)`, never logged.
    On failure: `(error, None)`, where error is the raw exception or whatever
    `process_error` returned for it. If `process_error` returns None the raw
    exception is kept and nothing is logged. Otherwise the logger is called
    once with the returned error unless `silent` is True (the default).

    Exceptions raised by `process_error` or the logger propagate, as do
    non-Exception BaseExceptions such as asyncio.CancelledError. Invalid options
    raise TypeError before anything is awaited; a coroutine passed in is closed.

    Example:
        from safe_async import safe_async, options

        err, user = await safe_async(api.get_user(42))
        if err is not None:
            return None

        err, _ = await safe_async(
            api.delete_user(42),
            options(silent=False, process_error=lambda e: DeleteFailed(str(e))),
        )
    """
    try:
        opts = Options.coerce(options)
    except TypeError:
        if inspect.iscoroutine(pending):
            pending.close()
        raise

    try:
        value = await pending
    except Exception as raw:
        error: Exception = raw
        should_log = not opts.silent

        if opts.process_error is not None:
            processed = opts.process_error(raw)
            if processed is None:
                should_log = False
            else:
                error = processed

        if should_log:
            logger = opts.logger if opts.logger is not None else default_logger
            logger(error)

        return SafeResult.failure(error)

    return SafeResult.success(value)


__all__ = ("safe_async",)
