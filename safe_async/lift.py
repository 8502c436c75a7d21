"""
Lift — bridges between SafeResult pairs and kungfu.

    from safe_async import lift as L

    result = await L.safe_result(api.get_user(42))   # Result[User, Exception]
    lazy = L.safe_lazy(lambda: api.get_user(42))     # LazyCoroResult[User, Exception]
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping

from safe_async._options import Options
from safe_async._types import Result, Ok, Error, LazyCoroResult, SafeResult
from safe_async._wrap import safe_async


def from_pair[T, E](pair: SafeResult[T, E]) -> Result[T, E]:
    """Convert `(None, v)` to Ok(v) and `(e, None)` to Error(e)."""
    error, value = pair
    if error is None:
        return Ok(value)  # type: ignore[arg-type]
    return Error(error)


async def safe_result[T](
    pending: Awaitable[T],
    options: Options | Mapping[str, object] | None = None,
) -> Result[T, Exception]:
    """safe_async() with the outcome as a kungfu Result."""
    return from_pair(await safe_async(pending, options))


def safe_lazy[T](
    factory: Callable[[], Awaitable[T]],
    options: Options | Mapping[str, object] | None = None,
) -> LazyCoroResult[T, Exception]:
    """
    Defer safe_async() until awaited.

    The factory is only called when the lazy value is awaited, inside the
    capture: a factory that raises before returning an awaitable yields
    Error like any other failure. Options are validated here, not at await time.

    Example:
        lazy = L.safe_lazy(lambda: api.get_user(42), options(silent=False))
        match await lazy:
            case Ok(user): ...
            case Error(err): ...
    """
    opts = Options.coerce(options)

    async def _call() -> T:
        return await factory()

    async def _run() -> Result[T, Exception]:
        return await safe_result(_call(), opts)

    return LazyCoroResult(_run)


__all__ = ("from_pair", "safe_result", "safe_lazy")
