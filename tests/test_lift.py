"""kungfu adapters."""

from __future__ import annotations

from collections.abc import Awaitable

import pytest
from kungfu import Error, Ok

from safe_async import SafeResult, lift as L, options
from tests._doubles import Boom, SpyLogger, reject, resolve


def test_from_pair() -> None:
    error = Boom()

    match L.from_pair(SafeResult.success(1)):
        case Ok(value):
            assert value == 1
        case _:
            pytest.fail("expected Ok")

    match L.from_pair(SafeResult.failure(error)):
        case Error(err):
            assert err is error
        case _:
            pytest.fail("expected Error")


@pytest.mark.asyncio
async def test_safe_result() -> None:
    error = Boom()

    match await L.safe_result(resolve("x")):
        case Ok(value):
            assert value == "x"
        case _:
            pytest.fail("expected Ok")

    match await L.safe_result(reject(error)):
        case Error(err):
            assert err is error
        case _:
            pytest.fail("expected Error")


@pytest.mark.asyncio
async def test_safe_lazy_defers_work(spy_logger: SpyLogger) -> None:
    calls = 0

    async def job() -> str:
        nonlocal calls
        calls += 1
        raise Boom("deferred")

    lazy = L.safe_lazy(job, options(silent=False, logger=spy_logger))
    assert calls == 0

    match await lazy:
        case Error(err):
            assert str(err) == "deferred"
        case _:
            pytest.fail("expected Error")

    assert calls == 1
    assert [str(e) for e in spy_logger.calls] == ["deferred"]


def test_safe_lazy_validates_options_eagerly() -> None:
    with pytest.raises(TypeError):
        L.safe_lazy(lambda: resolve(1), {"silent": "yes"})


@pytest.mark.asyncio
async def test_safe_lazy_captures_raising_factory(spy_logger: SpyLogger) -> None:
    missing = KeyError("no such user")

    def factory() -> Awaitable[str]:
        raise missing

    lazy = L.safe_lazy(factory, options(silent=False, logger=spy_logger))

    match await lazy:
        case Error(err):
            assert err is missing
        case _:
            pytest.fail("expected Error")

    assert spy_logger.calls == [missing]
