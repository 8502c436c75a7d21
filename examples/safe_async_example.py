"""
safe_async — (error, value) pairs instead of try/except.

Key concepts:
- Failures come back in the first slot, never raised
- silent=True by default; opt into logging per call
- process_error can replace a failure, or return None to mute logging

Level 2: safe_async.safe_async
Level 1: kungfu.Result (via safe_async.lift)
"""

import asyncio

from kungfu import Ok, Error
from safe_async import safe_async, options, lift as L
from examples._infra import banner, run, FakeApi, NotFound, ServiceError


api = FakeApi()


def to_service_error(e: Exception) -> Exception:
    return ServiceError(f"user lookup failed: {e}", cause=e)


def ignore_not_found(e: Exception) -> Exception | None:
    return None if isinstance(e, NotFound) else e


async def main() -> None:
    banner("1. Success and failure pairs")
    err, user = await safe_async(api.get_user(1))
    print(f"err={err!r} user={user}")
    err, user = await safe_async(api.get_user(99))
    print(f"err={err!r} user={user}")

    banner("2. Logging to stderr (silent=False)")
    await safe_async(api.get_user(99), options(silent=False))

    banner("3. Custom logger + error transform")
    err, _ = await safe_async(
        api.get_user(99),
        options(silent=False, logger=lambda e: print(f"[custom] {e}"), process_error=to_service_error),
    )
    print(f"returned: {err!r}")

    banner("4. Expected failures: keep the error, skip the log")
    err, _ = await safe_async(
        api.get_user(99),
        options(silent=False, process_error=ignore_not_found),
    )
    print(f"returned: {err!r} (nothing logged)")

    banner("5. Concurrent lookups")
    results = await asyncio.gather(*(safe_async(api.get_user(i)) for i in (1, 2, 3)))
    for err, user in results:
        print(f"  {'ERR ' + str(err) if err else user.name}")

    banner("6. kungfu Result")
    match await L.safe_result(api.get_user(2)):
        case Ok(user):
            print(f"Ok: {user.name}")
        case Error(e):
            print(f"Error: {e}")


if __name__ == "__main__":
    run(main)
