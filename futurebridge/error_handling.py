"""Demonstrates exceptions crossing from background futures into a coroutine."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import TextIO

from futurebridge.awaitable import make_awaitable

_LAUNCHER = ThreadPoolExecutor(thread_name_prefix="error-handling")


def failing_operation(delay: float = 1.0) -> Future[str]:
    """Start a background job that always fails with :class:`RuntimeError`."""

    def work() -> str:
        time.sleep(delay)
        raise RuntimeError("Operation failed!")

    return _LAUNCHER.submit(work)


def risky_calculation(value: int, delay: float = 0.5) -> Future[int]:
    """Double ``value`` in the background; negative or over 100 values fail."""

    def work() -> int:
        time.sleep(delay)
        if value < 0:
            raise ValueError("Negative values not allowed")
        if value > 100:
            raise OverflowError("Value too large")
        return value * 2

    return _LAUNCHER.submit(work)


async def error_handling_example(
    pool: Executor, out: TextIO | None = None, delay: float = 1.0
) -> None:
    """Await failing jobs and report each kind of exception caught."""
    out = out if out is not None else sys.stdout
    print("Starting error handling example...", file=out)

    try:
        result = await make_awaitable(failing_operation(delay), pool)
        print(f"This should not print: {result}", file=out)
    except RuntimeError as exc:
        print(f"Caught runtime error: {exc}", file=out)
    except Exception as exc:
        print(f"Caught exception: {exc}", file=out)

    for value in (-5, 50, 150):
        try:
            print(f"Testing value: {value}", file=out)
            result = await make_awaitable(risky_calculation(value, delay / 2), pool)
            print(f"Success - Result: {result}", file=out)
        except ValueError as exc:
            print(f"Invalid argument: {exc}", file=out)
        except OverflowError as exc:
            print(f"Out of range: {exc}", file=out)
        except Exception as exc:
            print(f"Other exception: {exc}", file=out)

    print("Error handling example finished!", file=out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="error-handling", description=__doc__)
    parser.add_argument(
        "--delay", type=float, default=1.0, help="seconds each simulated job takes"
    )
    args = parser.parse_args(argv)

    print("Starting error handling demo...")
    with ThreadPoolExecutor(max_workers=max(1, os.cpu_count() or 1)) as pool:
        asyncio.run(error_handling_example(pool, delay=args.delay))
    print("Program finished!")
    return 0


if __name__ == "__main__":
    sys.exit(main())