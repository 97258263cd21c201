"""Demonstrates awaiting blocking futures from a coroutine."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import TextIO

from futurebridge.awaitable import make_awaitable

_LAUNCHER = ThreadPoolExecutor(thread_name_prefix="basic-usage")


def simulate_async_work(task: str, delay: float = 1.0) -> Future[str]:
    """Start a slow job in the background that reports completion of ``task``."""

    def work() -> str:
        time.sleep(delay)
        return f"Completed: {task}"

    return _LAUNCHER.submit(work)


def _fibonacci(n: int) -> int:
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def calculate_fibonacci(n: int, delay: float = 0.5) -> Future[int]:
    """Compute the ``n``-th Fibonacci number in the background after ``delay``."""

    def work() -> int:
        time.sleep(delay)
        return _fibonacci(n)

    return _LAUNCHER.submit(work)


async def example_coroutine(
    pool: Executor, out: TextIO | None = None, delay: float = 1.0
) -> None:
    """Await one job, then three jobs started together, printing each result."""
    out = out if out is not None else sys.stdout
    print("Starting coroutine...", file=out)
    try:
        result1 = await make_awaitable(simulate_async_work("Database query", delay), pool)
        print(f"Result 1: {result1}", file=out)

        future1 = simulate_async_work("Task 1", delay)
        future2 = simulate_async_work("Task 2", delay)
        future3 = calculate_fibonacci(10, delay / 2)

        result2 = await make_awaitable(future1, pool)
        result3 = await make_awaitable(future2, pool)
        result4 = await make_awaitable(future3, pool)

        print(f"Result 2: {result2}", file=out)
        print(f"Result 3: {result3}", file=out)
        print(f"Result 4: {result4}", file=out)
    except Exception as exc:
        print(f"Exception caught: {exc}", file=out)
    print("Coroutine finished!", file=out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="basic-usage", description=__doc__)
    parser.add_argument(
        "--delay", type=float, default=1.0, help="seconds each simulated job takes"
    )
    args = parser.parse_args(argv)

    print("Starting basic usage example...")
    with ThreadPoolExecutor(max_workers=max(1, os.cpu_count() or 1)) as pool:
        print("Running event loop...")
        asyncio.run(example_coroutine(pool, delay=args.delay))
    print("Program finished!")
    return 0


if __name__ == "__main__":
    sys.exit(main())