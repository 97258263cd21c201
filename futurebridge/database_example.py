"""Demonstrates awaiting futures returned by a simulated database connection."""

from __future__ import annotations

import argparse
import asyncio
import os
import random
import sys
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import TextIO

from futurebridge.awaitable import make_awaitable

_LAUNCHER = ThreadPoolExecutor(thread_name_prefix="database")


class DatabaseConnection:
    """A fake connection whose queries finish after a random latency.

    ``time_scale`` multiplies every simulated latency; 0 makes queries instant.
    """

    def __init__(self, rng: random.Random | None = None, time_scale: float = 1.0) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._time_scale = time_scale

    def query(self, sql: str) -> Future[str]:
        """Run ``sql`` in the background and return a description of the result."""
        latency = (100 + self._rng.randrange(500)) / 1000 * self._time_scale

        def work() -> str:
            time.sleep(latency)
            if "SELECT" in sql:
                return f"Result set: {sql}"
            if "INSERT" in sql:
                return "Inserted 1 row"
            if "UPDATE" in sql:
                return "Updated 3 rows"
            return f"Query executed: {sql}"

        return _LAUNCHER.submit(work)

    def count(self, table: str) -> Future[int]:
        """Return a simulated row count for ``table`` in the background."""
        latency = (50 + self._rng.randrange(200)) / 1000 * self._time_scale
        rows = 100 + self._rng.randrange(1000)

        def work() -> int:
            time.sleep(latency)
            return rows

        return _LAUNCHER.submit(work)


async def database_operations(
    pool: Executor, db: DatabaseConnection | None = None, out: TextIO | None = None
) -> None:
    """Run a sequence of queries, then three concurrent ones, printing results."""
    db = db if db is not None else DatabaseConnection()
    out = out if out is not None else sys.stdout
    try:
        print("Starting database operations...", file=out)

        users = await make_awaitable(db.query("SELECT * FROM users WHERE active = 1"), pool)
        print(f"Users query result: {users}", file=out)

        insert_result = await make_awaitable(
            db.query("INSERT INTO users (name, email) VALUES ('John', 'john@example.com')"),
            pool,
        )
        print(f"Insert result: {insert_result}", file=out)

        user_count = await make_awaitable(db.count("users"), pool)
        print(f"Total users: {user_count}", file=out)

        print("Running concurrent queries...", file=out)
        query1 = db.query("SELECT * FROM products WHERE price > 100")
        query2 = db.query("SELECT * FROM orders WHERE status = 'pending'")
        query3 = db.count("products")

        result1 = await make_awaitable(query1, pool)
        result2 = await make_awaitable(query2, pool)
        result3 = await make_awaitable(query3, pool)

        print(f"Products: {result1}", file=out)
        print(f"Orders: {result2}", file=out)
        print(f"Product count: {result3}", file=out)
    except Exception as exc:
        print(f"Database operation failed: {exc}", file=out)
    print("Database operations completed!", file=out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="database-example", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--time-scale", type=float, default=1.0, help="multiplier for simulated latency"
    )
    args = parser.parse_args(argv)

    print("Starting database example...")
    db = DatabaseConnection(random.Random(args.seed), time_scale=args.time_scale)
    with ThreadPoolExecutor(max_workers=max(1, os.cpu_count() or 1)) as pool:
        asyncio.run(database_operations(pool, db))
    print("Database example finished!")
    return 0


if __name__ == "__main__":
    sys.exit(main())