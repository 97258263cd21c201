# futurebridge

`futurebridge` lets an asyncio coroutine await a blocking
`concurrent.futures.Future` without stalling the event loop. The blocking
wait runs on an executor that you supply. The future's result, or the
exception it raised, is then handed back to the coroutine that awaited it.

It has no dependencies beyond the standard library and supports Python 3.10
and later.

## Awaiting a future

`futurebridge.awaitable.make_awaitable(future, pool)` is a coroutine. It
waits for `future` on one of `pool`'s threads and returns the future's value.
If the future failed, it raises that same exception object.

```python
import asyncio
import time
from concurrent.futures import ThreadPoolExecutor

from futurebridge.awaitable import make_awaitable


def slow_square(x):
    time.sleep(0.5)
    return x * x


async def run():
    with ThreadPoolExecutor() as workers, ThreadPoolExecutor() as pool:
        future = workers.submit(slow_square, 7)
        print(await make_awaitable(future, pool))  # 49


asyncio.run(run())
```

Use separate executors for the work and for the wait. The waiting thread
blocks until the work finishes; if both share a small pool, the wait can
hold the only thread the work needed.

## Outcomes without raising

`resolve_outcome(future, pool)` is the lower-level form. It returns an
`Outcome`, a frozen dataclass with the fields `value`, `error` and
`has_value`. Awaiting it never raises the future's exception; the exception
is stored in `error`. `Outcome.unwrap()` returns the value, raises the stored
exception, or raises `RuntimeError` if the outcome holds neither.

```python
from futurebridge.awaitable import resolve_outcome

outcome = await resolve_outcome(future, pool)
if outcome.error is not None:
    print("failed:", outcome.error)
else:
    print("value:", outcome.unwrap())
```

## Demonstration programs

Three demonstration programs are installed as commands. Each prints its
progress to standard output and uses a thread pool sized to the machine's
CPU count for the waits.

- `futurebridge-basic-usage [--delay SECONDS]` awaits one simulated job,
  then starts two more jobs and a calculation of the 10th Fibonacci number
  together and awaits each in turn. `--delay` sets how long each simulated
  job takes (default 1.0; the Fibonacci job takes half of it).
- `futurebridge-database-example [--seed N] [--time-scale FACTOR]` runs
  simulated queries against a `DatabaseConnection` whose latency is random.
  `--seed` makes the latencies and row counts repeatable; `--time-scale`
  multiplies every latency (0 makes queries instant).
- `futurebridge-error-handling [--delay SECONDS]` shows exceptions raised on
  a worker thread reaching the awaiting coroutine with their original types:
  `RuntimeError`, `ValueError` for negative values and `OverflowError` for
  values over 100.

The same programs can be run with `python -m futurebridge.basic_usage`,
`python -m futurebridge.database_example` and
`python -m futurebridge.error_handling`.

`DatabaseConnection` only simulates a database: it does not connect to or
store anything. Its `query(sql)` answers from the words `SELECT`, `INSERT`
and `UPDATE` in the statement, and `count(table)` returns a random number of
rows.