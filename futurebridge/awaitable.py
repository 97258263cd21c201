"""Await blocking :class:`concurrent.futures.Future` objects from asyncio code.

The wait for a future happens on a worker pool so the event loop stays free;
the result or exception is then delivered back on the loop that awaited it.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """The settled state of a future: either a value or an exception."""

    value: T | None = None
    error: BaseException | None = None
    has_value: bool = False

    def unwrap(self) -> T:
        """Return the value, or raise the captured exception."""
        if self.error is not None:
            raise self.error
        if self.has_value:
            return self.value  # type: ignore[return-value]
        raise RuntimeError("futurebridge: unknown error - no result and no exception")


def _wait_for(future: Future[T]) -> Outcome[T]:
    try:
        value = future.result()
    except BaseException as exc:  # every failure is handed back to the awaiting task
        return Outcome(error=exc)
    return Outcome(value=value, has_value=True)


async def resolve_outcome(future: Future[T], pool: Executor) -> Outcome[T]:
    """Wait for ``future`` on ``pool`` and return its :class:`Outcome`.

    Never raises the future's own exception; it is carried in the outcome.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(pool, _wait_for, future)


async def make_awaitable(future: Future[T], pool: Executor) -> T:
    """Wait for ``future`` on ``pool`` and return its value or raise its exception."""
    outcome = await resolve_outcome(future, pool)
    return outcome.unwrap()