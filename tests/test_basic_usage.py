import io
from concurrent.futures import ThreadPoolExecutor

import pytest

from futurebridge.basic_usage import (
    calculate_fibonacci,
    example_coroutine,
    main,
    simulate_async_work,
)


@pytest.fixture
def pool():
    executor = ThreadPoolExecutor(max_workers=2)
    yield executor
    executor.shutdown(wait=True)


def test_simulate_async_work_result():
    assert simulate_async_work("Task 1", delay=0).result(timeout=5) == "Completed: Task 1"


@pytest.mark.parametrize("n", [0, 1, -3])
def test_fibonacci_small_values_return_n(n):
    assert calculate_fibonacci(n, delay=0).result(timeout=5) == n


def test_fibonacci_ten():
    assert calculate_fibonacci(10, delay=0).result(timeout=5) == 55


def test_fibonacci_recurrence():
    values = [calculate_fibonacci(n, delay=0).result(timeout=5) for n in range(16)]
    for prev2, prev1, current in zip(values, values[1:], values[2:]):
        assert current == prev1 + prev2


@pytest.mark.asyncio
async def test_example_coroutine_output(pool):
    out = io.StringIO()
    await example_coroutine(pool, out=out, delay=0.01)
    assert out.getvalue().splitlines() == [
        "Starting coroutine...",
        "Result 1: Completed: Database query",
        "Result 2: Completed: Task 1",
        "Result 3: Completed: Task 2",
        "Result 4: 55",
        "Coroutine finished!",
    ]


def test_main_runs(capsys):
    assert main(["--delay", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Starting basic usage example..."
    assert lines[-1] == "Program finished!"
    assert "Result 1: Completed: Database query" in lines
    assert "Coroutine finished!" in lines