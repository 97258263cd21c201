import io
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from futurebridge.database_example import DatabaseConnection, database_operations, main


@pytest.fixture
def pool():
    executor = ThreadPoolExecutor(max_workers=2)
    yield executor
    executor.shutdown(wait=True)


@pytest.fixture
def db():
    return DatabaseConnection(random.Random(1), time_scale=0)


@pytest.mark.parametrize(
    "sql, expected",
    [
        ("SELECT * FROM t", "Result set: SELECT * FROM t"),
        ("INSERT INTO t VALUES (1)", "Inserted 1 row"),
        ("UPDATE t SET a = 1", "Updated 3 rows"),
        ("DELETE FROM t", "Query executed: DELETE FROM t"),
        ("select 1", "Query executed: select 1"),
        ("INSERT INTO a SELECT * FROM b", "Result set: INSERT INTO a SELECT * FROM b"),
    ],
)
def test_query_classification(db, sql, expected):
    assert db.query(sql).result(timeout=5) == expected


def test_count_in_range(db):
    counts = [db.count("users").result(timeout=5) for _ in range(50)]
    assert all(100 <= c < 1100 for c in counts)


def test_count_deterministic_with_seed():
    first = DatabaseConnection(random.Random(42), time_scale=0)
    second = DatabaseConnection(random.Random(42), time_scale=0)
    a = [first.count("t").result(timeout=5) for _ in range(5)]
    b = [second.count("t").result(timeout=5) for _ in range(5)]
    assert a == b


@pytest.mark.asyncio
async def test_database_operations_output(pool, db):
    out = io.StringIO()
    await database_operations(pool, db, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Starting database operations..."
    assert lines[1] == "Users query result: Result set: SELECT * FROM users WHERE active = 1"
    assert lines[2] == "Insert result: Inserted 1 row"
    assert lines[3].startswith("Total users: ")
    assert 100 <= int(lines[3].removeprefix("Total users: ")) < 1100
    assert lines[4] == "Running concurrent queries..."
    assert lines[5] == "Products: Result set: SELECT * FROM products WHERE price > 100"
    assert lines[6] == "Orders: Result set: SELECT * FROM orders WHERE status = 'pending'"
    assert lines[7].startswith("Product count: ")
    assert lines[-1] == "Database operations completed!"
    assert len(lines) == 9


def test_main_runs(capsys):
    assert main(["--seed", "3", "--time-scale", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Starting database example..."
    assert lines[-1] == "Database example finished!"
    assert "Insert result: Inserted 1 row" in lines