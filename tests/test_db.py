import sqlite3

import pytest

from roomate.db import Database, NoRowsError


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    database = Database(connection)
    database.execute("CREATE TABLE rooms (id TEXT PRIMARY KEY, status TEXT)")
    yield database
    connection.close()


def test_placeholders_are_bound_by_position(db):
    assert db.query_one("SELECT $2, $1, $2", "a", "b") == ("b", "a", "b")


def test_missing_argument_is_rejected(db):
    with pytest.raises(ValueError):
        db.query_one("SELECT $3", "a")


def test_execute_returns_row_count(db):
    db.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R1", "available")
    db.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R2", "available")
    assert db.execute("UPDATE rooms SET status = 'booked' WHERE id = $1", "R1") == 1


def test_query_all_and_query_one(db):
    db.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R1", "available")
    db.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R2", "booked")
    assert db.query_all("SELECT id, status FROM rooms ORDER BY id") == [("R1", "available"), ("R2", "booked")]
    assert db.query_one("SELECT status FROM rooms WHERE id = $1", "R2") == ("booked",)


def test_query_one_without_rows_raises(db):
    with pytest.raises(NoRowsError, match="no rows in result set"):
        db.query_one("SELECT id FROM rooms WHERE id = $1", "missing")


def test_query_all_without_rows_is_empty(db):
    assert db.query_all("SELECT id FROM rooms") == []


def test_transaction_rolls_back_on_error(db):
    with pytest.raises(RuntimeError, match="boom"):
        with db.transaction() as tx:
            tx.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R1", "available")
            raise RuntimeError("boom")
    assert db.query_all("SELECT id FROM rooms") == []


def test_transaction_commits_on_success(tmp_path):
    path = tmp_path / "rooms.db"
    connection = sqlite3.connect(path)
    database = Database(connection)
    database.execute("CREATE TABLE rooms (id TEXT PRIMARY KEY, status TEXT)")
    with database.transaction() as tx:
        tx.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R1", "available")
        tx.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R2", "available")
    assert database.query_one("SELECT COUNT(*) FROM rooms") == (2,)
    assert database.query_all("SELECT id FROM rooms ORDER BY id") == [("R1",), ("R2",)]
    other = sqlite3.connect(path)
    try:
        assert other.execute("SELECT COUNT(*) FROM rooms").fetchone() == (2,)
    finally:
        other.close()
        connection.close()


def test_nested_transaction_is_rejected(db):
    with db.transaction() as tx:
        with pytest.raises(RuntimeError):
            with tx.transaction():
                pass


def test_failed_statement_raises_database_error(db):
    db.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R1", "available")
    with pytest.raises(sqlite3.IntegrityError):
        db.execute("INSERT INTO rooms (id, status) VALUES ($1, $2)", "R1", "booked")
    assert db.query_one("SELECT status FROM rooms WHERE id = $1", "R1") == ("available",)