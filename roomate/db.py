"""A thin wrapper over a DB-API connection used by the repositories."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

_PLACEHOLDER = re.compile(r"\$(\d+)")


class NoRowsError(LookupError):
    """Raised when a single-row query returns nothing."""

    def __init__(self, message: str = "sql: no rows in result set") -> None:
        super().__init__(message)


def _bind(sql: str, args: Sequence[Any]) -> tuple[str, tuple[Any, ...]]:
    """Rewrite ``$n`` placeholders as ``?`` and order the arguments to match."""
    params: list[Any] = []

    def substitute(match: re.Match[str]) -> str:
        position = int(match.group(1))
        if not 1 <= position <= len(args):
            raise ValueError(f"placeholder ${position} has no matching argument")
        params.append(args[position - 1])
        return "?"

    return _PLACEHOLDER.sub(substitute, sql), tuple(params)


class Database:
    """Runs ``$n``-parameterised statements on a qmark-style DB-API connection.

    Outside a transaction every statement is committed on its own.
    """

    def __init__(self, connection: Any) -> None:
        self._connection = connection
        self._in_transaction = False

    def _run(self, sql: str, args: Sequence[Any]) -> tuple[list[tuple[Any, ...]], int]:
        statement, params = _bind(sql, args)
        cursor = self._connection.cursor()
        try:
            cursor.execute(statement, params)
            rows = [tuple(row) for row in cursor.fetchall()] if cursor.description is not None else []
            count = cursor.rowcount
        except Exception:
            if not self._in_transaction:
                self._connection.rollback()
            raise
        finally:
            cursor.close()
        if not self._in_transaction:
            self._connection.commit()
        return rows, count

    def query_one(self, sql: str, *args: Any) -> tuple[Any, ...]:
        """Return the first row of the result; raise NoRowsError if there is none."""
        rows, _ = self._run(sql, args)
        if not rows:
            raise NoRowsError()
        return rows[0]

    def query_all(self, sql: str, *args: Any) -> list[tuple[Any, ...]]:
        """Return every row of the result."""
        rows, _ = self._run(sql, args)
        return rows

    def execute(self, sql: str, *args: Any) -> int:
        """Run a statement and return the number of affected rows."""
        _, count = self._run(sql, args)
        return count

    @contextmanager
    def transaction(self) -> Iterator[Database]:
        """Group statements; commit on success, roll back on any exception."""
        if self._in_transaction:
            raise RuntimeError("a transaction is already in progress")
        self._in_transaction = True
        try:
            yield self
        except BaseException:
            self._connection.rollback()
            raise
        else:
            self._connection.commit()
        finally:
            self._in_transaction = False