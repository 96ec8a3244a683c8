"""Connection handling: transactions over any DB-API driver with $N placeholders."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

_PLACEHOLDER = re.compile(r"\$(\d+)")
_STYLES = ("qmark", "format", "numeric")


class Transaction:
    """One open transaction on a driver connection."""

    def __init__(self, connection: Any, paramstyle: str = "qmark") -> None:
        self._connection = connection
        self._paramstyle = paramstyle
        self._closed = False

    def _prepare(self, sql: str, args: Sequence[Any]) -> tuple[str, tuple]:
        indexes = [int(number) for number in _PLACEHOLDER.findall(sql)]
        if any(index < 1 for index in indexes):
            raise ValueError("placeholder numbering starts at $1")
        expected = max(indexes, default=0)
        if expected != len(args):
            raise ValueError(f"expected {expected} arguments, got {len(args)}")
        if self._paramstyle == "numeric":
            return _PLACEHOLDER.sub(r":\1", sql), tuple(args)
        marker = "?"
        if self._paramstyle == "format":
            sql = sql.replace("%", "%%")
            marker = "%s"
        return _PLACEHOLDER.sub(marker, sql), tuple(args[i - 1] for i in indexes)

    def _run(self, sql: str, args: Sequence[Any]) -> Any:
        if self._closed:
            raise RuntimeError("transaction already closed")
        cursor = self._connection.cursor()
        cursor.execute(*self._prepare(sql, args))
        return cursor

    def query(self, sql: str, *args: Any) -> list[tuple]:
        """Run a statement and return all its rows."""
        cursor = self._run(sql, args)
        try:
            rows = cursor.fetchall() if cursor.description else []
        finally:
            cursor.close()
        return [tuple(row) for row in rows]

    def query_row(self, sql: str, *args: Any) -> tuple:
        """Return the first row; raise LookupError when there is none."""
        rows = self.query(sql, *args)
        if not rows:
            raise LookupError("no rows in result set")
        return rows[0]

    def execute(self, sql: str, *args: Any) -> int:
        """Run a statement and return the number of rows it touched."""
        cursor = self._run(sql, args)
        try:
            return cursor.rowcount
        finally:
            cursor.close()

    def commit(self) -> None:
        if self._closed:
            raise RuntimeError("transaction already closed")
        self._closed = True
        self._connection.commit()

    def rollback(self) -> None:
        """Undo the transaction; does nothing once it is closed."""
        if self._closed:
            return
        self._closed = True
        self._connection.rollback()


class Database:
    """Opens a connection per transaction from a driver connect function."""

    def __init__(self, connect: Callable[[], Any], paramstyle: str = "qmark") -> None:
        if paramstyle not in _STYLES:
            raise ValueError(f"unsupported paramstyle: {paramstyle!r}")
        self._connect = connect
        self._paramstyle = paramstyle

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """Yield a transaction that is rolled back on exit unless committed."""
        connection = self._connect()
        tx = Transaction(connection, self._paramstyle)
        try:
            yield tx
        finally:
            try:
                tx.rollback()
            finally:
                connection.close()

    def ping(self) -> None:
        """Check that a connection can be made and answers; raise otherwise."""
        connection = self._connect()
        try:
            cursor = connection.cursor()
            cursor.execute("SELECT 1")
            cursor.fetchall()
            cursor.close()
        finally:
            connection.close()