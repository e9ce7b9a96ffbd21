"""SQLite storage for bid/ask quotes, one table per exchange."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]
Timestamp = Union[str, _dt.datetime]

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class DatabaseError(Exception):
    """Raised when the quote database cannot be opened or written."""


def _quote_identifier(name: str) -> str:
    return "`" + name.replace("`", "``") + "`"


def _format_timestamp(value: Timestamp | None) -> str | None:
    if isinstance(value, _dt.datetime):
        return value.strftime(_TIMESTAMP_FORMAT)
    return value


class QuoteDatabase:
    """A connection to a quote database file."""

    def __init__(self, db_file: StrPath) -> None:
        self.db_file = db_file
        try:
            self._conn = sqlite3.connect(db_file)
        except sqlite3.Error as err:
            raise DatabaseError(str(err)) from err

    def __enter__(self) -> "QuoteDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the connection; further use raises DatabaseError."""
        self._conn.close()

    def _execute(self, query: str, params: tuple = ()) -> list[tuple]:
        try:
            with self._conn:
                return self._conn.execute(query, params).fetchall()
        except sqlite3.Error as err:
            raise DatabaseError(str(err)) from err

    def create_table(self, exchange_name: str) -> None:
        """Create the quote table for an exchange unless it already exists."""
        self._execute(
            f"CREATE TABLE IF NOT EXISTS {_quote_identifier(exchange_name)} "
            "(Datetime DATETIME NOT NULL, bid DECIMAL(8, 2), ask DECIMAL(8, 2));"
        )

    def add_bid_ask(
        self,
        exchange_name: str,
        datetime: Timestamp,
        bid: float,
        ask: float,
    ) -> None:
        """Insert one bid/ask quote for an exchange at the given time."""
        self._execute(
            f"INSERT INTO {_quote_identifier(exchange_name)} VALUES (?, ?, ?);",
            (_format_timestamp(datetime), float(bid), float(ask)),
        )

    def rows(self, exchange_name: str) -> list[tuple[str, float, float]]:
        """Return every stored quote of an exchange in insertion order."""
        return self._execute(
            f"SELECT Datetime, bid, ask FROM {_quote_identifier(exchange_name)} "
            "ORDER BY rowid;"
        )


def create_db_connection(db_file: StrPath) -> QuoteDatabase:
    """Open (creating if needed) the quote database at db_file."""
    return QuoteDatabase(db_file)