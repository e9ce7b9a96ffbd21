# quotedb

A small library for storing bid/ask quotes from exchanges in a SQLite
database. Each exchange gets its own table. The table has the columns
`Datetime`, `bid` and `ask`.

## Installation

```
pip install .
```

## Usage

```python
import datetime

from quotedb.database import QuoteDatabase, DatabaseError

with QuoteDatabase("quotes.db") as db:
    db.create_table("Bitstamp")
    db.add_bid_ask("Bitstamp", "2024-01-02 10:00:00", 42000.5, 42010.0)
    db.add_bid_ask("Bitstamp", datetime.datetime(2024, 1, 2, 10, 1), 42001.0, 42011.5)
    for row in db.rows("Bitstamp"):
        print(row)   # ('2024-01-02 10:00:00', 42000.5, 42010.0), ...
```

Everything lives in the module `quotedb.database`:

- `QuoteDatabase(db_file)` opens the SQLite file at `db_file` and
  creates it if it does not exist. It is a context manager. Leaving the
  `with` block, or calling `close()`, closes the connection.
- `create_table(exchange_name)` creates the exchange's table if it does
  not exist yet.
- `add_bid_ask(exchange_name, datetime, bid, ask)` adds one quote and
  commits it. `datetime` can be a string, which is stored as given, or
  a `datetime.datetime`, which is stored as `YYYY-MM-DD HH:MM:SS`.
  `bid` and `ask` are stored as floats.
- `rows(exchange_name)` returns the stored quotes as a list of
  `(Datetime, bid, ask)` tuples, in the order they were added.
- `create_db_connection(db_file)` opens a database and returns a
  `QuoteDatabase`.

The package quotes exchange names as SQL identifiers, so a name may hold
any characters. Quote values are passed to SQLite as parameters.

Any SQLite failure is raised as `DatabaseError`. This includes opening
a file that cannot be opened, writing to a table that does not exist,
and using a database after it has been closed.

## What it does not do

The package only stores and reads back quotes. It does not fetch prices
from exchanges. It does not compute spreads and it does not place
trades. It has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```