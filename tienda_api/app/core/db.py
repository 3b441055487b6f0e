"""
SQLite storage for the document collections.

Products are kept as JSON documents in a ``productos`` table keyed by
a string id, which gives the repository layer the save / find /
delete-by-id surface of a document store without an external server.
This module provides the connection helpers (``get_connection``,
``get_cursor``) and ``init_db``, which creates the collection table on
application start.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


logger = logging.getLogger(__name__)


COLLECTIONS_SQL = """
CREATE TABLE IF NOT EXISTS productos (
    id TEXT PRIMARY KEY,
    document TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute it is used directly, otherwise
    it is resolved relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so that columns can be
    accessed by name.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block exits normally and
    rolled back otherwise.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Create the collection tables if they do not exist yet."""
    path = db_path or get_database_path()
    with get_cursor(path) as cursor:
        cursor.executescript(COLLECTIONS_SQL)
    logger.info("Database ready at %s", path)
