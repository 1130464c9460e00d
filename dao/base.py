"""
dao/base.py
-----------
Shared plumbing for the data access objects: connection handling,
driver-error translation and key validation.
"""

from typing import Optional

import psycopg2
from psycopg2 import extras

from db.connection import ConnectionProvider
from db.exceptions import InvalidFormatError, MissingValueError, QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

RANK_LENGTH = 2


def verify_required(value, label: str) -> None:
    """Raise MissingValueError if `value` is None, empty or whitespace."""
    if value is None or not str(value).strip():
        raise MissingValueError(f"{label} is required")


def verify_rank(rank: str) -> None:
    """
    Validate a grade rank before it reaches the database.

    Raises:
        MissingValueError: If the rank is blank.
        InvalidFormatError: If the rank is not exactly two characters.
    """
    verify_required(rank, "rank")
    if len(rank) != RANK_LENGTH:
        raise InvalidFormatError(
            f"rank must be {RANK_LENGTH} characters long [{len(rank)}]"
        )


def validate_year_month(year_month: int) -> None:
    """
    Validate a YYYYMM key such as 201504.

    Raises:
        MissingValueError: If no value is given.
        InvalidFormatError: If it is not an int or the month is out of range.
    """
    if year_month is None:
        raise MissingValueError("year_month is required")
    if isinstance(year_month, bool) or not isinstance(year_month, int):
        raise InvalidFormatError(f"year_month must be an integer YYYYMM [{year_month!r}]")
    year, month = divmod(year_month, 100)
    if not (1 <= year <= 9999 and 1 <= month <= 12):
        raise InvalidFormatError(f"year_month must be YYYYMM [{year_month}]")


class BaseDao:
    """
    Base class for the table accessors.

    Args:
        provider: Source of connections. Defaults to the shared pool;
            tests pass a double exposing `acquire()` and `release(conn)`.
    """

    def __init__(self, provider: Optional[ConnectionProvider] = None):
        self.provider = provider or ConnectionProvider()

    def _fetch_one(self, sql: str, params) -> Optional[dict]:
        """Run a query and return its first row as a dict, or None."""
        return self._run(sql, params, lambda cur: cur.fetchone())

    def _fetch_all(self, sql: str, params=None) -> list[dict]:
        """Run a query and return every row as a dict."""
        return self._run(sql, params, lambda cur: list(cur.fetchall()))

    def _run(self, sql: str, params, fetch):
        try:
            conn = self.provider.acquire()
        except psycopg2.Error as e:
            logger.error(f"Failed to acquire a database connection: {e}")
            raise QueryError("Connection Failure", e) from e

        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                result = fetch(cur)
            logger.debug(f"Executed {' '.join(sql.split())} with {params!r}")
            return result
        except psycopg2.Error as e:
            try:
                conn.rollback()
            except psycopg2.Error as rollback_error:
                # dead connection: the pool discards it on release
                logger.warning(f"Rollback failed after select failure: {rollback_error}")
            logger.error(f"Select failure in {type(self).__name__}: {e}")
            raise QueryError("Select Failure", e) from e
        finally:
            self.provider.release(conn)
