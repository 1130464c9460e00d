"""
db/exceptions.py
----------------
Error taxonomy shared by the data access and repository layers.

    PayrollError
    ├── ValidationError      bad caller input, raised before any query runs
    │   ├── MissingValueError
    │   └── InvalidFormatError
    ├── RecordNotFoundError  a keyed lookup matched no row
    ├── QueryError           the database itself failed
    └── EmptyDatasetError    an aggregate needs at least one employee
"""

from typing import Optional


class PayrollError(Exception):
    """Base class for every error raised by this application."""


class ValidationError(PayrollError, ValueError):
    """A caller-supplied key or argument is unusable."""


class MissingValueError(ValidationError):
    """A required key is None, empty or whitespace only."""


class InvalidFormatError(ValidationError):
    """A key is present but malformed (wrong length, bad year-month...)."""


class RecordNotFoundError(PayrollError, LookupError):
    """A lookup by key matched zero rows."""

    def __init__(self, table: str, key):
        self.table = table
        self.key = key
        super().__init__(f"No {table} record found for key {key!r}")


class QueryError(PayrollError, RuntimeError):
    """
    Wraps any failure of the underlying database driver.

    Attributes:
        cause: The original driver exception.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(f"{message}: {cause}" if cause else message)


class EmptyDatasetError(PayrollError, ArithmeticError):
    """An average was requested over an empty employee set."""
