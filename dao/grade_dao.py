"""
dao/grade_dao.py
----------------
Data access for the two grade tables, `role` and `capability`.
Both tables share one shape (rank, name, amount), so the lookups live in
`GradeDao` and the subclasses only name their SQL and record type.
"""

from typing import Iterable

from dao.base import BaseDao, verify_rank
from db.exceptions import RecordNotFoundError
from models.grade import Capability, Role
from utils.logger import get_logger

logger = get_logger(__name__)


class GradeDao(BaseDao):
    """Lookups shared by RoleDao and CapabilityDao."""

    TABLE = ""
    SELECT_BY_RANK_SQL = ""
    SELECT_BY_RANKS_SQL = ""
    SELECT_ALL_SQL = ""

    def get(self, rank: str):
        """
        Fetch a single grade by its rank.

        Args:
            rank: Two-character grade code.

        Returns:
            The mapped grade record.

        Raises:
            MissingValueError: If the rank is blank.
            InvalidFormatError: If the rank is not two characters.
            RecordNotFoundError: If no row has that rank.
            QueryError: If the database fails.
        """
        verify_rank(rank)
        row = self._fetch_one(self.SELECT_BY_RANK_SQL, (rank,))
        if row is None:
            logger.warning(f"No {self.TABLE} found for rank {rank!r}")
            raise RecordNotFoundError(self.TABLE, rank)
        return self._row_to_record(row)

    def find_by_ranks(self, ranks: Iterable[str]) -> dict:
        """
        Fetch every grade whose rank is in `ranks` with a single query.

        Ranks with no row are simply absent from the result; callers decide
        whether that is an error.

        Returns:
            Dict mapping rank -> grade record.
        """
        distinct = sorted(set(ranks))
        for rank in distinct:
            verify_rank(rank)
        if not distinct:
            return {}
        rows = self._fetch_all(self.SELECT_BY_RANKS_SQL, (distinct,))
        records = [self._row_to_record(r) for r in rows]
        return {record.rank: record for record in records}

    def find_all(self) -> list:
        """Fetch every grade ordered by rank."""
        return [self._row_to_record(r) for r in self._fetch_all(self.SELECT_ALL_SQL)]

    @staticmethod
    def _row_to_record(row: dict):
        raise NotImplementedError


class RoleDao(GradeDao):
    """Accessor for the `role` table."""

    TABLE = "role"
    SELECT_BY_RANK_SQL = "SELECT rank, name, amount FROM role WHERE rank = %s;"
    SELECT_BY_RANKS_SQL = "SELECT rank, name, amount FROM role WHERE rank = ANY(%s);"
    SELECT_ALL_SQL = "SELECT rank, name, amount FROM role ORDER BY rank;"

    @staticmethod
    def _row_to_record(row: dict) -> Role:
        """Convert a database row to a Role."""
        return Role(rank=row["rank"], name=row["name"], amount=int(row["amount"]))


class CapabilityDao(GradeDao):
    """Accessor for the `capability` table."""

    TABLE = "capability"
    SELECT_BY_RANK_SQL = "SELECT rank, name, amount FROM capability WHERE rank = %s;"
    SELECT_BY_RANKS_SQL = "SELECT rank, name, amount FROM capability WHERE rank = ANY(%s);"
    SELECT_ALL_SQL = "SELECT rank, name, amount FROM capability ORDER BY rank;"

    @staticmethod
    def _row_to_record(row: dict) -> Capability:
        """Convert a database row to a Capability."""
        return Capability(rank=row["rank"], name=row["name"], amount=int(row["amount"]))
