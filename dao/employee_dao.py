"""
dao/employee_dao.py
-------------------
Data access for the `employee` table.
"""

from dao.base import BaseDao, verify_required
from db.exceptions import RecordNotFoundError
from models.employee import Employee
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = """
    no, name, birthday, join_date, role_rank, capability_rank,
    commute_amount, rent_amount, health_insurance_amount,
    employee_pension_amount, income_tax_amount, inhabitant_tax_amount
"""


class EmployeeDao(BaseDao):
    """Accessor for employee master records."""

    def get(self, no: str) -> Employee:
        """
        Fetch a single employee by employee number.

        Raises:
            MissingValueError: If `no` is blank.
            RecordNotFoundError: If no such employee exists.
            QueryError: If the database fails.
        """
        verify_required(no, "employee number")
        sql = f"SELECT {_COLUMNS} FROM employee WHERE no = %s;"
        row = self._fetch_one(sql, (no,))
        if row is None:
            logger.warning(f"No employee found for number {no!r}")
            raise RecordNotFoundError("employee", no)
        return self._row_to_employee(row)

    def find_all(self) -> list[Employee]:
        """
        Fetch every employee.

        No ORDER BY: the order is whatever the database returns, and
        callers that need an order impose it themselves.
        """
        sql = f"SELECT {_COLUMNS} FROM employee;"
        return [self._row_to_employee(r) for r in self._fetch_all(sql)]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_employee(row: dict) -> Employee:
        """Convert a database row to an Employee domain object."""
        return Employee(
            no=row["no"],
            name=row["name"],
            birthday=row["birthday"],
            join_date=row["join_date"],
            role_rank=row["role_rank"],
            capability_rank=row["capability_rank"],
            commute_amount=int(row["commute_amount"]),
            rent_amount=int(row["rent_amount"]),
            health_insurance_amount=int(row["health_insurance_amount"]),
            employee_pension_amount=int(row["employee_pension_amount"]),
            income_tax_amount=int(row["income_tax_amount"]),
            inhabitant_tax_amount=int(row["inhabitant_tax_amount"]),
        )
