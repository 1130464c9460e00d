"""
dao/work_dao.py
---------------
Data access for the `work` table (monthly time records).
"""

from decimal import Decimal
from typing import Optional

from dao.base import BaseDao, validate_year_month, verify_required
from models.employee import Work


class WorkDao(BaseDao):
    """Accessor for monthly overtime records."""

    def find(self, employee_no: str, year_month: int) -> Optional[Work]:
        """
        Fetch an employee's time record for one month.

        A missing record is a normal state (no overtime was logged), so this
        returns None rather than raising.

        Args:
            employee_no: Employee number.
            year_month: YYYYMM key, e.g. 201504.
        """
        verify_required(employee_no, "employee number")
        validate_year_month(year_month)
        sql = """
            SELECT employee_no, year_month, overtime_hours,
                   late_night_overtime_hours, holiday_work_hours
            FROM work
            WHERE employee_no = %s AND year_month = %s;
        """
        row = self._fetch_one(sql, (employee_no, year_month))
        return self._row_to_work(row) if row else None

    @staticmethod
    def _row_to_work(row: dict) -> Work:
        return Work(
            employee_no=row["employee_no"],
            year_month=int(row["year_month"]),
            overtime_hours=Decimal(str(row["overtime_hours"])),
            late_night_overtime_hours=Decimal(str(row["late_night_overtime_hours"])),
            holiday_work_hours=Decimal(str(row["holiday_work_hours"])),
        )
