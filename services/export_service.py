"""
services/export_service.py
---------------------------
Generates CSV and Excel payroll sheets for a given month.
"""

import io
from datetime import date
from typing import Optional

import pandas as pd

from dao.base import validate_year_month
from repositories.employee_repo import EmployeeRepository
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = [
    "employee_no",
    "name",
    "role",
    "capability",
    "total_salary",
    "deduction",
    "take_home",
    "annual_salary_plan",
    "duration_month",
]


class ExportService:
    """Builds downloadable payroll reports in CSV and Excel formats."""

    def __init__(self, repo: Optional[EmployeeRepository] = None):
        self.repo = repo or EmployeeRepository()

    def build_frame(self, year_month: int, as_of: Optional[date] = None) -> pd.DataFrame:
        """
        One row per employee with the month's pay figures.

        Args:
            year_month: YYYYMM, e.g. 201504.
            as_of: Reference date for tenure; defaults to today.
        """
        validate_year_month(year_month)
        as_of = as_of or date.today()
        data = []
        for d in self.repo.find_all():
            # one work lookup per employee: take-home is derived here
            total = d.total_salary(year_month)
            deduction = d.deduction()
            data.append({
                "employee_no": d.no,
                "name": d.name,
                "role": d.role.rank,
                "capability": d.capability.rank,
                "total_salary": total,
                "deduction": deduction,
                "take_home": total - deduction,
                "annual_salary_plan": d.annual_total_salary_plan,
                "duration_month": d.duration_month(as_of),
            })
        return pd.DataFrame(data, columns=COLUMNS)

    def export_payroll_csv(self, year_month: int) -> io.BytesIO:
        """
        Export a month's payroll as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        df = self.build_frame(year_month)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} payroll rows as CSV for {year_month}")
        return buffer

    def export_payroll_excel(self, year_month: int) -> io.BytesIO:
        """
        Export a month's payroll as an Excel (.xlsx) file, with a summary
        sheet totalling pay per role grade.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        df = self.build_frame(year_month)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Payroll", index=False)

            if not df.empty:
                summary = df.groupby("role")[["total_salary", "take_home"]].sum().reset_index()
                summary.to_excel(writer, sheet_name="Summary", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} payroll rows as Excel for {year_month}")
        return buffer
