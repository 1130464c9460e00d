"""
models/employee.py
------------------
Domain models for the employee master record and its monthly time record.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """
    Represents one row of the employee table.

    Attributes:
        no: Employee number, the primary key.
        name: Full name.
        join_date: Hire date, the start of tenure.
        role_rank: Rank of the employee's Role.
        capability_rank: Rank of the employee's Capability.
        commute_amount: Monthly commuting allowance.
        rent_amount: Monthly housing allowance.
        health_insurance_amount: Monthly health insurance deduction.
        employee_pension_amount: Monthly pension deduction.
        income_tax_amount: Monthly income tax withholding.
        inhabitant_tax_amount: Monthly resident tax withholding.
        birthday: Date of birth, if recorded.
    """
    no: str
    name: str
    join_date: date
    role_rank: str
    capability_rank: str
    commute_amount: int = 0
    rent_amount: int = 0
    health_insurance_amount: int = 0
    employee_pension_amount: int = 0
    income_tax_amount: int = 0
    inhabitant_tax_amount: int = 0
    birthday: Optional[date] = None


@dataclass(frozen=True)
class Work:
    """Hours worked beyond the standard schedule in one month."""
    employee_no: str
    year_month: int  # YYYYMM
    overtime_hours: Decimal = Decimal("0")
    late_night_overtime_hours: Decimal = Decimal("0")
    holiday_work_hours: Decimal = Decimal("0")
