"""
models/employee_domain.py
-------------------------
Composite domain object: one employee together with the grades resolved
for it. Built per request by the EmployeeRepository and never persisted.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional

from dateutil.relativedelta import relativedelta

from models.employee import Employee
from models.grade import Capability, Role

if TYPE_CHECKING:
    from services.salary_calculator import SalaryCalculator


@dataclass
class EmployeeDomain:
    """
    An Employee with its Role and Capability.

    Salary figures are delegated to the salary calculator handed in by the
    repository, so the same domain can be priced by different rule sets.
    """
    employee: Employee
    role: Role
    capability: Capability
    calculator: "SalaryCalculator" = field(repr=False, compare=False)

    @property
    def no(self) -> str:
        return self.employee.no

    @property
    def name(self) -> str:
        return self.employee.name

    @property
    def annual_total_salary_plan(self) -> int:
        """Projected yearly gross, excluding overtime."""
        return self.calculator.annual_total_salary_plan(self)

    def total_salary(self, year_month: int) -> int:
        """Gross pay for the given YYYYMM month."""
        return self.calculator.total_salary(self, year_month)

    def deduction(self) -> int:
        return self.calculator.deduction(self)

    def take_home_amount(self, year_month: int) -> int:
        """Net pay for the given YYYYMM month."""
        return self.calculator.take_home_amount(self, year_month)

    def duration_month(self, as_of: Optional[date] = None) -> int:
        """
        Whole months elapsed since the hire date.

        Args:
            as_of: Reference date; defaults to today.
        """
        delta = relativedelta(as_of or date.today(), self.employee.join_date)
        return delta.years * 12 + delta.months

    def __str__(self) -> str:
        return f"#{self.no} {self.name} | {self.role.name} / {self.capability.name}"
