"""
services/salary_calculator.py
-----------------------------
Payroll arithmetic for a single employee.

Rules:
    base salary      = role pay + capability pay
    hourly wage      = base salary // STANDARD_MONTHLY_HOURS
    overtime pay     = hours x hourly wage x premium, per category, truncated
    total salary     = base salary + commute + rent + overtime pay
    deduction        = health insurance + pension + income tax + resident tax
    take-home amount = total salary - deduction
    annual plan      = (base salary + commute + rent) x 12
"""

from decimal import Decimal, ROUND_DOWN
from typing import Optional

from config import (
    HOLIDAY_PREMIUM,
    LATE_NIGHT_PREMIUM,
    MONTHS_PER_YEAR,
    OVERTIME_PREMIUM,
    STANDARD_MONTHLY_HOURS,
)
from dao.work_dao import WorkDao
from utils.logger import get_logger

logger = get_logger(__name__)


def _truncate(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_DOWN))


class SalaryCalculator:
    """Computes monthly and yearly pay figures for an EmployeeDomain."""

    def __init__(self, work_dao: Optional[WorkDao] = None):
        self.work_dao = work_dao or WorkDao()
        self.overtime_premium = Decimal(OVERTIME_PREMIUM)
        self.late_night_premium = Decimal(LATE_NIGHT_PREMIUM)
        self.holiday_premium = Decimal(HOLIDAY_PREMIUM)

    def base_salary(self, domain) -> int:
        return domain.role.amount + domain.capability.amount

    def allowance(self, domain) -> int:
        return domain.employee.commute_amount + domain.employee.rent_amount

    def hourly_wage(self, domain) -> int:
        return self.base_salary(domain) // STANDARD_MONTHLY_HOURS

    def overtime_pay(self, domain, year_month: int) -> int:
        """
        Overtime pay for one month; 0 when no time record exists.
        """
        work = self.work_dao.find(domain.employee.no, year_month)
        if work is None:
            return 0
        wage = Decimal(self.hourly_wage(domain))
        return (
            _truncate(wage * self.overtime_premium * work.overtime_hours)
            + _truncate(wage * self.late_night_premium * work.late_night_overtime_hours)
            + _truncate(wage * self.holiday_premium * work.holiday_work_hours)
        )

    def total_salary(self, domain, year_month: int) -> int:
        total = self.base_salary(domain) + self.allowance(domain) + self.overtime_pay(domain, year_month)
        logger.debug(f"Total salary of #{domain.employee.no} for {year_month}: {total}")
        return total

    def deduction(self, domain) -> int:
        employee = domain.employee
        return (
            employee.health_insurance_amount
            + employee.employee_pension_amount
            + employee.income_tax_amount
            + employee.inhabitant_tax_amount
        )

    def take_home_amount(self, domain, year_month: int) -> int:
        return self.total_salary(domain, year_month) - self.deduction(domain)

    def annual_total_salary_plan(self, domain) -> int:
        return (self.base_salary(domain) + self.allowance(domain)) * MONTHS_PER_YEAR
