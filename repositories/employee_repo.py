"""
repositories/employee_repo.py
-----------------------------
Aggregation layer over the record accessors.
Assembles EmployeeDomain objects (employee + role + capability) and answers
read-only payroll questions over the whole staff. No SQL lives here.
"""

from datetime import date
from typing import Optional

from dao.base import validate_year_month
from dao.employee_dao import EmployeeDao
from dao.grade_dao import CapabilityDao, RoleDao
from db.exceptions import EmptyDatasetError, RecordNotFoundError
from models.employee import Employee
from models.employee_domain import EmployeeDomain
from services.salary_calculator import SalaryCalculator
from utils.logger import get_logger

logger = get_logger(__name__)


class EmployeeRepository:
    """
    Repository of EmployeeDomain objects.

    All collaborators are injected; omitted ones default to the
    pool-backed production implementations.
    """

    def __init__(
        self,
        employee_dao: Optional[EmployeeDao] = None,
        role_dao: Optional[RoleDao] = None,
        capability_dao: Optional[CapabilityDao] = None,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self.employee_dao = employee_dao or EmployeeDao()
        self.role_dao = role_dao or RoleDao()
        self.capability_dao = capability_dao or CapabilityDao()
        self.calculator = calculator or SalaryCalculator()

    # ── LOOKUPS ───────────────────────────────────────────

    def get(self, no: str) -> EmployeeDomain:
        """
        Fetch one employee with its grades resolved.

        Raises:
            RecordNotFoundError: If the employee, its role or its
                capability does not exist.
        """
        employee = self.employee_dao.get(no)
        role = self.role_dao.get(employee.role_rank)
        capability = self.capability_dao.get(employee.capability_rank)
        return EmployeeDomain(employee, role, capability, self.calculator)

    def find_all(self) -> list[EmployeeDomain]:
        """
        Fetch every employee with its grades resolved, in storage order.

        Grades are loaded with one query per grade table for the distinct
        ranks in use instead of one query per employee.
        """
        employees = self.employee_dao.find_all()
        roles = self.role_dao.find_by_ranks(e.role_rank for e in employees)
        capabilities = self.capability_dao.find_by_ranks(e.capability_rank for e in employees)

        domains = [self._assemble(e, roles, capabilities) for e in employees]
        logger.debug(f"Assembled {len(domains)} employee domains")
        return domains

    def find_all_order_by_annual_salary(self, ascending: bool = True) -> list[EmployeeDomain]:
        """
        Every employee sorted by projected annual salary.

        The sort is stable in both directions: employees with the same
        annual salary keep their storage order.
        """
        return sorted(
            self.find_all(),
            key=lambda d: d.annual_total_salary_plan,
            reverse=not ascending,
        )

    # ── AGGREGATES ────────────────────────────────────────

    def get_sum_total_salary(self, year_month: int) -> int:
        """
        Sum of every employee's gross pay for a month.

        Args:
            year_month: YYYYMM, e.g. 201504.

        Returns:
            The total; 0 when there are no employees.
        """
        validate_year_month(year_month)
        return sum(d.total_salary(year_month) for d in self.find_all())

    def get_average_take_home(self, year_month: int) -> int:
        """
        Average take-home pay for a month, truncated toward zero.

        Raises:
            EmptyDatasetError: If there are no employees to average.
        """
        validate_year_month(year_month)
        domains = self.find_all()
        if not domains:
            raise EmptyDatasetError("Cannot average take-home pay over zero employees")

        total = sum(d.take_home_amount(year_month) for d in domains)
        quotient = abs(total) // len(domains)
        return quotient if total >= 0 else -quotient

    def get_count_by_over_annual_salary(self, threshold: int) -> int:
        """Number of employees whose annual salary plan is at least `threshold`."""
        return sum(1 for d in self.find_all() if d.annual_total_salary_plan >= threshold)

    def get_by_duration_month(
        self, select_max: bool = True, as_of: Optional[date] = None
    ) -> Optional[EmployeeDomain]:
        """
        The longest- or shortest-serving employee.

        Ties go to the employee encountered first.

        Args:
            select_max: True for the longest tenure, False for the shortest.
            as_of: Reference date for tenure; defaults to today.

        Returns:
            The matching EmployeeDomain, or None if there are no employees.
        """
        as_of = as_of or date.today()
        result: Optional[EmployeeDomain] = None
        best = 0
        for domain in self.find_all():
            months = domain.duration_month(as_of)
            if result is None or (months > best if select_max else months < best):
                result, best = domain, months
        return result

    # ── HELPERS ───────────────────────────────────────────

    def _assemble(self, employee: Employee, roles: dict, capabilities: dict) -> EmployeeDomain:
        role = roles.get(employee.role_rank)
        if role is None:
            logger.error(f"Employee #{employee.no} references unknown role {employee.role_rank!r}")
            raise RecordNotFoundError("role", employee.role_rank)
        capability = capabilities.get(employee.capability_rank)
        if capability is None:
            logger.error(
                f"Employee #{employee.no} references unknown capability {employee.capability_rank!r}"
            )
            raise RecordNotFoundError("capability", employee.capability_rank)
        return EmployeeDomain(employee, role, capability, self.calculator)
