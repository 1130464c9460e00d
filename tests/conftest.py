"""
Pytest configuration and fixtures.

Nothing here needs a live database: DAOs get a fake connection provider
backed by MagicMock cursors, and the repository gets stub DAOs.
"""
from datetime import date
from typing import Any
from unittest.mock import MagicMock

import pytest

from db.exceptions import RecordNotFoundError
from models.employee import Employee
from models.grade import Capability, Role


class FakeProvider:
    """Connection provider double that records acquire/release calls."""

    def __init__(self, conn: MagicMock):
        self.conn = conn
        self.acquired = 0
        self.released = 0

    def acquire(self):
        self.acquired += 1
        return self.conn

    def release(self, conn) -> None:
        assert conn is self.conn
        self.released += 1


@pytest.fixture
def cursor() -> MagicMock:
    """Cursor double; set `fetchone`/`fetchall` return values per test."""
    cur = MagicMock()
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    return cur


@pytest.fixture
def connection(cursor: MagicMock) -> MagicMock:
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    return conn


@pytest.fixture
def provider(connection: MagicMock) -> FakeProvider:
    return FakeProvider(connection)


def make_employee(no: str = "00001", **overrides: Any) -> Employee:
    """Build an Employee with sensible defaults."""
    values: dict[str, Any] = {
        "no": no,
        "name": f"Employee {no}",
        "join_date": date(2010, 4, 1),
        "role_rank": "A1",
        "capability_rank": "C1",
    }
    values.update(overrides)
    return Employee(**values)


def employee_row(no: str = "00001", **overrides: Any) -> dict[str, Any]:
    """A RealDictCursor-style row for the employee table."""
    row: dict[str, Any] = {
        "no": no,
        "name": f"Employee {no}",
        "birthday": date(1985, 1, 15),
        "join_date": date(2010, 4, 1),
        "role_rank": "A1",
        "capability_rank": "C1",
        "commute_amount": 10000,
        "rent_amount": 20000,
        "health_insurance_amount": 15000,
        "employee_pension_amount": 25000,
        "income_tax_amount": 8000,
        "inhabitant_tax_amount": 12000,
    }
    row.update(overrides)
    return row


class StubEmployeeDao:
    def __init__(self, employees: list[Employee]):
        self.employees = employees

    def get(self, no: str) -> Employee:
        for employee in self.employees:
            if employee.no == no:
                return employee
        raise RecordNotFoundError("employee", no)

    def find_all(self) -> list[Employee]:
        return list(self.employees)


class StubGradeDao:
    """In-memory grade accessor that counts how often it is queried."""

    def __init__(self, table: str, records: list):
        self.table = table
        self.records = {r.rank: r for r in records}
        self.get_calls = 0
        self.batch_calls = 0

    def get(self, rank: str):
        self.get_calls += 1
        if rank not in self.records:
            raise RecordNotFoundError(self.table, rank)
        return self.records[rank]

    def find_by_ranks(self, ranks) -> dict:
        self.batch_calls += 1
        return {r: self.records[r] for r in set(ranks) if r in self.records}

    def find_all(self) -> list:
        return [self.records[rank] for rank in sorted(self.records)]


class FixedCalculator:
    """
    Salary calculator double returning figures fixed per employee number.

    Args:
        annual: employee no -> annual salary plan
        monthly: employee no -> total salary for any month
        take_home: employee no -> take-home amount for any month
    """

    def __init__(self, annual=None, monthly=None, take_home=None):
        self.annual = annual or {}
        self.monthly = monthly or {}
        self.take_home = take_home or {}

    def annual_total_salary_plan(self, domain) -> int:
        return self.annual.get(domain.no, 0)

    def total_salary(self, domain, year_month: int) -> int:
        return self.monthly.get(domain.no, 0)

    def deduction(self, domain) -> int:
        return self.monthly.get(domain.no, 0) - self.take_home.get(domain.no, 0)

    def take_home_amount(self, domain, year_month: int) -> int:
        return self.take_home.get(domain.no, 0)


@pytest.fixture
def roles() -> list[Role]:
    return [
        Role(rank="A1", name="Associate", amount=200000),
        Role(rank="M1", name="Manager", amount=350000),
    ]


@pytest.fixture
def capabilities() -> list[Capability]:
    return [
        Capability(rank="C1", name="Junior", amount=50000),
        Capability(rank="C2", name="Senior", amount=100000),
    ]


@pytest.fixture
def build_repo(roles: list[Role], capabilities: list[Capability]):
    """Factory: EmployeeRepository over stub DAOs for the given employees."""
    from repositories.employee_repo import EmployeeRepository

    def _build(employees: list[Employee], calculator=None) -> EmployeeRepository:
        return EmployeeRepository(
            employee_dao=StubEmployeeDao(employees),
            role_dao=StubGradeDao("role", roles),
            capability_dao=StubGradeDao("capability", capabilities),
            calculator=calculator or FixedCalculator(),
        )

    return _build
