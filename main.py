"""
main.py
-------
Command-line entry point for the salary calculation tool.

Responsibilities:
    - Initialize the database connection pool (and schema on request).
    - Dispatch payroll queries to the EmployeeRepository.
    - Close the pool on the way out, whatever happened.

Usage:
    python main.py init-db
    python main.py show 00001
    python main.py list --by-salary --desc
    python main.py sum-salary 201504
    python main.py average-take-home 201504
    python main.py count-over 5000000
    python main.py tenure max
    python main.py grades
    python main.py export 201504 --out payroll.xlsx --excel
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import psycopg2

from db.connection import close_pool, init_pool
from db.exceptions import PayrollError
from db.init_db import create_tables
from repositories.employee_repo import EmployeeRepository
from services.export_service import ExportService
from utils.logger import get_logger

logger = get_logger(__name__)


def _cmd_init_db(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    """Create the schema."""
    create_tables()
    print("[OK] Database schema ready")


def _cmd_show(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    """Print one employee with its grades."""
    domain = repo.get(args.no)
    print(domain)
    print(f"  annual salary plan: {domain.annual_total_salary_plan:,}")
    print(f"  tenure: {domain.duration_month()} months")


def _cmd_list(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    """Print every employee, optionally ordered by annual salary."""
    if args.by_salary:
        domains = repo.find_all_order_by_annual_salary(ascending=not args.desc)
    else:
        domains = repo.find_all()
    for domain in domains:
        print(f"{domain}  [{domain.annual_total_salary_plan:,}]")
    print(f"[OK] {len(domains)} employees")


def _cmd_sum_salary(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    total = repo.get_sum_total_salary(args.year_month)
    print(f"Total salary for {args.year_month}: {total:,}")


def _cmd_average_take_home(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    average = repo.get_average_take_home(args.year_month)
    print(f"Average take-home for {args.year_month}: {average:,}")


def _cmd_count_over(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    count = repo.get_count_by_over_annual_salary(args.amount)
    print(f"Employees with annual salary plan >= {args.amount:,}: {count}")


def _cmd_tenure(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    domain = repo.get_by_duration_month(select_max=args.which == "max")
    if domain is None:
        print("No employees found")
        return
    print(f"{domain}  ({domain.duration_month()} months)")


def _cmd_grades(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    """Print the role and capability grade tables."""
    print("Roles:")
    for role in repo.role_dao.find_all():
        print(f"  {role}")
    print("Capabilities:")
    for capability in repo.capability_dao.find_all():
        print(f"  {capability}")


def _cmd_export(args: argparse.Namespace, repo: EmployeeRepository) -> None:
    """Write the month's payroll sheet to a file."""
    service = ExportService(repo)
    if args.excel:
        buffer = service.export_payroll_excel(args.year_month)
    else:
        buffer = service.export_payroll_csv(args.year_month)
    Path(args.out).write_bytes(buffer.getvalue())
    print(f"[OK] Exported payroll for {args.year_month} to {args.out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salary-calculation",
        description="Payroll queries over the employee, role and capability tables",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Create the database schema")
    init.set_defaults(func=_cmd_init_db)

    show = sub.add_parser("show", help="Show one employee")
    show.add_argument("no", help="Employee number")
    show.set_defaults(func=_cmd_show)

    lst = sub.add_parser("list", help="List all employees")
    lst.add_argument("--by-salary", action="store_true", help="Order by annual salary plan")
    lst.add_argument("--desc", action="store_true", help="Highest salary first")
    lst.set_defaults(func=_cmd_list)

    total = sub.add_parser("sum-salary", help="Sum of gross pay for a month")
    total.add_argument("year_month", type=int, help="YYYYMM, e.g. 201504")
    total.set_defaults(func=_cmd_sum_salary)

    avg = sub.add_parser("average-take-home", help="Average take-home pay for a month")
    avg.add_argument("year_month", type=int, help="YYYYMM, e.g. 201504")
    avg.set_defaults(func=_cmd_average_take_home)

    over = sub.add_parser("count-over", help="Count employees at or above an annual salary")
    over.add_argument("amount", type=int, help="Annual salary threshold")
    over.set_defaults(func=_cmd_count_over)

    tenure = sub.add_parser("tenure", help="Longest or shortest serving employee")
    tenure.add_argument("which", choices=["max", "min"])
    tenure.set_defaults(func=_cmd_tenure)

    grades = sub.add_parser("grades", help="List role and capability grades")
    grades.set_defaults(func=_cmd_grades)

    exp = sub.add_parser("export", help="Export a month's payroll sheet")
    exp.add_argument("year_month", type=int, help="YYYYMM, e.g. 201504")
    exp.add_argument("--out", required=True, help="Output file path")
    exp.add_argument("--excel", action="store_true", help="Write .xlsx instead of CSV")
    exp.set_defaults(func=_cmd_export)

    return parser


def main(argv: Optional[list[str]] = None, repo: Optional[EmployeeRepository] = None) -> int:
    """
    Run one CLI command.

    Args:
        argv: Arguments, defaults to sys.argv[1:].
        repo: Repository to query. When omitted the connection pool is
            opened and a pool-backed repository is used.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    owns_pool = repo is None
    try:
        if owns_pool:
            init_pool()
            repo = EmployeeRepository()
        args.func(args, repo)
        return 0
    except PayrollError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"[ERROR] {e}")
        return 1
    except psycopg2.Error as e:
        logger.error(f"{args.command} failed, database unavailable: {e}")
        print(f"[ERROR] Database failure: {e}")
        return 1
    finally:
        if owns_pool:
            close_pool()


if __name__ == "__main__":
    sys.exit(main())
