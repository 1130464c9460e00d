"""
Tests for the payroll export service and the command-line entry point.
"""
import io
from datetime import date
from unittest.mock import MagicMock

import pandas as pd
import psycopg2
import pytest

import main
from conftest import FixedCalculator, make_employee
from db.exceptions import QueryError
from services.export_service import COLUMNS, ExportService
from services.salary_calculator import SalaryCalculator

YEAR_MONTH = 201504


@pytest.fixture
def repo(build_repo):
    employees = [
        make_employee("00001", join_date=date(2014, 4, 1)),
        make_employee("00002", role_rank="M1", join_date=date(2010, 4, 1)),
    ]
    calculator = FixedCalculator(
        annual={"00001": 3600000, "00002": 5400000},
        monthly={"00001": 300000, "00002": 450000},
        take_home={"00001": 240000, "00002": 360000},
    )
    return build_repo(employees, calculator)


class TestExportService:

    def test_build_frame(self, repo) -> None:
        df = ExportService(repo).build_frame(YEAR_MONTH, as_of=date(2015, 4, 1))

        assert list(df.columns) == COLUMNS
        assert df["employee_no"].tolist() == ["00001", "00002"]
        assert df["total_salary"].tolist() == [300000, 450000]
        assert df["deduction"].tolist() == [60000, 90000]
        assert df["duration_month"].tolist() == [12, 60]

    def test_build_frame_reads_work_once_per_employee(self, build_repo) -> None:
        work_dao = MagicMock()
        work_dao.find.return_value = None
        employees = [make_employee("00001"), make_employee("00002", role_rank="M1")]
        repo = build_repo(employees, SalaryCalculator(work_dao))

        df = ExportService(repo).build_frame(YEAR_MONTH)

        assert work_dao.find.call_count == 2
        # A1 + C1 = 250000, M1 + C1 = 400000, no allowances or deductions set
        assert df["take_home"].tolist() == [250000, 400000]

    def test_build_frame_empty(self, build_repo) -> None:
        df = ExportService(build_repo([])).build_frame(YEAR_MONTH)

        assert df.empty
        assert list(df.columns) == COLUMNS

    def test_export_csv(self, repo) -> None:
        buffer = ExportService(repo).export_payroll_csv(YEAR_MONTH)

        df = pd.read_csv(buffer, encoding="utf-8-sig", dtype={"employee_no": str})
        assert df["employee_no"].tolist() == ["00001", "00002"]
        assert df["take_home"].sum() == 600000

    def test_export_excel_has_summary(self, repo) -> None:
        buffer = ExportService(repo).export_payroll_excel(YEAR_MONTH)

        sheets = pd.read_excel(buffer, sheet_name=None)
        assert set(sheets) == {"Payroll", "Summary"}
        summary = sheets["Summary"].set_index("role")
        assert summary.loc["M1", "total_salary"] == 450000


class TestCli:

    def test_sum_salary(self, repo, capsys) -> None:
        assert main.main(["sum-salary", str(YEAR_MONTH)], repo=repo) == 0
        assert "750,000" in capsys.readouterr().out

    def test_average_take_home_on_empty_set_reports_error(self, build_repo, capsys) -> None:
        assert main.main(["average-take-home", str(YEAR_MONTH)], repo=build_repo([])) == 1
        assert "[ERROR]" in capsys.readouterr().out

    def test_list_by_salary_desc(self, repo, capsys) -> None:
        assert main.main(["list", "--by-salary", "--desc"], repo=repo) == 0
        out = capsys.readouterr().out
        assert out.index("#00002") < out.index("#00001")

    def test_count_over(self, repo, capsys) -> None:
        assert main.main(["count-over", "5400000"], repo=repo) == 0
        assert capsys.readouterr().out.rstrip().endswith(": 1")

    def test_show_unknown_employee(self, repo, capsys) -> None:
        assert main.main(["show", "99999"], repo=repo) == 1
        assert "99999" in capsys.readouterr().out

    def test_tenure_max(self, repo, capsys) -> None:
        assert main.main(["tenure", "max"], repo=repo) == 0
        assert "#00002" in capsys.readouterr().out

    def test_export_writes_file(self, repo, tmp_path) -> None:
        out = tmp_path / "payroll.csv"

        assert main.main(["export", str(YEAR_MONTH), "--out", str(out)], repo=repo) == 0
        df = pd.read_csv(io.BytesIO(out.read_bytes()), encoding="utf-8-sig")
        assert len(df) == 2

    def test_grades_lists_both_tables(self, repo, capsys) -> None:
        assert main.main(["grades"], repo=repo) == 0
        out = capsys.readouterr().out
        assert "A1 Associate (200,000)" in out
        assert "C2 Senior (100,000)" in out
        assert out.index("Roles:") < out.index("M1 Manager") < out.index("Capabilities:")

    def test_database_down_reports_error(self, monkeypatch, capsys) -> None:
        def unreachable():
            raise psycopg2.OperationalError("could not connect to server")

        closed = []
        monkeypatch.setattr(main, "init_pool", unreachable)
        monkeypatch.setattr(main, "close_pool", lambda: closed.append(True))

        assert main.main(["list"]) == 1
        assert "[ERROR]" in capsys.readouterr().out
        assert closed == [True]

    def test_schema_failure_reports_error(self, monkeypatch, capsys) -> None:
        def failing_schema():
            raise QueryError("Schema Failure", psycopg2.ProgrammingError("permission denied"))

        monkeypatch.setattr(main, "init_pool", lambda: None)
        monkeypatch.setattr(main, "close_pool", lambda: None)
        monkeypatch.setattr(main, "create_tables", failing_schema)

        assert main.main(["init-db"]) == 1
        assert "permission denied" in capsys.readouterr().out

    def test_pool_is_opened_and_closed(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(main, "init_pool", lambda: calls.append("init"))
        monkeypatch.setattr(main, "close_pool", lambda: calls.append("close"))
        monkeypatch.setattr(main, "create_tables", lambda: calls.append("schema"))

        assert main.main(["init-db"]) == 0
        assert calls == ["init", "schema", "close"]
