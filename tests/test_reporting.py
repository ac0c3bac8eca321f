"""Tests for account info listings and report files."""

import io
from decimal import Decimal
from pathlib import Path

import pytest

from bankacct.domain.entities import Account
from bankacct.exceptions import ReportFileError
from bankacct.services.reporting import (
    REPORT_HEADER,
    TextReportingService,
    render_account_info,
    render_report,
    render_report_row,
)


class TestRenderAccountInfo:
    def test_fields_one_per_line(self, first_account: Account):
        assert render_account_info(first_account) == (
            "Alice\nSmith\nJ\n123456789\n555\n1234567\n100.00\nA0001\nSECRT1\n"
        )

    def test_numbers_are_zero_padded(self, first_account: Account):
        first_account.change_area_code("007")
        first_account.change_social("000000001")

        lines = render_account_info(first_account).splitlines()

        assert lines[3] == "000000001"
        assert lines[4] == "007"


class TestRenderReport:
    def test_header_has_four_lines(self):
        lines = REPORT_HEADER.splitlines()

        assert len(lines) == 4
        assert lines[0] == lines[3]
        assert lines[1].startswith("Account  Last")
        assert lines[2].endswith("Balance")

    def test_row_layout(self, first_account: Account):
        assert render_report_row(first_account) == (
            " A0001   Smith           Alice           J.  123456789  (555)1234567  100.00\n"
        )

    def test_long_name_widens_row(self, first_account: Account):
        first_account.change_last_name("Abcdefghijklmnopq")

        row = render_report_row(first_account)

        assert "Abcdefghijklmnopq  Alice" in row

    def test_balance_has_two_decimals(self, first_account: Account):
        first_account.balance = Decimal("7")

        assert render_report_row(first_account).endswith("  7.00\n")

    def test_rows_follow_header_in_given_order(
        self, first_account: Account, second_account: Account
    ):
        report = render_report([first_account, second_account])

        rows = report[len(REPORT_HEADER) :].splitlines()
        assert report.startswith(REPORT_HEADER)
        assert [row.split()[0] for row in rows] == ["A0001", "A0002"]

    def test_empty_report_is_header_only(self):
        assert render_report([]) == REPORT_HEADER


class TestTextReportingService:
    def test_display_info_writes_to_stream(self, first_account: Account):
        out = io.StringIO()

        TextReportingService(out=out).display_info(first_account)

        assert out.getvalue() == render_account_info(first_account)

    def test_write_report_creates_file(
        self, tmp_path: Path, first_account: Account, second_account: Account
    ):
        path = tmp_path / "report.txt"

        TextReportingService().write_report(
            [first_account, second_account], str(path)
        )

        assert path.read_text(encoding="utf-8") == render_report(
            [first_account, second_account]
        )

    def test_write_report_overwrites(self, tmp_path: Path, first_account: Account):
        path = tmp_path / "report.txt"
        path.write_text("old contents\n" * 50, encoding="utf-8")

        TextReportingService().write_report([first_account], str(path))

        assert "old contents" not in path.read_text(encoding="utf-8")

    def test_directory_path_is_report_file_error(
        self, tmp_path: Path, first_account: Account
    ):
        with pytest.raises(ReportFileError) as exc_info:
            TextReportingService().write_report([first_account], str(tmp_path))

        assert exc_info.value.exit_code == 5

    def test_missing_parent_is_report_file_error(
        self, tmp_path: Path, first_account: Account
    ):
        with pytest.raises(ReportFileError):
            TextReportingService().write_report(
                [first_account], str(tmp_path / "missing" / "report.txt")
            )
