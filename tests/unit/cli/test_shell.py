"""Tests for the interactive front-desk shell, driven by scripted input."""

import io
from typing import Callable, List, Tuple

import pytest
from rich.console import Console
from structlog.testing import capture_logs

from hotel_desk.cli.shell import FrontDeskShell
from hotel_desk.config import Settings
from hotel_desk.domain.front_desk import build_actions
from hotel_desk.infrastructure.sql import BuiltStatement


def scripted(lines: List[str]) -> Tuple[Callable[[str], str], List[str]]:
    """Return a read_line replaying ``lines`` then signalling end of input."""
    remaining = iter(lines)
    prompts: List[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read_line, prompts


@pytest.fixture
def make_shell(executor):
    def _make(lines: List[str]):
        read_line, prompts = scripted(lines)
        console = Console(file=io.StringIO(), width=200, color_system=None)
        shell = FrontDeskShell(
            build_actions(Settings(top_k_max=10)),
            executor,
            console=console,
            read_line=read_line,
        )
        return shell, prompts

    return _make


def output_of(shell: FrontDeskShell) -> str:
    return shell.console.file.getvalue()


@pytest.mark.integration
class TestMenuLoop:
    def test_greeting_and_menu(self, make_shell):
        shell, prompts = make_shell(["17"])

        assert shell.run() == 0

        output = output_of(shell)
        assert "User Interface" in output
        assert "MAIN MENU" in output
        assert "1. Add new customer" in output
        assert "17. < EXIT" in output
        assert prompts == ["Please make your choice: "]

    def test_greeting_can_be_skipped(self, make_shell):
        shell, _ = make_shell(["17"])
        shell.run(greet=False)
        assert "User Interface" not in output_of(shell)

    def test_invalid_and_unknown_choices(self, make_shell):
        shell, _ = make_shell(["abc", "99", "17"])

        assert shell.run(greet=False) == 0

        output = output_of(shell)
        assert "Your input is invalid!" in output
        assert "Unrecognized choice!" in output

    def test_end_of_input_exits_cleanly(self, make_shell):
        shell, prompts = make_shell(["8"])
        assert shell.run(greet=False) == 0
        assert prompts == ["Please make your choice: ", "\tEnter hotelID:"]


@pytest.mark.integration
class TestActions:
    def test_insert_commits_and_reports_success(self, make_shell, hotel_db):
        shell, prompts = make_shell(["2", "1", "104", "Suite", "17"])

        shell.run(greet=False)

        assert "Success!" in output_of(shell)
        assert prompts[1:4] == ["\tEnter hotelID:", "\tEnter roomNo:", "\tEnter roomType:"]
        hotel_db.rollback()
        count = shell.executor.execute(
            BuiltStatement("SELECT COUNT(*) FROM Room WHERE roomNo = ?", (104,))
        ).scalar()
        assert count == 1

    def test_invalid_field_is_prompted_again(self, make_shell):
        shell, prompts = make_shell(["2", "x", "", "1", "104", "Suite", "17"])

        shell.run(greet=False)

        output = output_of(shell)
        assert "Invalid integer for hotelID: 'x'" in output
        assert "hotelID CANNOT be empty!" in output
        assert prompts[1:5] == [
            "\tEnter hotelID:",
            "\tEnter hotelID again:",
            "\tEnter hotelID again:",
            "\tEnter roomNo:",
        ]
        assert "Success!" in output

    def test_report_prints_rows_and_count(self, make_shell):
        shell, _ = make_shell(["14", "FixIt", "17"])

        shell.run(greet=False)

        output = output_of(shell)
        assert "plumbing" in output
        assert "painting" in output
        assert "total row(s): 2" in output

    def test_empty_report(self, make_shell):
        shell, _ = make_shell(["14", "Nobody", "17"])
        shell.run(greet=False)
        assert "total row(s): 0" in output_of(shell)

    def test_database_error_keeps_loop_running(self, make_shell):
        shell, _ = make_shell(["2", "1", "101", "Single", "9", "1", "17"])

        shell.run(greet=False)

        output = output_of(shell)
        assert "Database error:" in output
        assert "total row(s): 1" in output

    def test_booking_for_unknown_customer(self, make_shell):
        shell, _ = make_shell(
            ["5", "30", "No", "Body", "1", "101", "01/07/2024", "", "10", "17"]
        )

        shell.run(greet=False)

        assert "No Customer found for fName='No', lName='Body'" in output_of(shell)

    def test_reversed_date_range_reported(self, make_shell):
        shell, _ = make_shell(["11", "31/12/2024", "01/01/2024", "3", "17"])
        shell.run(greet=False)
        assert "end date is before start date" in output_of(shell)

    def test_failed_action_log_omits_guest_input(self, make_shell):
        shell, _ = make_shell(["31/12/2024", "01/01/2024", "3"])

        with capture_logs() as entries:
            assert shell.run_action(shell.actions[11]) is False

        [entry] = [e for e in entries if e["event"] == "shell.action_failed"]
        assert entry["field"] == "dateTo"
        assert entry["raw_length"] == 10
        assert entry["action"] == 11
        assert "01/01/2024" not in str(entry)

    def test_run_action_result(self, make_shell):
        shell, _ = make_shell(["1"])
        assert shell.run_action(shell.actions[8]) is True

        shell, _ = make_shell(["1", "101", "Single"])
        assert shell.run_action(shell.actions[2]) is False
