"""
Interactive front-desk shell.

Shows the numbered menu, prompts for each field of the chosen action's form
until it validates, runs the action and prints the outcome. All user input
arrives through the ``read_line`` callable, so the shell can be driven by a
script in tests.
"""

from __future__ import annotations

from typing import Callable, List, Mapping, Optional

from rich.console import Console
from sqlalchemy.engine import Connection

from hotel_desk.domain.front_desk.constants import EXIT_KEY, EXIT_TITLE
from hotel_desk.domain.front_desk.models import FrontDeskAction, RecordNotFound
from hotel_desk.infrastructure.schema.core import FieldSpec
from hotel_desk.infrastructure.sql.exceptions import ClauseParameterMismatch
from hotel_desk.infrastructure.validation import (
    FieldValidationError,
    FieldValue,
    SpecMismatch,
    validate,
)
from hotel_desk.io.connectors.exceptions import DatabaseExecutionFailed
from hotel_desk.io.repositories.statement_executor import ExecutionResult, StatementExecutor
from hotel_desk.utils.logging import bind_context, get_logger

from .formatter import format_error, format_rows

logger = get_logger(__name__)

ReadLine = Callable[[str], str]

GREETING = (
    "\n\n*******************************************************\n"
    "              User Interface                           \n"
    "*******************************************************\n"
)


class FrontDeskShell:
    """Menu loop over the front-desk actions."""

    def __init__(
        self,
        actions: Mapping[int, FrontDeskAction],
        executor: StatementExecutor,
        connection: Optional[Connection] = None,
        console: Optional[Console] = None,
        read_line: Optional[ReadLine] = None,
    ):
        """
        Args:
            actions: Menu number to action, in display order
            executor: Executes the statements actions produce
            connection: Connection to commit or roll back after each action;
                defaults to the executor's connection
            console: Rich console for output
            read_line: Callable that shows a prompt and returns one line;
                raises EOFError when input is exhausted
        """
        self.actions = actions
        self.executor = executor
        self.connection = connection if connection is not None else executor.connection
        self.console = console or Console(highlight=False)
        self.read_line = read_line or self.console.input

    # Output -----------------------------------------------------------------

    def say(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False)

    def warn(self, text: str) -> None:
        self.say(text, style="red")

    def greet(self) -> None:
        self.say(GREETING)

    def show_menu(self) -> None:
        self.say("MAIN MENU")
        self.say("---------")
        for key, action in self.actions.items():
            self.say(f"{key}. {action.title}")
        self.say(f"{EXIT_KEY}. {EXIT_TITLE}")

    def show_result(self, action: FrontDeskAction, result: ExecutionResult) -> None:
        if action.writes:
            self.say("Success!", style="green")
            return
        for line in format_rows(result):
            self.say(line)
        self.say("")

    # Input ------------------------------------------------------------------

    def read_choice(self) -> int:
        """Prompt until an integer is entered."""
        while True:
            raw = self.read_line("Please make your choice: ")
            try:
                return int(raw.strip())
            except ValueError:
                self.say("Your input is invalid!")

    def prompt_field(self, spec: FieldSpec) -> FieldValue:
        """Prompt for one field until it validates."""
        prompt = f"\tEnter {spec.prompt_label}:"
        while True:
            raw = self.read_line(prompt)
            try:
                return validate(spec, raw)
            except FieldValidationError as exc:
                self.warn(str(exc))
                prompt = f"\tEnter {spec.prompt_label} again:"

    def collect(self, action: FrontDeskAction) -> List[FieldValue]:
        """Prompt for every field of the action's form, in order."""
        return [self.prompt_field(spec) for spec in action.form]

    # Actions ----------------------------------------------------------------

    def run_action(self, action: FrontDeskAction) -> bool:
        """
        Collect input for an action, run it and print the outcome.

        Returns:
            True if the action succeeded
        """
        log = bind_context(__name__, action=action.key, title=action.title)
        values = self.collect(action)
        try:
            result = action.run(self.executor, values)
        except (FieldValidationError, RecordNotFound, DatabaseExecutionFailed) as exc:
            self.connection.rollback()
            log.warning("shell.action_failed", **exc.to_dict())
            self.warn(format_error(exc))
            return False
        except (SpecMismatch, ClauseParameterMismatch) as exc:
            self.connection.rollback()
            log.error("shell.action_misconfigured", exc_info=True, **exc.to_dict())
            self.warn(format_error(exc))
            return False

        self.connection.commit()
        log.info("shell.action_completed", rowcount=result.rowcount)
        self.show_result(action, result)
        return True

    def run(self, greet: bool = True) -> int:
        """
        Run the menu loop until the exit choice or end of input.

        Returns:
            Process exit code
        """
        if greet:
            self.greet()
        try:
            while True:
                self.show_menu()
                choice = self.read_choice()
                if choice == EXIT_KEY:
                    break
                action = self.actions.get(choice)
                if action is None:
                    self.say("Unrecognized choice!")
                    continue
                self.run_action(action)
        except (EOFError, KeyboardInterrupt):
            self.say("")
            logger.info("shell.input_closed")
        return 0
