"""Payroll CLI: interactive menu over the in-memory payroll ledger.

Usage:
    python -m payroll.cli
    payroll-ledger

The session loops on a five-option menu until the operator selects
Exit or the input stream ends. There are no command-line options.
"""

from __future__ import annotations

import argparse
import enum
import logging
import string
from pathlib import Path
from typing import Optional

from payroll.console import Console, TerminalConsole
from payroll.ledger import PayrollLedger
from payroll.models.employee import EmployeeKind
from payroll.policy import InputPolicy
from payroll.validation import InputValidator


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).resolve().parents[2] / "config"

MENU_TITLE = "Payroll System Menu"
FAREWELL = "Exiting system..."

_ADD_CHOICES = {
    "1": EmployeeKind.FIXED_SALARY,
    "2": EmployeeKind.HOURLY,
    "3": EmployeeKind.PER_PROJECT,
}
_REPORT_CHOICE = "4"
_EXIT_CHOICE = "5"


class SessionState(str, enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


def menu_text() -> str:
    lines = [MENU_TITLE]
    for choice, kind in _ADD_CHOICES.items():
        lines.append(f"{choice}. Add {kind.label}")
    lines.append(f"{_REPORT_CHOICE}. Generate Report")
    lines.append(f"{_EXIT_CHOICE}. Exit")
    return "\n".join(lines)


class PayrollSession:
    """Menu state machine: RUNNING until Exit is selected.

    Transitions:
        '1'..'3'  add a record of the matching kind    RUNNING
        '4'       print the payroll report             RUNNING
        '5'       print farewell                       TERMINATED
        other     print an invalid-choice notice       RUNNING
    """

    def __init__(self, console: Console, ledger: PayrollLedger) -> None:
        self._console = console
        self._ledger = ledger
        self.state = SessionState.RUNNING

    def step(self) -> SessionState:
        """Show the menu, read one selection and dispatch it."""
        self._console.say(menu_text())
        choice = self._console.ask("Selection: ").strip()
        logger.debug("Menu selection %r", choice)

        if len(choice) != 1 or choice not in string.digits:
            self._console.say("Invalid menu choice!")
        elif choice in _ADD_CHOICES:
            self._ledger.add_record(_ADD_CHOICES[choice])
        elif choice == _REPORT_CHOICE:
            self._ledger.generate_report()
        elif choice == _EXIT_CHOICE:
            self._terminate()
        else:
            self._console.say("Invalid menu option!")
        return self.state

    def run(self) -> int:
        """Loop until terminated. Returns the process exit status."""
        try:
            while self.state is SessionState.RUNNING:
                self.step()
        except EOFError:
            # Input closed mid-prompt; any half-entered record is dropped.
            self._console.say()
            self._terminate()
        return 0

    def _terminate(self) -> None:
        self._console.say(FAREWELL)
        self.state = SessionState.TERMINATED
        logger.debug("Session ended with %d record(s)", len(self._ledger))


def load_policy(config_dir: Path = DEFAULT_CONFIG) -> InputPolicy:
    """Load the input policy, falling back to the strict preset."""
    try:
        return InputPolicy.from_config_dir(config_dir)
    except FileNotFoundError:
        logger.debug("No payroll policy in %s; using strict defaults", config_dir)
        return InputPolicy.strict()


def build_session(
    console: Console,
    policy: Optional[InputPolicy] = None,
) -> PayrollSession:
    policy = policy or InputPolicy.strict()
    validator = InputValidator(console, policy)
    return PayrollSession(console, PayrollLedger(console, validator))


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="payroll-ledger",
        description="Interactive payroll ledger for fixed-salary, hourly "
                    "and per-project employees",
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)

    console = TerminalConsole()
    session = build_session(console, load_policy())
    return session.run()


if __name__ == "__main__":
    raise SystemExit(main())
