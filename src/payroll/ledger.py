"""Payroll ledger: owns the session's employee records.

The ledger is the only holder of records. It enforces identifier
uniqueness, builds the record variant chosen on the menu, and renders
the payroll report in insertion order.

Storage is in-memory only; records live for the duration of the process.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from payroll.console import Console
from payroll.models.employee import (
    Employee,
    EmployeeKind,
    FixedSalaryEmployee,
    HourlyEmployee,
    PerProjectEmployee,
)
from payroll.validation import InputValidator


logger = logging.getLogger(__name__)

REPORT_HEADER = "Employee Payroll Report ---"
EMPTY_REPORT = "No employees in system!\n\n"


class DuplicateEmployeeError(ValueError):
    """Raised when a record's identifier is already in the ledger."""


class PayrollLedger:
    """In-memory ledger of employee records.

    Usage:
        ledger = PayrollLedger(console, InputValidator(console, policy))
        ledger.add_record(EmployeeKind.HOURLY)   # prompts for every field
        ledger.generate_report()
    """

    def __init__(self, console: Console, validator: InputValidator) -> None:
        self._console = console
        self._validator = validator
        self._records: List[Employee] = []
        self._builders: Dict[EmployeeKind, Callable[[str, str], Employee]] = {
            EmployeeKind.FIXED_SALARY: self._build_fixed_salary,
            EmployeeKind.HOURLY: self._build_hourly,
            EmployeeKind.PER_PROJECT: self._build_per_project,
        }

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> Tuple[Employee, ...]:
        """Return all records in insertion order."""
        return tuple(self._records)

    def is_identifier_unique(self, employee_id: str) -> bool:
        return all(r.employee_id != employee_id for r in self._records)

    def enroll(self, employee: Employee) -> None:
        """Append a fully built record.

        Raises:
            DuplicateEmployeeError: If the identifier is already used.
        """
        if not self.is_identifier_unique(employee.employee_id):
            raise DuplicateEmployeeError(
                f"Employee ID already in ledger: {employee.employee_id}"
            )
        self._records.append(employee)
        logger.debug(
            "Recorded %s employee %s (total %s)",
            employee.kind.value, employee.employee_id, employee.total_pay,
        )

    def add_record(self, kind: EmployeeKind) -> Employee:
        """Prompt for every field of a new record and append it.

        Identifier and name come first, then the fields of the chosen
        scheme. Each prompt repeats until its input is valid, so the
        record is either appended whole or not at all.
        """
        employee_id = self._validator.read_identifier(self.is_identifier_unique)
        name = self._validator.read_name()
        employee = self._builders[kind](employee_id, name)
        self.enroll(employee)
        self._console.say("Employee added!\n")
        return employee

    def _build_fixed_salary(self, employee_id: str, name: str) -> Employee:
        salary = self._validator.read_decimal("Monthly Salary: $")
        return FixedSalaryEmployee(employee_id, name, monthly_salary=salary)

    def _build_hourly(self, employee_id: str, name: str) -> Employee:
        rate = self._validator.read_decimal("Hourly Rate: $")
        hours = self._validator.read_integer("Hours Worked: ")
        return HourlyEmployee(employee_id, name, hourly_rate=rate, hours_worked=hours)

    def _build_per_project(self, employee_id: str, name: str) -> Employee:
        rate = self._validator.read_decimal("Payment Per Project: $")
        projects = self._validator.read_integer("Projects Completed: ")
        return PerProjectEmployee(
            employee_id, name,
            payment_per_project=rate,
            projects_completed=projects,
        )

    def render_report(self) -> str:
        """Return the payroll report text.

        An empty ledger yields only the no-records notice. Otherwise a
        header is followed by one block per record, each block ending
        with a blank line.
        """
        if not self._records:
            return EMPTY_REPORT
        currency = self._validator.policy.currency_symbol
        blocks = [r.render(currency) for r in self._records]
        return f"\n{REPORT_HEADER}\n" + "".join(blocks)

    def generate_report(self) -> None:
        # say() supplies the final newline
        self._console.say(self.render_report().removesuffix("\n"))
