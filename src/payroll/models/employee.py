"""Employee models: the three compensation schemes held by the ledger.

Every record shares an identifier, a name, and a computed total pay.
Each variant supplies its own report block via render().

All monetary values use Decimal for exact arithmetic. No floats in payroll.

Invariants enforced by these models:
- employee_id and name are non-empty
- amounts and counts are non-negative
- total pay is an exact product (no rounding)
- records are immutable once constructed
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, localcontext


class EmployeeKind(str, enum.Enum):
    """Compensation scheme of a record.

    The label is the wording used on the console menu.
    """
    FIXED_SALARY = "fixed_salary"
    HOURLY = "hourly"
    PER_PROJECT = "per_project"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    EmployeeKind.FIXED_SALARY: "Full-time Employee",
    EmployeeKind.HOURLY: "Part-time Employee",
    EmployeeKind.PER_PROJECT: "Contractual Employee",
}


def format_amount(amount: Decimal) -> str:
    """Render an amount in plain notation without trailing fractional zeros.

    Decimal("5000") -> "5000", Decimal("12.50") -> "12.5",
    Decimal("500.0") -> "500".
    """
    text = format(amount, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def exact_product(amount: Decimal, count: int) -> Decimal:
    """Multiply without rounding, whatever the size of the operands."""
    factor = Decimal(count)
    digits = len(amount.as_tuple().digits) + len(factor.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(digits, ctx.prec)
        return amount * factor


@dataclass(frozen=True)
class Employee(ABC):
    """Fields shared by every compensation scheme.

    Abstract; construct one of the variants below.
    """
    employee_id: str
    name: str

    kind = None  # overridden per variant

    def __post_init__(self) -> None:
        if not self.employee_id:
            raise ValueError("employee_id must be non-empty")
        if not self.name:
            raise ValueError("name must be non-empty")

    @property
    @abstractmethod
    def total_pay(self) -> Decimal:
        ...

    def render(self, currency: str = "$") -> str:
        """Return this record's report block, ending with a blank line."""
        lines = [f"Employee: {self.name} (ID: {self.employee_id})"]
        lines.extend(self._detail_lines(currency))
        return "\n".join(lines) + "\n\n"

    @abstractmethod
    def _detail_lines(self, currency: str) -> list[str]:
        ...


def _check_amount(field_name: str, value: Decimal) -> None:
    if not value.is_finite() or value < 0:
        raise ValueError(f"{field_name} must be a non-negative amount, got {value}")


def _check_count(field_name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{field_name} must be non-negative, got {value}")


@dataclass(frozen=True)
class FixedSalaryEmployee(Employee):
    """Paid a flat monthly salary."""
    monthly_salary: Decimal

    kind = EmployeeKind.FIXED_SALARY

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_amount("monthly_salary", self.monthly_salary)

    @property
    def total_pay(self) -> Decimal:
        return self.monthly_salary

    def _detail_lines(self, currency: str) -> list[str]:
        return [f"Fixed Monthly Salary: {currency}{format_amount(self.monthly_salary)}"]


@dataclass(frozen=True)
class HourlyEmployee(Employee):
    """Paid hourly_rate for each hour worked."""
    hourly_rate: Decimal
    hours_worked: int

    kind = EmployeeKind.HOURLY

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_amount("hourly_rate", self.hourly_rate)
        _check_count("hours_worked", self.hours_worked)

    @property
    def total_pay(self) -> Decimal:
        return exact_product(self.hourly_rate, self.hours_worked)

    def _detail_lines(self, currency: str) -> list[str]:
        return [
            f"Hourly Rate: {currency}{format_amount(self.hourly_rate)}",
            f"Hours Worked: {self.hours_worked}",
            f"Total Salary: {currency}{format_amount(self.total_pay)}",
        ]


@dataclass(frozen=True)
class PerProjectEmployee(Employee):
    """Paid a fixed amount per completed project."""
    payment_per_project: Decimal
    projects_completed: int

    kind = EmployeeKind.PER_PROJECT

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_amount("payment_per_project", self.payment_per_project)
        _check_count("projects_completed", self.projects_completed)

    @property
    def total_pay(self) -> Decimal:
        return exact_product(self.payment_per_project, self.projects_completed)

    def _detail_lines(self, currency: str) -> list[str]:
        return [
            f"Contract Payment Per Project: {currency}{format_amount(self.payment_per_project)}",
            f"Projects Completed: {self.projects_completed}",
            f"Total Salary: {currency}{format_amount(self.total_pay)}",
        ]
