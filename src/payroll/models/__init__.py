"""Core data models for the payroll ledger."""

from payroll.models.employee import (
    Employee,
    EmployeeKind,
    FixedSalaryEmployee,
    HourlyEmployee,
    PerProjectEmployee,
    format_amount,
)

__all__ = [
    "Employee",
    "EmployeeKind",
    "FixedSalaryEmployee",
    "HourlyEmployee",
    "PerProjectEmployee",
    "format_amount",
]
