"""Tests for employee models: proves totals are exact and rendering is per-variant."""

import pytest
from decimal import Decimal, localcontext

from payroll.models.employee import (
    Employee,
    EmployeeKind,
    FixedSalaryEmployee,
    HourlyEmployee,
    PerProjectEmployee,
    exact_product,
    format_amount,
)


class TestTotals:
    def test_fixed_salary_total_is_salary(self) -> None:
        e = FixedSalaryEmployee("E1", "Ann", monthly_salary=Decimal("5000"))
        assert e.total_pay == Decimal("5000")

    def test_hourly_total_is_rate_times_hours(self) -> None:
        e = HourlyEmployee("H1", "Bob", hourly_rate=Decimal("12.5"), hours_worked=40)
        assert e.total_pay == Decimal("12.5") * 40
        assert e.total_pay == Decimal("500")

    def test_per_project_total_is_rate_times_count(self) -> None:
        e = PerProjectEmployee(
            "P1", "Cy", payment_per_project=Decimal("1500.25"), projects_completed=3,
        )
        assert e.total_pay == Decimal("4500.75")

    def test_zero_hours_gives_zero(self) -> None:
        e = HourlyEmployee("H2", "Dee", hourly_rate=Decimal("30"), hours_worked=0)
        assert e.total_pay == 0

    def test_product_is_exact_beyond_default_precision(self) -> None:
        """30 significant digits times 10 digits must not round."""
        rate = Decimal("123456789012345678901234567.891")
        total = exact_product(rate, 2147483647)
        with localcontext() as ctx:
            ctx.prec = 100
            expected = rate * 2147483647
        assert total == expected
        assert rate * 2147483647 != expected


class TestKinds:
    def test_each_variant_reports_its_kind(self) -> None:
        assert FixedSalaryEmployee("a", "A", Decimal("1")).kind is EmployeeKind.FIXED_SALARY
        assert HourlyEmployee("b", "B", Decimal("1"), 1).kind is EmployeeKind.HOURLY
        assert PerProjectEmployee("c", "C", Decimal("1"), 1).kind is EmployeeKind.PER_PROJECT

    def test_menu_labels(self) -> None:
        assert EmployeeKind.FIXED_SALARY.label == "Full-time Employee"
        assert EmployeeKind.HOURLY.label == "Part-time Employee"
        assert EmployeeKind.PER_PROJECT.label == "Contractual Employee"


class TestImmutability:
    def test_records_are_frozen(self) -> None:
        e = FixedSalaryEmployee("E1", "Ann", monthly_salary=Decimal("5000"))
        with pytest.raises(AttributeError):
            e.name = "Bea"  # type: ignore[misc]


class TestConstructionChecks:
    def test_base_record_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Employee("E1", "Ann")  # type: ignore[abstract]

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="employee_id"):
            FixedSalaryEmployee("", "Ann", monthly_salary=Decimal("1"))

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="name"):
            FixedSalaryEmployee("E1", "", monthly_salary=Decimal("1"))

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValueError, match="hourly_rate"):
            HourlyEmployee("H1", "Bob", hourly_rate=Decimal("-1"), hours_worked=1)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="projects_completed"):
            PerProjectEmployee("P1", "Cy", Decimal("10"), projects_completed=-2)


class TestFormatAmount:
    @pytest.mark.parametrize("raw, shown", [
        ("5000", "5000"),
        ("12.50", "12.5"),
        ("500.0", "500"),
        ("0", "0"),
        ("0.000", "0"),
        ("5E+3", "5000"),
        (".75", "0.75"),
    ])
    def test_plain_notation(self, raw: str, shown: str) -> None:
        assert format_amount(Decimal(raw)) == shown


class TestRender:
    def test_fixed_salary_block(self) -> None:
        e = FixedSalaryEmployee("E1", "Ann", monthly_salary=Decimal("5000"))
        assert e.render() == (
            "Employee: Ann (ID: E1)\n"
            "Fixed Monthly Salary: $5000\n"
            "\n"
        )

    def test_hourly_block(self) -> None:
        e = HourlyEmployee("H1", "Bob Ray", hourly_rate=Decimal("12.5"), hours_worked=40)
        assert e.render() == (
            "Employee: Bob Ray (ID: H1)\n"
            "Hourly Rate: $12.5\n"
            "Hours Worked: 40\n"
            "Total Salary: $500\n"
            "\n"
        )

    def test_per_project_block(self) -> None:
        e = PerProjectEmployee("P1", "Cy", payment_per_project=Decimal("800"), projects_completed=2)
        assert e.render() == (
            "Employee: Cy (ID: P1)\n"
            "Contract Payment Per Project: $800\n"
            "Projects Completed: 2\n"
            "Total Salary: $1600\n"
            "\n"
        )

    def test_currency_symbol_is_applied(self) -> None:
        e = FixedSalaryEmployee("E1", "Ann", monthly_salary=Decimal("10"))
        assert "Fixed Monthly Salary: €10" in e.render("€")
