"""Input validation: turns raw operator text into typed, constrained values.

The parse_* functions are pure: they return the value or raise an
InputRejected subclass carrying the operator-facing message.
InputValidator wraps them in prompt loops that re-ask the same field
until the text is accepted. There is no retry cap.

Rejection taxonomy:
    SyntaxInvalid    text fails the field grammar
    SemanticInvalid  well-formed but breaks a rule (duplicate ID)
    RangeOverflow    parses but exceeds the configured range
"""

from __future__ import annotations

import string
from decimal import Decimal
from typing import Callable, TypeVar

from payroll.console import Console
from payroll.policy import IdentifierStyle, InputPolicy, NameSpacing


_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_DIGITS = frozenset(string.digits)
_ASCII_ALNUM = _ASCII_LETTERS | _ASCII_DIGITS

T = TypeVar("T")


class InputRejected(ValueError):
    """Raised when operator text is not acceptable for a field."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SyntaxInvalid(InputRejected):
    """The text does not match the field grammar."""


class SemanticInvalid(InputRejected):
    """The text is well formed but violates a ledger rule."""


class RangeOverflow(InputRejected):
    """The text parses but the value is out of range."""


def parse_identifier(text: str, policy: InputPolicy) -> str:
    """Accept an alphanumeric identifier, or a number under IdentifierStyle.DIGITS.

    Numeric identifiers are canonicalised, so "007" and "7" are the same ID.
    """
    value = text.strip()
    if policy.identifier_style is IdentifierStyle.DIGITS:
        if not value or not set(value) <= _ASCII_DIGITS:
            raise SyntaxInvalid("Invalid ID! Use only numbers.")
        return str(_bounded_int(value, policy))
    if not value or not set(value) <= _ASCII_ALNUM:
        raise SyntaxInvalid("Invalid ID! Use only letters and numbers.")
    return value


def parse_name(text: str, policy: InputPolicy) -> str:
    """Accept ASCII letters separated by spaces.

    Under NameSpacing.SINGLE, words are separated by exactly one space.
    """
    value = text.strip()
    if policy.name_spacing is NameSpacing.SINGLE:
        words = value.split(" ")
        if not value or not all(w and set(w) <= _ASCII_LETTERS for w in words):
            raise SyntaxInvalid(
                "Invalid name! Use letters and single spaces between names."
            )
        return value
    if not value or not set(value) <= _ASCII_LETTERS | {" "}:
        raise SyntaxInvalid("Invalid name! Use letters and spaces only.")
    return value


def parse_integer(text: str, policy: InputPolicy) -> int:
    value = text.strip()
    if not value or not set(value) <= _ASCII_DIGITS:
        raise SyntaxInvalid("Invalid input! Please enter whole numbers only.")
    return _bounded_int(value, policy)


def _bounded_int(digits: str, policy: InputPolicy) -> int:
    # Length check first: int() refuses very long digit strings.
    significant = digits.lstrip("0")
    if len(significant) > len(str(policy.max_integer)):
        raise RangeOverflow("Input out of range for an integer.")
    number = int(significant or "0")
    if number > policy.max_integer:
        raise RangeOverflow("Input out of range for an integer.")
    return number


def parse_decimal(text: str, policy: InputPolicy) -> Decimal:
    """Accept digits with at most one decimal point and at least one digit."""
    value = text.strip()
    digits = value.replace(".", "", 1)
    if not digits or not set(digits) <= _ASCII_DIGITS:
        raise SyntaxInvalid(
            "Invalid input! Use numbers with optional single decimal point."
        )
    amount = Decimal(value)
    if amount > policy.max_amount:
        raise RangeOverflow("Input out of range for a double.")
    return amount


class InputValidator:
    """Prompts for each field until the operator supplies a valid value.

    Usage:
        validator = InputValidator(TerminalConsole(), InputPolicy.strict())
        employee_id = validator.read_identifier(ledger.is_identifier_unique)
        rate = validator.read_decimal("Hourly Rate: $")
    """

    def __init__(self, console: Console, policy: InputPolicy) -> None:
        self._console = console
        self._policy = policy

    @property
    def policy(self) -> InputPolicy:
        return self._policy

    def _read(self, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            text = self._console.ask(prompt)
            try:
                return parse(text)
            except InputRejected as exc:
                self._console.say(exc.message)

    def read_identifier(self, is_unique: Callable[[str], bool]) -> str:
        """Read an identifier that is well formed and not yet in use."""
        def parse(text: str) -> str:
            employee_id = parse_identifier(text, self._policy)
            if not is_unique(employee_id):
                raise SemanticInvalid("Duplicate ID! Try again.")
            return employee_id

        return self._read("Enter ID: ", parse)

    def read_name(self) -> str:
        return self._read("Enter Name: ", lambda text: parse_name(text, self._policy))

    def read_integer(self, prompt: str) -> int:
        return self._read(prompt, lambda text: parse_integer(text, self._policy))

    def read_decimal(self, prompt: str) -> Decimal:
        return self._read(prompt, lambda text: parse_decimal(text, self._policy))
