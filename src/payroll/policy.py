"""Input policy: the grammar the validator applies to operator input.

Presets:
- strict: alphanumeric IDs, single spaces between name words (default)
- numeric_ids: numeric IDs, letters and spaces in any arrangement;
  the rule set of the earlier integer-ID ledger
- lenient: alphanumeric IDs, letters and spaces in any arrangement

Usage:
    policy = InputPolicy.from_config_dir(Path("config"))
    policy = InputPolicy.strict()
"""

from __future__ import annotations

import enum
import json
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any


# Largest value of a 32-bit signed integer and of an IEEE double.
DEFAULT_MAX_INTEGER = 2**31 - 1
DEFAULT_MAX_AMOUNT = Decimal(repr(sys.float_info.max))


class IdentifierStyle(str, enum.Enum):
    ALPHANUMERIC = "alphanumeric"
    DIGITS = "digits"


class NameSpacing(str, enum.Enum):
    SINGLE = "single"
    ANY = "any"


@dataclass(frozen=True)
class InputPolicy:
    """Field grammar and numeric ranges for operator input."""
    identifier_style: IdentifierStyle = IdentifierStyle.ALPHANUMERIC
    name_spacing: NameSpacing = NameSpacing.SINGLE
    max_integer: int = DEFAULT_MAX_INTEGER
    max_amount: Decimal = DEFAULT_MAX_AMOUNT
    currency_symbol: str = "$"

    POLICY_FILENAME = "payroll_policy.json"

    def __post_init__(self) -> None:
        if self.max_integer < 0:
            raise ValueError(f"max_integer must be non-negative, got {self.max_integer}")
        if self.max_amount < 0:
            raise ValueError(f"max_amount must be non-negative, got {self.max_amount}")

    @classmethod
    def strict(cls) -> InputPolicy:
        return cls()

    @classmethod
    def lenient(cls) -> InputPolicy:
        return cls(name_spacing=NameSpacing.ANY)

    @classmethod
    def numeric_ids(cls) -> InputPolicy:
        return cls(
            identifier_style=IdentifierStyle.DIGITS,
            name_spacing=NameSpacing.ANY,
        )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> InputPolicy:
        """Build a policy from a parsed policy document.

        Unset keys keep their defaults. A "preset" key selects the
        starting point; explicit keys override it.

        Raises:
            ValueError: If a key is unknown or a value is invalid.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Payroll policy must be a JSON object, got {type(data).__name__}"
            )

        presets = {
            "strict": cls.strict,
            "lenient": cls.lenient,
            "numeric_ids": cls.numeric_ids,
        }
        known = {"preset", "identifier_style", "name_spacing",
                 "max_integer", "max_amount", "currency_symbol"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown payroll policy keys: {', '.join(unknown)}")

        preset_name = data.get("preset", "strict")
        if preset_name not in presets:
            raise ValueError(
                f"Unknown payroll policy preset: '{preset_name}'. "
                f"Expected one of: {', '.join(presets)}"
            )
        base = presets[preset_name]()

        try:
            identifier_style = IdentifierStyle(
                data.get("identifier_style", base.identifier_style.value)
            )
            name_spacing = NameSpacing(data.get("name_spacing", base.name_spacing.value))
        except ValueError as exc:
            raise ValueError(f"Invalid payroll policy: {exc}") from exc

        max_integer = data.get("max_integer", base.max_integer)
        if isinstance(max_integer, bool) or not isinstance(max_integer, int):
            raise ValueError(f"max_integer must be an integer, got {max_integer!r}")

        raw_amount = data.get("max_amount", base.max_amount)
        try:
            max_amount = Decimal(str(raw_amount))
        except InvalidOperation as exc:
            raise ValueError(f"max_amount must be numeric, got {raw_amount!r}") from exc
        if not max_amount.is_finite():
            raise ValueError(f"max_amount must be finite, got {raw_amount!r}")

        currency_symbol = data.get("currency_symbol", base.currency_symbol)
        if not isinstance(currency_symbol, str):
            raise ValueError(f"currency_symbol must be a string, got {currency_symbol!r}")

        return cls(
            identifier_style=identifier_style,
            name_spacing=name_spacing,
            max_integer=max_integer,
            max_amount=max_amount,
            currency_symbol=currency_symbol,
        )

    @classmethod
    def from_config_dir(cls, config_dir: Path) -> InputPolicy:
        """Load the policy from the config directory.

        Args:
            config_dir: Directory containing payroll_policy.json.

        Raises:
            FileNotFoundError: If payroll_policy.json does not exist.
            ValueError: If the policy document is invalid.
        """
        path = config_dir / cls.POLICY_FILENAME
        if not path.exists():
            raise FileNotFoundError(f"Payroll policy not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_mapping(data)
