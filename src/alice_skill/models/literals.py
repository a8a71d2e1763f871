"""
JSON number literals.

Requests are decoded with non-integer numbers parsed as NumberLiteral, a
Decimal that remembers its source text, so ``16.0`` and ``5.0e1`` stay
distinguishable from ``16`` and ``1e5``.
"""

from decimal import Decimal
from typing import Any, Optional


class NumberLiteral(Decimal):
    """Decimal that keeps the JSON text it was parsed from."""

    def __new__(cls, literal: str) -> "NumberLiteral":
        self = super().__new__(cls, literal)
        self.literal = literal
        return self


def number_literal(value: Any) -> Optional[str]:
    """Textual form of a decoded JSON number, or None if value is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, NumberLiteral):
        return value.literal
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (int, float)):
        return repr(value)
    return None


def is_float_literal(value: Any) -> bool:
    literal = number_literal(value)
    return literal is not None and "." in literal


def plain_json(value: Any) -> Any:
    """Replace Decimals with floats so a value serializes as JSON numbers."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: plain_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [plain_json(v) for v in value]
    return value
