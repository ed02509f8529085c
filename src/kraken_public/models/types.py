"""Shared field types."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer


def wire_text(value: Decimal) -> str:
    """Positional text for *value*, keeping the exchange's digits.

    ``str(Decimal("0.00000010"))`` gives ``"1.0E-7"``; this gives
    ``"0.00000010"``.
    """
    return format(value, "f")


# Decimal amount that dumps to JSON as plain positional text.
WireDecimal = Annotated[Decimal, PlainSerializer(wire_text, return_type=str, when_used="json")]
