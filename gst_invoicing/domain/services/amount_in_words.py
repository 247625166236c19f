# gst_invoicing/domain/services/amount_in_words.py
"""
Spell an INR amount the way it is printed on an Indian tax invoice.

    >>> number_to_words(123456.5)
    'One Lakh Twenty Three Thousand Four Hundred Fifty Six Rupees and Fifty Paise Only'
"""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation

from gst_invoicing.domain.exceptions import InvalidAmountError

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]

TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000
PAISE = Decimal("0.01")


def number_to_words(amount) -> str:
    value = _to_decimal(amount)
    if value == 0:
        return "Zero Rupees Only"

    rupees = int(value.to_integral_value(rounding=ROUND_DOWN))
    paise = int((value - rupees) * 100)

    words = _integer_to_words(rupees) or "Zero"
    result = f"{words} Rupees"
    if paise > 0:
        result += f" and {_below_thousand(paise)} Paise"
    return f"{result.strip()} Only"


def _integer_to_words(number: int) -> str:
    """Indian grouping: crore, lakh, thousand, then hundreds."""
    parts = []
    if number >= CRORE:
        # Crores can exceed 99, so spell the multiplier recursively
        parts.append(_integer_to_words(number // CRORE) + " Crore")
        number %= CRORE
    if number >= LAKH:
        parts.append(_below_thousand(number // LAKH) + " Lakh")
        number %= LAKH
    if number >= THOUSAND:
        parts.append(_below_thousand(number // THOUSAND) + " Thousand")
        number %= THOUSAND
    if number > 0:
        parts.append(_below_thousand(number))
    return " ".join(parts)


def _below_thousand(number: int) -> str:
    words = []
    if number > 99:
        words.append(ONES[number // 100] + " Hundred")
        number %= 100
    if number > 19:
        words.append(TENS[number // 10])
        number %= 10
    if number > 0:
        words.append(ONES[number])
    return " ".join(words)


def _to_decimal(amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountError("Amount must be a number")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(f"Amount must be a number, got {amount!r}")
    if not value.is_finite():
        raise InvalidAmountError("Amount must be finite")
    if value < 0:
        raise InvalidAmountError("Amount must not be negative")
    try:
        # Paise are settled here so a value that rounds up carries into rupees
        return value.quantize(PAISE, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(f"Amount is too large to spell out: {amount!r}")
