# gst_invoicing/domain/services/currency.py

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from gst_invoicing.domain.exceptions import InvalidAmountError


def format_inr(amount, symbol: str = "₹") -> str:
    """Indian digit grouping: ``format_inr(100300) == "₹1,00,300.00"``."""
    try:
        value = Decimal(str(amount))
        if not value.is_finite():
            raise InvalidAmountError("Amount must be finite")
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(f"Cannot format {amount!r} as rupees")
    sign = "-" if value < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")

    # Last three digits, then groups of two
    head, tail = whole[:-3], whole[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    grouped = ",".join(groups + [tail])
    return f"{sign}{symbol}{grouped}.{fraction}"
