from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple

CENT = Decimal("0.01")


def to_cents(amount: float) -> int:
    """Minor units for the payment processor, e.g. 49.99 -> 4999."""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def split_amount(amount: float, fee_percent: float) -> Tuple[float, float]:
    """Return (platform_fee, instructor_earnings), fee rounded half-up to the cent."""
    gross = Decimal(str(amount))
    fee = (gross * Decimal(str(fee_percent)) / 100).quantize(CENT, rounding=ROUND_HALF_UP)
    return float(fee), float(gross - fee)


def round_money(value: float) -> float:
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))
