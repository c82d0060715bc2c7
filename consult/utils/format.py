# consult/utils/format.py
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from consult.utils.math import is_missing

DASH = "—"

def currency(n: Optional[float]) -> str:
    """USD, whole dollars: 1234.5 -> '$1,235'."""
    if is_missing(n):
        return DASH
    # halves round away from zero
    value = Decimal(str(float(n))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"

def pct(n: Optional[float]) -> str:
    """Ratio as a one-decimal percentage: 0.015 -> '1.5%'."""
    if is_missing(n):
        return DASH
    return f"{n * 100:.1f}%"

def multiple(n: Optional[float]) -> str:
    return DASH if is_missing(n) else f"{n:.2f}x"
