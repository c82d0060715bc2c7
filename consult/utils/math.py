# consult/utils/math.py
import math
from typing import Optional

def is_missing(x) -> bool:
    """True for None and NaN; everything else counts as a value."""
    if x is None:
        return True
    try:
        return math.isnan(x)
    except TypeError:
        return False

def safe_div(n: Optional[float], d: Optional[float]) -> Optional[float]:
    if is_missing(n) or is_missing(d) or d == 0:
        return None
    try:
        return n / d
    except ZeroDivisionError:
        return None

def positive(x: Optional[float]) -> Optional[float]:
    """Pass x through only when it is a real number above zero."""
    if is_missing(x) or x <= 0:
        return None
    return x

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def r2(x):
    return None if x is None else round(float(x), 2)

def r4(x):
    return None if x is None else round(float(x), 4)
