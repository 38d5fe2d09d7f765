import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(x: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves going away from zero.

    Works on the shortest decimal repr of ``x``, so 4.25 becomes 4.3 and
    0.125 becomes 0.13, matching what the dashboards display.
    """
    if not math.isfinite(x):
        return x
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(x))).quantize(quantum, rounding=ROUND_HALF_UP))
