# seagrassnav/utils/numeric.py
import math

def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Rounds halves towards +infinity (2.5 -> 3, -2.5 -> -2) instead of Python's
    round-half-to-even. Returns an int when ndigits is 0.
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale
