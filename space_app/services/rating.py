from decimal import ROUND_HALF_UP, Decimal

LAST_PROD_YEAR = 3019

_CENTS = Decimal("0.01")


def compute_rating(speed: float, used: bool, prod_year: int) -> float:
    """Rating of a ship: 80 * v * k / (3019 - year + 1), k = 0.5 for used ships.

    The raw value is taken at its shortest decimal representation and rounded
    half-up to two places, so 0.125 becomes 0.13 rather than the binary 0.12.
    """
    raw = 80 * speed * (0.5 if used else 1) / (LAST_PROD_YEAR - prod_year + 1)
    return float(Decimal(repr(raw)).quantize(_CENTS, rounding=ROUND_HALF_UP))
