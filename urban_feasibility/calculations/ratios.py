"""Guarded ratio helper shared by the derivation stages."""


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 instead of raising or producing inf/nan.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        numerator / denominator, or 0.0 if the denominator is zero.
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator
