# PURPOSE: Round projection amounts to whole currency units for output.
# CONTEXT: The projection engine accumulates unrounded floats and only rounds when it
#          publishes milestones and year-by-year records.

from decimal import Decimal, ROUND_HALF_UP, localcontext

# Enough digits for any finite float (the largest has 309 integer digits).
_PRECISION = 320


def round_currency(amount: float) -> int:
    """
    Round an amount to the nearest whole currency unit, halves away from zero.

    parameters:
    - amount: float – unrounded balance or contribution total.

    returns:
    - int – rounded amount.

    notes:
    - Decimal(float) keeps the exact binary value, so 2.5 -> 3 and 1234.5 -> 1235
      regardless of the platform's round() behaviour (which is banker's rounding).
    - The default 28-digit context would reject amounts from 1e28 upward.
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return int(Decimal(amount).quantize(Decimal(1), ROUND_HALF_UP))
