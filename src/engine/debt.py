"""Mortgage payment computation.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, InvalidOperation, Overflow, localcontext


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: Decimal) -> Decimal:
    """Calculate fixed monthly mortgage payment.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate in percent (e.g. 5 for 5%)
        term_years: Loan term in years

    The result is not rounded; callers round for display. Never raises:
    a rate too small to register at context precision pays straight-line,
    a term long enough to overflow pays interest only, and a rate below
    -1200% with a fractional term pays 0.
    """
    if principal <= 0 or term_years <= 0:
        return Decimal("0")
    if annual_rate == 0:
        return principal / (term_years * 12)

    r = annual_rate / 100 / 12
    n = term_years * 12
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        ctx.traps[InvalidOperation] = False
        # M = P * [r(1+r)^n] / [(1+r)^n - 1]
        factor = (1 + r) ** n
        if factor.is_finite() and factor == 1:
            return principal / (term_years * 12)
        payment = principal * (r * factor) / (factor - 1)

    if payment.is_finite():
        return payment
    if factor.is_infinite():
        # Limit as n grows: interest only
        return principal * r
    return Decimal("0")
