"""Display formatting for amounts and percentages."""

from decimal import Decimal, ROUND_HALF_UP

from src.models.currency import Currency

TWO_PLACES = Decimal("0.01")


def format_currency(value: Decimal, currency: Currency = Currency.CZK) -> str:
    """Two decimals, space-separated thousands, currency symbol suffix.

    >>> format_currency(Decimal("1234567.891"))
    '1 234 567.89 Kč'
    """
    amount = value.quantize(TWO_PLACES, ROUND_HALF_UP)
    return f"{amount:,.2f}".replace(",", " ") + f" {currency.symbol}"


def format_percent(value: Decimal) -> str:
    return f"{value.quantize(TWO_PLACES, ROUND_HALF_UP):.2f} %"
