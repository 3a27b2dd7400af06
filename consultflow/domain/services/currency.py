"""Currency conversion and display helpers."""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from consultflow.utils.decimal_utils import coerce_decimal

CURRENCY_SYMBOLS = {
    "USD": "$",
    "NGN": "₦",
    "CFA": "CFA ",
}


def convert_amount(
    amount: Decimal,
    source: str,
    target: str,
    rates_per_usd: Mapping[str, Decimal] | None = None,
) -> Decimal:
    """Convert an amount between currencies through USD.

    ``rates_per_usd`` maps currency codes to units per one USD. Missing or
    non-positive rates leave the amount unchanged.

    Args:
        amount: Amount in the source currency.
        source: Source currency code.
        target: Target currency code.
        rates_per_usd: Optional per-USD rates.

    Returns:
        Decimal: Converted amount.
    """
    value = coerce_decimal(amount)
    source_code = (source or "NGN").upper()
    target_code = (target or "NGN").upper()
    if source_code == target_code or not rates_per_usd:
        return value

    def _per_usd(code: str) -> Decimal | None:
        if code == "USD":
            return Decimal("1")
        rate = rates_per_usd.get(code)
        return None if rate is None else coerce_decimal(rate)

    source_rate = _per_usd(source_code)
    target_rate = _per_usd(target_code)
    if source_rate is None or target_rate is None:
        return value
    if source_rate <= 0 or target_rate <= 0:
        return value
    return value / source_rate * target_rate


def format_currency(amount: Decimal, currency: str) -> str:
    """Format an amount with a currency symbol and no decimals."""
    code = (currency or "NGN").upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    rounded = coerce_decimal(amount).quantize(
        Decimal("1"),
        rounding=ROUND_HALF_UP,
    )
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,}"


__all__ = ["CURRENCY_SYMBOLS", "convert_amount", "format_currency"]
