"""Derived-field arithmetic shared by the API services and the dashboard forms.

All amounts are plain floats. CBM values keep four decimals, money is shown
without decimals using dot thousands separators (``Rp 91.500``).
"""

from collections.abc import Iterable

CBM_PRECISION = 4
_CM3_PER_M3 = 1_000_000


def line_total(quantity: float | None, unit_price: float | None) -> float:
    """quantity × unit price; missing inputs count as zero."""
    return float(quantity or 0) * float(unit_price or 0)


def cbm(
    width: float | None,
    length: float | None,
    height: float | None,
    quantity: float | None,
) -> float:
    """Cubic metres for a line measured in centimetres."""
    volume = float(width or 0) * float(length or 0) * float(height or 0)
    return round(volume / _CM3_PER_M3 * float(quantity or 0), CBM_PRECISION)


def subtotal(line_totals: Iterable[float | None]) -> float:
    return sum(float(value or 0) for value in line_totals)


def tax_from_percentage(amount: float, percentage: float | None) -> float | None:
    if percentage is None:
        return None
    return amount * float(percentage) / 100


def grand_total(
    line_totals: Iterable[float | None],
    tax: float | None = None,
    other_costs: float | None = None,
) -> float:
    """Σ line totals + tax + other costs."""
    return subtotal(line_totals) + float(tax or 0) + float(other_costs or 0)


def format_money(amount: float | None, currency: str = "Rp") -> str:
    value = round(float(amount or 0))
    grouped = f"{abs(value):,}".replace(",", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}{currency} {grouped}"


def format_cbm(value: float | None) -> str:
    return f"{float(value or 0):.{CBM_PRECISION}f}"
