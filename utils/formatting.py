"""Display formatting for IDR amounts and headline metrics."""

from engine.models import Payback

PAYBACK_DISPLAY_CAP_YEARS = 50


def format_idr(value):
    """Format as Rupiah with Indonesian thousands separators, e.g. 'Rp 1.234.567'."""
    sign = "-" if round(value) < 0 else ""
    digits = f"{abs(value):,.0f}".replace(",", ".")
    return f"{sign}Rp {digits}"


def format_billions(value):
    """Miliar (10^9) with two decimals, e.g. '1.45 M'."""
    return f"{value / 1_000_000_000:.2f} M"


def format_millions(value):
    """Juta (10^6) with one decimal, e.g. '300.0 Juta'."""
    return f"{value / 1_000_000:.1f} Juta"


def format_payback(payback: Payback):
    if not payback.pays_back or payback.years >= PAYBACK_DISPLAY_CAP_YEARS:
        return f"> {PAYBACK_DISPLAY_CAP_YEARS} Years"
    return f"{payback.years:.1f} Years"


def format_margin(margin):
    if margin is None:
        return "Margin: n/a"
    return f"Margin: {margin * 100:.1f}%"
