# utils/formatting.py
from models.estimate_model import round_half_up


def format_currency(amount):
    """12345 -> '$12,345'. Whole dollars, ties rounded up."""
    dollars = int(round_half_up(abs(amount)))
    sign = "-" if amount < 0 and dollars else ""
    return f"{sign}${dollars:,}"


def format_usd_range(usd_range):
    return f"{format_currency(usd_range.min)} - {format_currency(usd_range.max)}"


def format_system_size(size_kw):
    """4.6 -> '4.6 kW', 8.0 -> '8 kW'."""
    value = f"{size_kw:.1f}".rstrip("0").rstrip(".")
    return f"{value} kW"
