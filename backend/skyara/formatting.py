"""Formatting helpers for feasibility output.

Amounts are rounded to the whole dirham only here, never during
calculation. Dashboard cards quote large amounts in millions of centimes
("M Cts", 1 DH = 100 centimes), the way Moroccan buyers and promoters talk
about property prices.
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format an amount in DH, rounded to the unit (e.g. '1,314,675 DH')."""
    return f"{amount:,.0f} DH"


def format_million_centimes(amount: float) -> str:
    """Format an amount in millions of centimes (e.g. 1,314,675 DH -> '131.5 M Cts')."""
    return f"{amount / 10_000:.1f} M Cts"


def format_surface(surface_m2: float) -> str:
    return f"{surface_m2:.1f} m²"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def format_tonnes(kilograms: float) -> str:
    """Format a steel weight as tonnes with two decimals."""
    return f"{kilograms / 1000:.2f} T"


def format_count(value: float, unit: str) -> str:
    """Format a rounded quantity with thousands separators (e.g. '12,720 Unités')."""
    return f"{value:,.0f} {unit}"
