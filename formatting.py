import math


def _finite(value) -> bool:
    return value is not None and math.isfinite(value)


def format_currency(amount: float) -> str:
    """$1,234,567 style, whole dollars."""
    if not _finite(amount):
        return "∞" if amount == math.inf else "n/a"
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_compact(value: float) -> str:
    """Axis/tooltip labels: $1.2M, $250K, $999."""
    if not _finite(value):
        return "∞" if value == math.inf else "n/a"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.0f}K"
    return f"${value:.0f}"


def format_years(years: float) -> str:
    if not _finite(years):
        return "∞ years" if years == math.inf else "n/a"
    return f"{years:.1f} years"


def format_pct_change(pct: float) -> str:
    if not _finite(pct):
        return "n/a"
    return f"{'+' if pct > 0 else ''}{pct:.1f}%"
