"""
View Formatter - Text Formatting and Presentation

This module turns the plain values returned by the rate core into text for
console views: selector options, conversion results, chart series and the
refresh alert. It also shapes series points into the ``{"x": ..., "y": ...}``
dicts JavaScript charting widgets expect.

Files that USE this module:
- eurofx.app (console views)
- tests.test_formatter (unit tests)

Files that this module USES:
- eurofx.domain.models (Conversion, SeriesPoint)
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from eurofx.domain.models import Conversion, SeriesPoint


def format_rate(rate: float, decimals: int = 4) -> str:
    return f"{rate:.{decimals}f}"


def format_currency_options(
    options: Iterable[tuple[str, float]],
    base_currency: str = "EUR",
    decimals: int = 4,
) -> str:
    """
    Format the latest (code, rate) pairs as selector lines.
    
    Args:
        options: (code, rate) pairs in feed order
        base_currency: Base currency label for the header
        decimals: Number of decimal places (default: 4)
        
    Returns:
        One line per currency, e.g. 'USD  1.1500'
    """
    lines = [f"Rates per 1 {base_currency}:"]
    for code, rate in options:
        lines.append(f"{code}  {format_rate(rate, decimals)}")
    return "\n".join(lines)


def format_conversion(
    conversion: Optional[Conversion],
    from_code: str,
    to_code: str,
) -> str:
    """
    Format a conversion as '100 USD = 75.652 GBP'.
    
    A missing conversion (no amount typed) renders as an empty string.
    """
    if conversion is None:
        return ""
    amount = f"{conversion.amount:g}"
    return (
        f"{amount} {from_code.upper()} = "
        f"{conversion.display:.{conversion.decimals}f} {to_code.upper()}"
    )


def _fmt_day(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")


def format_series(points: Optional[Sequence[SeriesPoint]], currency_code: str) -> str:
    """
    Format a chart series as a plain text table, oldest first.
    
    Returns:
        Header plus one 'date  value' line per point, or an N/A line
    """
    if not points:
        return f"{currency_code}: N/A"

    values = [p.value for p in points]
    lines = [
        f"{currency_code} ({len(points)} days, min {min(values):.4f}, max {max(values):.4f})"
    ]
    for point in points:
        lines.append(f"{_fmt_day(point.timestamp)}  {point.value:.4f}")
    return "\n".join(lines)


def series_to_xy(points: Iterable[SeriesPoint]) -> list[dict[str, float]]:
    """Shape points as [{'x': timestamp, 'y': value}] for charting widgets."""
    return [{"x": p.timestamp, "y": p.value} for p in points]


def format_alert(text: str, with_time: bool = False) -> str:
    """
    Format a user notification line.
    
    Args:
        text: Alert text
        with_time: Whether to append the current UTC time (default: False)
    """
    msg = f"[OK] {text}"
    if with_time:
        now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        msg = f"{msg} ({now})"
    return msg
