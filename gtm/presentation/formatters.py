"""
Formatters — Duration and percentage strings for reports

Two duration styles:
- compact: "1h30m", "45s", "0s" (prompt friendly)
- long:    "1 hour 30 minutes" (human friendly)
"""

from typing import List, Tuple


def _split(seconds: int) -> Tuple[int, int, int]:
    if seconds < 0:
        raise ValueError(f"Negative duration: {seconds}")
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return hours, minutes, secs


def format_duration(seconds: int) -> str:
    """
    Compact duration, zero parts omitted.

    Examples:
        format_duration(5400) -> "1h30m"
        format_duration(61)   -> "1m1s"
        format_duration(0)    -> "0s"
    """
    hours, minutes, secs = _split(seconds)
    out = ""
    if hours:
        out += f"{hours}h"
    if minutes:
        out += f"{minutes}m"
    if secs or not out:
        out += f"{secs}s"
    return out


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_duration_long(seconds: int) -> str:
    """
    Verbose duration, zero parts omitted.

    Examples:
        format_duration_long(5400) -> "1 hour 30 minutes"
        format_duration_long(3601) -> "1 hour 1 second"
        format_duration_long(0)    -> "0 seconds"
    """
    hours, minutes, secs = _split(seconds)
    parts: List[str] = []
    if hours:
        parts.append(_plural(hours, "hour"))
    if minutes:
        parts.append(_plural(minutes, "minute"))
    if secs or not parts:
        parts.append(_plural(secs, "second"))
    return " ".join(parts)


def format_percent(part: int, total: int) -> str:
    """Share of total as a one-decimal percentage ("33.3%")."""
    if total <= 0:
        return "0.0%"
    return f"{part / total * 100:.1f}%"
