"""Console rendering for scan results."""

from __future__ import annotations

from .models import Availability, AvailabilityResult, ScanCounters

COLORS = {
    "green": "\033[92m",
    "red": "\033[91m",
    "yellow": "\033[93m",
    "reset": "\033[0m",
}

STATUS_COLORS = {
    Availability.AVAILABLE: "green",
    Availability.TAKEN: "red",
    Availability.ERROR: "yellow",
}


def colorize(text: str, color: str) -> str:
    return f"{COLORS[color]}{text}{COLORS['reset']}"


def describe_result(result: AvailabilityResult) -> str:
    """Plain-text line for one result."""
    if result.status is Availability.AVAILABLE:
        return f"{result.domain} is AVAILABLE!"
    if result.status is Availability.TAKEN:
        return f"{result.domain} is taken ({result.reason})"
    return f"Error checking {result.domain}: {result.reason}"


def render_result(result: AvailabilityResult, color: bool = True) -> str:
    text = describe_result(result)
    if not color:
        return text
    return colorize(text, STATUS_COLORS[result.status])


def format_progress(counters: ScanCounters, total: int) -> str:
    return (
        f"Progress: {counters.total_checked}/{total} checked, "
        f"{counters.available_count} available"
    )


def format_summary(counters: ScanCounters) -> str:
    return (
        f"Check complete! Found {counters.available_count} available domains "
        f"out of {counters.total_checked} checked."
    )
