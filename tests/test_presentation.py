from domain_checker.models import Availability, AvailabilityResult, ScanCounters
from domain_checker.presentation import (
    COLORS,
    format_progress,
    format_summary,
    render_result,
)


def test_render_result_has_three_states() -> None:
    available = AvailabilityResult("a.io", Availability.AVAILABLE, "inactive")
    taken = AvailabilityResult("b.io", Availability.TAKEN, "active")
    error = AvailabilityResult("c.io", Availability.ERROR, "timeout")

    assert render_result(available, color=False) == "a.io is AVAILABLE!"
    assert render_result(taken, color=False) == "b.io is taken (active)"
    assert render_result(error, color=False) == "Error checking c.io: timeout"

    assert render_result(available).startswith(COLORS["green"])
    assert render_result(taken).startswith(COLORS["red"])
    assert render_result(error).startswith(COLORS["yellow"])
    assert render_result(error).endswith(COLORS["reset"])


def test_progress_and_summary_text() -> None:
    counters = ScanCounters(total_checked=10, available_count=2)
    assert format_progress(counters, 60) == "Progress: 10/60 checked, 2 available"
    assert format_summary(counters) == "Check complete! Found 2 available domains out of 10 checked."
