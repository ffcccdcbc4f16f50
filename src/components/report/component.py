"""
Report component - console output of the derived people values.

Lines, in order: host platform, ids, ages, avatar URLs.
"""

from __future__ import annotations

from .models import ReportInput, ReportOutput
from .ports import TextStreamPort


def build_report_lines(inp: ReportInput) -> tuple[str, ...]:
    """Format the report without writing it."""
    return (
        f"{inp.prefix}running on: {inp.platform}",
        f"{inp.prefix}people ids: {list(inp.ids)!r}",
        f"{inp.prefix}people ages: {list(inp.ages)!r}",
        f"{inp.prefix}people avatar: {list(inp.avatars)!r}",
    )


def run_report(inp: ReportInput, *, stream: TextStreamPort) -> ReportOutput:
    """
    Write the report to a text stream.

    Args:
        inp: Values to report.
        stream: Destination stream.

    Returns:
        ReportOutput with the lines written.
    """
    lines = build_report_lines(inp)
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
    return ReportOutput(lines=lines)
