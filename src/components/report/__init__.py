"""
Report component - formats derived people values for the console.
"""

from .component import build_report_lines, run_report
from .models import ReportInput, ReportOutput
from .ports import TextStreamPort

__all__ = [
    # Entry points
    "build_report_lines",
    "run_report",
    # Models
    "ReportInput",
    "ReportOutput",
    # Ports
    "TextStreamPort",
]
