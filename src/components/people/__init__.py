"""
People component - age and avatar derivation for person records.
"""

from ._impl import anniversary, completed_years
from .component import (
    get_person_age,
    get_person_avatar,
    run_derive,
)
from .models import DeriveInput, DeriveOutput
from .ports import TodayPort

__all__ = [
    # Entry points
    "get_person_age",
    "get_person_avatar",
    "run_derive",
    # Models
    "DeriveInput",
    "DeriveOutput",
    # Ports
    "TodayPort",
    # Functional core
    "anniversary",
    "completed_years",
]
