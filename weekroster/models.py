from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict
import datetime as dt
import logging
from enum import Enum

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

class ShiftKind(str, Enum):
    MORNING = "M"
    AFTERNOON = "A"
    EVENING = "E"
    NONE = "-"         # no preference, never a placement target

    @classmethod
    def _missing_(cls, value):
        # Accept member names and labels ("morning", "Evening") as well as codes
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.name.lower(), SHIFT_DEFINITIONS[member]["label"].lower()):
                    return member
        return None

# Slot index and display label per shift
SHIFT_DEFINITIONS = {
    ShiftKind.MORNING: {"index": 0, "label": "Morning"},
    ShiftKind.AFTERNOON: {"index": 1, "label": "Afternoon"},
    ShiftKind.EVENING: {"index": 2, "label": "Evening"},
    ShiftKind.NONE: {"index": None, "label": "None"},
}

CONCRETE_SHIFTS = [ShiftKind.MORNING, ShiftKind.AFTERNOON, ShiftKind.EVENING]
DEFAULT_RANKING = list(CONCRETE_SHIFTS)


def shift_index(shift: ShiftKind) -> int:
    index = SHIFT_DEFINITIONS[shift]["index"]
    if index is None:
        raise ValueError(f"{shift!r} has no shift slot")
    return index


def shift_label(shift: ShiftKind) -> str:
    return SHIFT_DEFINITIONS[shift]["label"]


class Employee(BaseModel):
    name: str
    preferred_per_day: List[ShiftKind] = Field(
        default_factory=lambda: [ShiftKind.NONE] * DAYS_IN_WEEK,
        min_length=DAYS_IN_WEEK,
        max_length=DAYS_IN_WEEK,
    )  # index 0 = Sunday
    ranking: List[ShiftKind] = Field(default_factory=lambda: list(DEFAULT_RANKING))
    assigned_days: int = Field(0, ge=0)

    @field_validator("ranking", mode="before")
    @classmethod
    def fallback_to_default_ranking(cls, value):
        """Replace a malformed ranking with Morning, Afternoon, Evening.

        A usable ranking names each of the three concrete shifts exactly once.
        Anything else (wrong length, repeats, the no-preference marker, text
        that is not a shift) is swapped for the default instead of failing.
        """
        try:
            shifts = [ShiftKind(v) for v in value]
        except (TypeError, ValueError):
            shifts = []
        if len(shifts) != 3 or set(shifts) != set(CONCRETE_SHIFTS):
            logger.warning("Invalid ranking %r, using default ranking", value)
            return list(DEFAULT_RANKING)
        return shifts


class SchedulingConfig(BaseModel):
    max_days_per_employee: int = Field(5, ge=0, le=DAYS_IN_WEEK)
    min_staff_per_shift: int = Field(2, ge=0)

    # Date of day 0 (Sunday); only used to label output
    week_start: Optional[dt.date] = None

    # Seed for the backfill random source (None = nondeterministic)
    seed: Optional[int] = None


class EmployeeTotal(BaseModel):
    index: int            # position in the submitted roster
    name: str
    assigned_days: int


class StaffingGap(BaseModel):
    day: str
    shift: ShiftKind
    staffed: int
    required: int


class ScheduleResult(BaseModel):
    success: bool
    message: str
    schedule: Dict[str, Dict[str, List[str]]]  # day name -> shift label -> names in placement order
    totals: List[EmployeeTotal]  # placed employees only, sorted by name
    understaffed: List[StaffingGap] = []
    summary: dict = {}  # placement counts per pass and utilization
    dates: Dict[str, dt.date] = {}  # day name -> calendar date when week_start is set
    violations: List[Dict[str, str]] = []
