"""
Post-run checks on a finished week.

Breaches of the day cap, double bookings and counter drift are reported as
CRITICAL; slots left under the staffing minimum are reported as LOW since an
exhausted backfill pool is an accepted outcome.
"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from weekroster.grid import WeekGrid
from weekroster.models import (
    CONCRETE_SHIFTS,
    DAY_NAMES,
    DAYS_IN_WEEK,
    SchedulingConfig,
    ShiftKind,
    shift_label,
)


class ViolationType(str, Enum):
    """Kinds of problems found in a finished week."""
    MAX_DAYS = "max_days"                  # more working days than the cap
    DOUBLE_BOOKED = "double_booked"        # two slots on one day
    COUNTER_MISMATCH = "counter_mismatch"  # assigned_days differs from grid count
    UNDERSTAFFED = "understaffed"          # slot below the staffing minimum


@dataclass
class ConstraintViolation:
    """Details of a specific violation."""
    violation_type: ViolationType
    description: str
    severity: str  # "CRITICAL" or "LOW"
    current_value: int
    limit_value: int
    employee_index: Optional[int] = None
    employee_name: Optional[str] = None
    affected_slots: List[Tuple[int, ShiftKind]] = field(default_factory=list)  # (day, shift)

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.violation_type.value,
            "severity": self.severity,
            "employee": self.employee_name or "",
            "description": self.description,
        }


class ScheduleViolationDetector:
    """Checks a WeekGrid against the day cap, booking and staffing rules."""

    def __init__(self, config: Optional[SchedulingConfig] = None):
        self.config = config or SchedulingConfig()

    def detect_violations(self, grid: WeekGrid) -> List[ConstraintViolation]:
        violations = []
        violations.extend(self._check_max_days(grid))
        violations.extend(self._check_double_booking(grid))
        violations.extend(self._check_counters(grid))
        violations.extend(self._check_staffing(grid))
        return sorted(violations, key=lambda v: v.severity)

    def has_critical(self, violations: List[ConstraintViolation]) -> bool:
        return any(v.severity == "CRITICAL" for v in violations)

    def _check_max_days(self, grid: WeekGrid) -> List[ConstraintViolation]:
        violations = []
        limit = self.config.max_days_per_employee
        for idx, employee in enumerate(grid.roster):
            if employee.assigned_days > limit:
                violations.append(ConstraintViolation(
                    violation_type=ViolationType.MAX_DAYS,
                    description=f"{employee.name} works {employee.assigned_days} days (max: {limit})",
                    severity="CRITICAL",
                    current_value=employee.assigned_days,
                    limit_value=limit,
                    employee_index=idx,
                    employee_name=employee.name,
                ))
        return violations

    def _check_double_booking(self, grid: WeekGrid) -> List[ConstraintViolation]:
        violations = []
        for idx, employee in enumerate(grid.roster):
            for day in range(DAYS_IN_WEEK):
                slots = [
                    (day, shift)
                    for shift in CONCRETE_SHIFTS
                    for _ in range(grid.occupants(day, shift).count(idx))
                ]
                if len(slots) > 1:
                    violations.append(ConstraintViolation(
                        violation_type=ViolationType.DOUBLE_BOOKED,
                        description=f"{employee.name} holds {len(slots)} slots on {DAY_NAMES[day]}",
                        severity="CRITICAL",
                        current_value=len(slots),
                        limit_value=1,
                        employee_index=idx,
                        employee_name=employee.name,
                        affected_slots=slots,
                    ))
        return violations

    def _check_counters(self, grid: WeekGrid) -> List[ConstraintViolation]:
        violations = []
        for idx, employee in enumerate(grid.roster):
            in_grid = grid.count_for(idx)
            if in_grid != employee.assigned_days:
                violations.append(ConstraintViolation(
                    violation_type=ViolationType.COUNTER_MISMATCH,
                    description=(
                        f"{employee.name} has assigned_days={employee.assigned_days} "
                        f"but appears in {in_grid} slots"
                    ),
                    severity="CRITICAL",
                    current_value=employee.assigned_days,
                    limit_value=in_grid,
                    employee_index=idx,
                    employee_name=employee.name,
                ))
        return violations

    def _check_staffing(self, grid: WeekGrid) -> List[ConstraintViolation]:
        minimum = self.config.min_staff_per_shift
        return [
            ConstraintViolation(
                violation_type=ViolationType.UNDERSTAFFED,
                description=f"{DAY_NAMES[day]} {shift_label(shift)} has {size} of {minimum} staff",
                severity="LOW",
                current_value=size,
                limit_value=minimum,
                affected_slots=[(day, shift)],
            )
            for day, shift, size in grid.understaffed(minimum)
        ]
