import logging
import random
from typing import Dict, List, Optional, Sequence

from weekroster.constraint_violations import ScheduleViolationDetector
from weekroster.engine import AssignmentEngine, BACKFILL, FALLBACK, PREFERRED
from weekroster.grid import WeekGrid
from weekroster.models import (
    CONCRETE_SHIFTS,
    DAY_NAMES,
    DAYS_IN_WEEK,
    Employee,
    EmployeeTotal,
    ScheduleResult,
    SchedulingConfig,
    StaffingGap,
    shift_label,
)
from weekroster.utils import week_dates

logger = logging.getLogger(__name__)


def solve_week(
    employees: Sequence[Employee],
    config: Optional[SchedulingConfig] = None,
    rng: Optional[random.Random] = None,
) -> ScheduleResult:
    """Schedule a week for the given employees and package the outcome.

    Works on copies of the employee records with fresh counters, so the
    caller's objects are left as they were.
    """
    config = config or SchedulingConfig()
    roster = [e.model_copy(update={"assigned_days": 0}, deep=True) for e in employees]

    engine = AssignmentEngine(config, rng=rng)
    grid = engine.schedule(roster)

    detector = ScheduleViolationDetector(config)
    violations = detector.detect_violations(grid)
    understaffed = extract_understaffed(grid, config)

    if detector.has_critical(violations):
        success = False
        message = "Schedule breaks roster invariants"
        logger.error("%s: %s", message, [v.description for v in violations if v.severity == "CRITICAL"])
    elif understaffed:
        success = True
        message = f"Scheduled with {len(understaffed)} understaffed shifts"
    else:
        success = True
        message = "Scheduled successfully"

    return ScheduleResult(
        success=success,
        message=message,
        schedule=extract_schedule(grid),
        totals=extract_totals(grid),
        understaffed=understaffed,
        summary=calculate_summary_stats(grid, config),
        dates=extract_dates(config),
        violations=[v.to_dict() for v in violations],
    )


def extract_schedule(grid: WeekGrid) -> Dict[str, Dict[str, List[str]]]:
    """Day name -> shift label -> occupant names in placement order."""
    schedule = {}
    for day in range(DAYS_IN_WEEK):
        schedule[DAY_NAMES[day]] = {
            shift_label(shift): grid.occupant_names(day, shift) for shift in CONCRETE_SHIFTS
        }
    return schedule


def extract_totals(grid: WeekGrid) -> List[EmployeeTotal]:
    """Final day counts for everyone placed at least once, sorted by name."""
    totals = [
        EmployeeTotal(index=idx, name=grid.roster[idx].name, assigned_days=grid.roster[idx].assigned_days)
        for idx in grid.placed_employees()
    ]
    return sorted(totals, key=lambda t: t.name)


def extract_understaffed(grid: WeekGrid, config: SchedulingConfig) -> List[StaffingGap]:
    return [
        StaffingGap(day=DAY_NAMES[day], shift=shift, staffed=size, required=config.min_staff_per_shift)
        for day, shift, size in grid.understaffed(config.min_staff_per_shift)
    ]


def extract_dates(config: SchedulingConfig):
    if config.week_start is None:
        return {}
    return dict(zip(DAY_NAMES, week_dates(config.week_start)))


def calculate_summary_stats(grid: WeekGrid, config: SchedulingConfig) -> dict:
    """Placement counts per pass plus coverage figures."""
    summary = {
        "employees": len(grid.roster),
        "placed_employees": len(grid.placed_employees()),
        "total_placements": grid.total_placements(),
        "placements_by_pass": {
            source: grid.placement_counts.get(source, 0) for source in (PREFERRED, FALLBACK, BACKFILL)
        },
    }

    capacity = len(grid.roster) * config.max_days_per_employee
    summary["utilization_rate"] = float(summary["total_placements"] / capacity) if capacity > 0 else 0.0

    required = DAYS_IN_WEEK * len(CONCRETE_SHIFTS)
    summary["fully_staffed_shifts"] = required - len(grid.understaffed(config.min_staff_per_shift))
    return summary
