"""
Three-pass greedy assignment of a roster onto a WeekGrid.

Pass A places everyone on their preferred shift, Pass B falls back to the
personal ranking (same day, then the next day) and Pass C drafts random
available employees until each slot reaches the staffing minimum.
"""

import logging
import random
from typing import List, Optional, Sequence

from weekroster.grid import WeekGrid
from weekroster.models import (
    CONCRETE_SHIFTS,
    DAY_NAMES,
    DAYS_IN_WEEK,
    Employee,
    SchedulingConfig,
    ShiftKind,
    shift_label,
)

logger = logging.getLogger(__name__)

PREFERRED = "preferred"
FALLBACK = "fallback"
BACKFILL = "backfill"


class AssignmentEngine:
    """Runs the three passes in order over a single roster.

    The engine holds no schedule state between runs; its only state is the
    config and the random source used by the backfill pass. Tests pass a
    seeded ``random.Random`` to make backfill picks reproducible.
    """

    def __init__(self, config: Optional[SchedulingConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or SchedulingConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

    @property
    def max_days(self) -> int:
        return self.config.max_days_per_employee

    def schedule(self, roster: Sequence[Employee]) -> WeekGrid:
        grid = WeekGrid(roster)
        self.assign_preferred(grid)
        self.resolve_fallbacks(grid)
        self.backfill_minimum_staffing(grid)
        return grid

    def assign_preferred(self, grid: WeekGrid) -> int:
        """Pass A: put each employee on their preferred shift, day by day."""
        placed = 0
        for idx, employee in enumerate(grid.roster):
            for day in range(DAYS_IN_WEEK):
                if employee.assigned_days >= self.max_days:
                    break
                preferred = employee.preferred_per_day[day]
                if preferred is ShiftKind.NONE:
                    continue
                if not grid.is_assigned(idx, day):
                    grid.place(idx, day, preferred, source=PREFERRED)
                    placed += 1
        logger.debug("Preferred pass placed %d employees", placed)
        return placed

    def resolve_fallbacks(self, grid: WeekGrid) -> int:
        """Pass B: place still-unassigned preference days using the ranking.

        Tries the same day first, then a single attempt on the following day.
        With Pass A as written every non-None preference is already honoured,
        so this only acts if the grid was populated some other way.
        """
        placed = 0
        for idx, employee in enumerate(grid.roster):
            for day in range(DAYS_IN_WEEK):
                if employee.assigned_days >= self.max_days:
                    break
                if employee.preferred_per_day[day] is ShiftKind.NONE:
                    continue
                if grid.is_assigned(idx, day):
                    continue
                placed += self._place_by_ranking(grid, idx, day)
                if not grid.is_assigned(idx, day) and day + 1 < DAYS_IN_WEEK:
                    placed += self._place_by_ranking(grid, idx, day + 1)
        logger.debug("Fallback pass placed %d employees", placed)
        return placed

    def _place_by_ranking(self, grid: WeekGrid, idx: int, day: int) -> int:
        # Crowding is ignored: the first ranked shift wins whenever the day is free
        employee = grid.roster[idx]
        for shift in employee.ranking:
            if employee.assigned_days >= self.max_days:
                break
            if not grid.is_assigned(idx, day):
                grid.place(idx, day, shift, source=FALLBACK)
                return 1
        return 0

    def candidate_pool(self, grid: WeekGrid, day: int) -> List[int]:
        """Employees under the day cap who are free on this day."""
        return [
            idx for idx, employee in enumerate(grid.roster)
            if employee.assigned_days < self.max_days and not grid.is_assigned(idx, day)
        ]

    def backfill_minimum_staffing(self, grid: WeekGrid) -> int:
        """Pass C: draft random free employees until each slot meets the minimum.

        Preferences and rankings are not consulted. The pool is rebuilt
        before every pick; an empty pool leaves the slot understaffed.
        """
        minimum = self.config.min_staff_per_shift
        placed = 0
        for day in range(DAYS_IN_WEEK):
            for shift in CONCRETE_SHIFTS:
                while grid.slot_size(day, shift) < minimum:
                    pool = self.candidate_pool(grid, day)
                    if not pool:
                        logger.info(
                            "No available employees for %s %s, leaving %d of %d",
                            DAY_NAMES[day], shift_label(shift), grid.slot_size(day, shift), minimum,
                        )
                        break
                    grid.place(self.rng.choice(pool), day, shift, source=BACKFILL)
                    placed += 1
        logger.debug("Backfill pass placed %d employees", placed)
        return placed
