"""
The week being built: 7 days x 3 shift slots of employee indices.
"""

from typing import Dict, List, Sequence, Set, Tuple

from weekroster.models import (
    CONCRETE_SHIFTS,
    DAYS_IN_WEEK,
    Employee,
    ShiftKind,
    shift_index,
)


class WeekGrid:
    """Schedule grid that owns every write to the roster's day counters.

    Slots keep insertion order for display. An employee is identified by
    their position in the roster since names need not be unique.
    """

    def __init__(self, roster: Sequence[Employee]):
        for employee in roster:
            if employee.assigned_days != 0:
                raise ValueError(
                    f"{employee.name} already has {employee.assigned_days} assigned days; "
                    "a new week must start with empty counters"
                )
        self.roster = roster
        self.slots: List[List[List[int]]] = [
            [[] for _ in CONCRETE_SHIFTS] for _ in range(DAYS_IN_WEEK)
        ]
        # Mirror of the slots for per-day membership lookups
        self._on_day: List[Set[int]] = [set() for _ in range(DAYS_IN_WEEK)]
        self.placement_counts: Dict[str, int] = {}

    def is_assigned(self, emp_idx: int, day: int) -> bool:
        """True if the employee holds any of the three slots on this day."""
        return emp_idx in self._on_day[day]

    def place(self, emp_idx: int, day: int, shift: ShiftKind, source: str = "manual") -> None:
        if self.is_assigned(emp_idx, day):
            raise ValueError(f"Employee {emp_idx} is already assigned on day {day}")
        self.slots[day][shift_index(shift)].append(emp_idx)
        self._on_day[day].add(emp_idx)
        self.roster[emp_idx].assigned_days += 1
        self.placement_counts[source] = self.placement_counts.get(source, 0) + 1

    def occupants(self, day: int, shift: ShiftKind) -> List[int]:
        return list(self.slots[day][shift_index(shift)])

    def occupant_names(self, day: int, shift: ShiftKind) -> List[str]:
        return [self.roster[i].name for i in self.slots[day][shift_index(shift)]]

    def slot_size(self, day: int, shift: ShiftKind) -> int:
        return len(self.slots[day][shift_index(shift)])

    def shift_on(self, emp_idx: int, day: int):
        """Shift the employee works on this day, or ShiftKind.NONE."""
        for shift in CONCRETE_SHIFTS:
            if emp_idx in self.slots[day][shift_index(shift)]:
                return shift
        return ShiftKind.NONE

    def count_for(self, emp_idx: int) -> int:
        """Number of slots across the week holding this employee."""
        return sum(
            day_slots[s].count(emp_idx)
            for day_slots in self.slots
            for s in range(len(CONCRETE_SHIFTS))
        )

    def placed_employees(self) -> List[int]:
        """Indices of everyone holding at least one slot, in roster order."""
        placed = set()
        for members in self._on_day:
            placed |= members
        return sorted(placed)

    def understaffed(self, minimum: int) -> List[Tuple[int, ShiftKind, int]]:
        gaps = []
        for day in range(DAYS_IN_WEEK):
            for shift in CONCRETE_SHIFTS:
                size = self.slot_size(day, shift)
                if size < minimum:
                    gaps.append((day, shift, size))
        return gaps

    def total_placements(self) -> int:
        return sum(len(slot) for day_slots in self.slots for slot in day_slots)

    def snapshot(self) -> List[List[List[int]]]:
        """Deep copy of the slot contents."""
        return [[list(slot) for slot in day_slots] for day_slots in self.slots]
