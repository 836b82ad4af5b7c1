import datetime as dt

import pytest
from pydantic import ValidationError

from weekroster.models import (
    DEFAULT_RANKING,
    Employee,
    SchedulingConfig,
    ShiftKind,
    shift_index,
    shift_label,
)

M = ShiftKind.MORNING
A = ShiftKind.AFTERNOON
E = ShiftKind.EVENING
NO = ShiftKind.NONE


def test_employee_defaults():
    emp = Employee(name="Alan")
    assert emp.preferred_per_day == [NO] * 7
    assert emp.ranking == [M, A, E]
    assert emp.assigned_days == 0


def test_shift_kind_accepts_names_and_labels():
    assert ShiftKind("M") is M
    assert ShiftKind("morning") is M
    assert ShiftKind("Evening") is E
    assert ShiftKind("-") is NO
    with pytest.raises(ValueError):
        ShiftKind("night")


def test_shift_slots():
    assert [shift_index(s) for s in (M, A, E)] == [0, 1, 2]
    assert shift_label(A) == "Afternoon"
    with pytest.raises(ValueError):
        shift_index(NO)


def test_ranking_keeps_valid_order():
    emp = Employee(name="Carol", ranking=["evening", "M", A])
    assert emp.ranking == [E, M, A]


@pytest.mark.parametrize("ranking", [
    [M, M, A],
    [NO, M, A],
    [M, A],
    [M, A, E, M],
    ["x", "y", "z"],
    None,
])
def test_malformed_ranking_falls_back_to_default(ranking):
    emp = Employee(name="Dan", ranking=ranking)
    assert emp.ranking == DEFAULT_RANKING


def test_preferences_must_cover_the_week():
    with pytest.raises(ValidationError):
        Employee(name="Eve", preferred_per_day=[M] * 6)
    with pytest.raises(ValidationError):
        Employee(name="Eve", preferred_per_day=[M] * 8)


def test_config_defaults_and_bounds():
    cfg = SchedulingConfig()
    assert cfg.max_days_per_employee == 5
    assert cfg.min_staff_per_shift == 2
    assert cfg.week_start is None
    assert SchedulingConfig(week_start="2026-10-18").week_start == dt.date(2026, 10, 18)
    with pytest.raises(ValidationError):
        SchedulingConfig(max_days_per_employee=8)
