from pathlib import Path

import pytest
from pydantic import ValidationError

from weekroster.intake import (
    RosterFileError,
    load_roster_file,
    parse_ranking,
    parse_shift,
    prompt_employees,
)
from weekroster.models import DEFAULT_RANKING, ShiftKind

M = ShiftKind.MORNING
A = ShiftKind.AFTERNOON
E = ShiftKind.EVENING
NO = ShiftKind.NONE


@pytest.mark.parametrize("text,expected", [
    ("m", M),
    ("  Morning ", M),
    ("AFTERNOON", A),
    ("eve", E),
    ("-", NO),
    ("", NO),
    ("night", NO),
    (None, NO),
])
def test_parse_shift(text, expected):
    assert parse_shift(text) is expected


def test_parse_ranking():
    assert parse_ranking("morning,evening,afternoon") == [M, E, A]
    assert parse_ranking(" e , a , m ") == [E, A, M]
    assert parse_ranking("morning,evening") == DEFAULT_RANKING
    assert parse_ranking("") == DEFAULT_RANKING


def scripted(answers):
    it = iter(answers)
    return lambda prompt="": next(it)


def test_prompt_employees():
    output = []
    answers = [
        "2",
        "Alan", "m", "m", "m", "m", "m", "m", "m", "morning,afternoon,evening",
        "Heidi", "-", "a", "a", "a", "", "m", "m", "evening,evening,morning",
    ]
    employees = prompt_employees(read=scripted(answers), write=output.append)

    assert [e.name for e in employees] == ["Alan", "Heidi"]
    assert employees[0].preferred_per_day == [M] * 7
    assert employees[1].preferred_per_day == [NO, A, A, A, NO, M, M]
    # Repeated shift in the ranking falls back to the default order
    assert employees[1].ranking == DEFAULT_RANKING
    assert len(output) == 4


def test_prompt_employees_bad_count():
    assert prompt_employees(read=scripted(["many"]), write=lambda *a: None) == []


def test_load_roster_file(tmp_path):
    path = tmp_path / "roster.yml"
    path.write_text(
        "config:\n"
        "  min_staff_per_shift: 1\n"
        "  week_start: 2026-10-18\n"
        "employees:\n"
        "  - name: Carol\n"
        "    preferences: \"E,E,E,E,E,M,M\"\n"
        "    ranking: [evening, morning, afternoon]\n"
        "  - name: Heidi\n"
        "    preferences: [a, a]\n"
    )
    config, employees = load_roster_file(path)

    assert config.min_staff_per_shift == 1
    assert config.week_start.isoformat() == "2026-10-18"
    assert employees[0].ranking == [E, M, A]
    assert employees[0].preferred_per_day == [E] * 5 + [M, M]
    assert employees[1].preferred_per_day == [A, A] + [NO] * 5
    assert employees[1].ranking == DEFAULT_RANKING


def test_sample_roster_file_loads():
    config, employees = load_roster_file(Path(__file__).resolve().parent.parent / "data" / "sample_roster.yml")
    assert len(employees) == 8
    assert config.seed == 7
    assert employees[7].preferred_per_day == [NO, A, A, A, NO, M, M]


@pytest.mark.parametrize("content", [
    "- just\n- a list\n",
    "config: {}\n",
    "employees:\n  - preferences: M\n",
    "employees:\n  - name: Alan\n    preferences: 5\n",
    "employees:\n  - name: Alan\n    ranking: 3\n",
    "employees: [\n",
])
def test_load_roster_file_rejects_bad_layout(tmp_path, content):
    path = tmp_path / "bad.yml"
    path.write_text(content)
    with pytest.raises(RosterFileError):
        load_roster_file(path)


def test_load_roster_file_rejects_bad_config(tmp_path):
    path = tmp_path / "bad_config.yml"
    path.write_text("config:\n  max_days_per_employee: 9\nemployees: []\n")
    with pytest.raises(ValidationError):
        load_roster_file(path)
