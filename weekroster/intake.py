"""
Building employee records from text: console prompts and YAML roster files.
"""

from pathlib import Path
from typing import Callable, List, Tuple, Union

import yaml

from weekroster.models import (
    DAY_NAMES,
    DAYS_IN_WEEK,
    DEFAULT_RANKING,
    Employee,
    SchedulingConfig,
    ShiftKind,
)


class RosterFileError(ValueError):
    """Raised when a roster file does not have the expected layout."""


def parse_shift(text) -> ShiftKind:
    """Map free-form text to a shift by its first letter; anything else is no preference."""
    s = str(text or "").strip().lower()
    if s.startswith("m"):
        return ShiftKind.MORNING
    if s.startswith("a"):
        return ShiftKind.AFTERNOON
    if s.startswith("e"):
        return ShiftKind.EVENING
    return ShiftKind.NONE


def parse_ranking(text: str) -> List[ShiftKind]:
    """Parse "morning,evening,afternoon" style input.

    Input without exactly three comma-separated parts keeps the default
    ranking. Three parts that are not distinct shifts are handed to the
    Employee model, which falls back to the default as well.
    """
    parts = [parse_shift(p) for p in (text or "").split(",")]
    if len(parts) != 3:
        return list(DEFAULT_RANKING)
    return parts


def parse_count(text: str) -> int:
    try:
        return max(int((text or "").strip()), 0)
    except ValueError:
        return 0


def prompt_employees(read: Callable[[str], str] = input, write: Callable[..., None] = print) -> List[Employee]:
    """Ask for employees one by one on the console."""
    employees: List[Employee] = []
    n = parse_count(read("How many employees? "))
    for i in range(n):
        name = read(f"\nEmployee {i + 1} name: ").strip()
        write("Enter preferred shift for each day (m/a/e) or '-' for no preference.")
        preferences = [parse_shift(read(f"{DAY_NAMES[d]}: ")) for d in range(DAYS_IN_WEEK)]
        write("Enter global ranking as comma-separated from highest to lowest (example: morning,evening,afternoon):")
        ranking = parse_ranking(read(""))
        employees.append(Employee(name=name, preferred_per_day=preferences, ranking=ranking))
    return employees


def _employee_from_entry(entry: dict, position: int) -> Employee:
    if not isinstance(entry, dict) or "name" not in entry:
        raise RosterFileError(f"Employee entry {position} needs a 'name'")
    prefs = entry.get("preferences", [])
    if isinstance(prefs, str):
        prefs = prefs.split(",")
    elif not isinstance(prefs, list):
        raise RosterFileError(f"Employee entry {position}: 'preferences' must be a list or a comma-separated string")
    prefs = [parse_shift(p) for p in prefs]
    # Short preference lists are padded with no-preference days
    prefs = (prefs + [ShiftKind.NONE] * DAYS_IN_WEEK)[:DAYS_IN_WEEK]

    ranking = entry.get("ranking")
    if ranking is None:
        ranking = list(DEFAULT_RANKING)
    elif isinstance(ranking, str):
        ranking = parse_ranking(ranking)
    elif not isinstance(ranking, list):
        raise RosterFileError(f"Employee entry {position}: 'ranking' must be a list or a comma-separated string")
    else:
        ranking = parse_ranking(",".join(str(r) for r in ranking))

    return Employee(name=str(entry["name"]).strip(), preferred_per_day=prefs, ranking=ranking)


def load_roster_file(path: Union[str, Path]) -> Tuple[SchedulingConfig, List[Employee]]:
    """Read a YAML roster: an optional ``config`` mapping and an ``employees`` list."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RosterFileError(f"{path}: not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise RosterFileError(f"{path}: expected a mapping at the top level")
    entries = raw.get("employees")
    if not isinstance(entries, list):
        raise RosterFileError(f"{path}: expected an 'employees' list")

    config = SchedulingConfig.model_validate(raw.get("config") or {})
    employees = [_employee_from_entry(entry, i + 1) for i, entry in enumerate(entries)]
    return config, employees
