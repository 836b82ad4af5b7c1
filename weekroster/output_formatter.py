"""
Rendering of a finished week: console table, pandas frames, CSV and HTML.
"""

import datetime as dt
import html as html_lib
import os
from typing import Dict, List, Optional

import pandas as pd

from weekroster.grid import WeekGrid
from weekroster.models import (
    CONCRETE_SHIFTS,
    DAY_NAMES,
    DAYS_IN_WEEK,
    ScheduleResult,
    ShiftKind,
    shift_label,
)
from weekroster.utils import week_dates

# Cell colours for the HTML export
SHIFT_COLORS = {
    ShiftKind.MORNING: "#FFF4C2",    # Pale yellow
    ShiftKind.AFTERNOON: "#CDE8FF",  # Light blue
    ShiftKind.EVENING: "#E3D4F5",    # Lavender
}
UNDERSTAFFED_COLOR = "#FF9999"       # Red


def format_schedule_text(grid: WeekGrid) -> str:
    """Tab-separated day/shift table followed by per-employee totals."""
    lines = [
        "",
        "Final weekly schedule (Shift lists are 'Name1,Name2'):",
        "",
        "Day\tShift\tEmployees",
        "--------------------------------------",
    ]
    for day in range(DAYS_IN_WEEK):
        for shift in CONCRETE_SHIFTS:
            names = grid.occupant_names(day, shift)
            lines.append(f"{DAY_NAMES[day]}\t{shift.value}\t{','.join(names) if names else '-'}")

    lines.append("")
    lines.append("Employee totals (days assigned):")
    placed = sorted(grid.placed_employees(), key=lambda i: grid.roster[i].name)
    for idx in placed:
        employee = grid.roster[idx]
        lines.append(f"{employee.name}: {employee.assigned_days} days")
    return "\n".join(lines)


def _day_index(week_start: Optional[dt.date]) -> List[str]:
    if week_start is None:
        return list(DAY_NAMES)
    return [f"{name} {day.isoformat()}" for name, day in zip(DAY_NAMES, week_dates(week_start))]


def schedule_to_frame(result: ScheduleResult, week_start: Optional[dt.date] = None) -> pd.DataFrame:
    """One row per day, one column per shift, names joined by ', '."""
    rows = {}
    for day_name in DAY_NAMES:
        day_schedule = result.schedule.get(day_name, {})
        rows[day_name] = {
            shift_label(shift): ", ".join(day_schedule.get(shift_label(shift), []))
            for shift in CONCRETE_SHIFTS
        }
    df = pd.DataFrame(rows).T  # Transpose so days are rows
    df = df[[shift_label(s) for s in CONCRETE_SHIFTS]]
    df.index = _day_index(week_start)
    df.index.name = "Day"
    return df


def staffing_to_frame(result: ScheduleResult) -> pd.DataFrame:
    """Head count per day and shift."""
    counts = {
        day_name: {label: len(names) for label, names in result.schedule.get(day_name, {}).items()}
        for day_name in DAY_NAMES
    }
    df = pd.DataFrame(counts).T
    df.index.name = "Day"
    return df


def totals_to_frame(result: ScheduleResult) -> pd.DataFrame:
    """Placed employees and their day totals, sorted by name."""
    rows = [{"Employee": t.name, "Days": t.assigned_days} for t in result.totals]
    return pd.DataFrame(rows, columns=["Employee", "Days"])


def create_csv_schedule(result: ScheduleResult, week_start: Optional[dt.date] = None) -> str:
    """Schedule CSV with employee totals appended."""
    csv_content = schedule_to_frame(result, week_start).to_csv()
    csv_content += "\n\nEmployee Totals:\n" + totals_to_frame(result).to_csv(index=False)
    return csv_content


def create_html_schedule(result: ScheduleResult, week_start: Optional[dt.date] = None) -> str:
    """HTML table of the week with understaffed slots highlighted."""
    gaps = {(g.day, shift_label(g.shift)) for g in result.understaffed}
    frame = schedule_to_frame(result, week_start)

    html = "<table border='1' style='border-collapse: collapse;'>"
    html += "<tr><th>Day</th>"
    for shift in CONCRETE_SHIFTS:
        html += f"<th>{shift_label(shift)}</th>"
    html += "</tr>"

    for day_name, (label, row) in zip(DAY_NAMES, frame.iterrows()):
        html += f"<tr><td>{label}</td>"
        for shift in CONCRETE_SHIFTS:
            column = shift_label(shift)
            color = UNDERSTAFFED_COLOR if (day_name, column) in gaps else SHIFT_COLORS[shift]
            html += f"<td style='background-color: {color};'>{html_lib.escape(row[column]) or '-'}</td>"
        html += "</tr>"
    html += "</table>"

    html += "<br><h3>Employee Totals</h3>"
    html += totals_to_frame(result).to_html(index=False, escape=True)
    return html


def save_outputs(result: ScheduleResult, out_dir: str = "out", week_start: Optional[dt.date] = None) -> Dict[str, str]:
    """Write CSV and HTML versions of the week into out_dir."""
    os.makedirs(out_dir, exist_ok=True)
    paths = {
        "csv": os.path.join(out_dir, "schedule.csv"),
        "html": os.path.join(out_dir, "schedule.html"),
        "totals": os.path.join(out_dir, "totals.csv"),
    }

    with open(paths["csv"], "w") as f:
        f.write(create_csv_schedule(result, week_start))
    with open(paths["html"], "w") as f:
        f.write(create_html_schedule(result, week_start))
    totals_to_frame(result).to_csv(paths["totals"], index=False)

    return paths
