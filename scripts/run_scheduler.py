#!/usr/bin/env python3
"""
Console scheduler: sample roster or typed-in employees, printed as a table.
"""

import logging
import sys
import os

# Ensure repository root on sys.path BEFORE importing local packages
repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from weekroster.engine import AssignmentEngine
from weekroster.intake import prompt_employees
from weekroster.output_formatter import format_schedule_text
from weekroster.sample_data import sample_employees

def main():
    if "--verbose" in sys.argv[1:]:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')

    print("Employee Scheduler - Python console\n")
    choice = input("Use sample data? (y/n): ")
    if choice.strip().lower() == "y":
        employees = sample_employees()
    else:
        employees = prompt_employees()

    grid = AssignmentEngine().schedule(employees)
    print(format_schedule_text(grid))
    print("\nDone.")

if __name__ == "__main__":
    main()
