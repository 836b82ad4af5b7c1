from typing import List
from weekroster.models import Employee, ShiftKind

M = ShiftKind.MORNING
A = ShiftKind.AFTERNOON
E = ShiftKind.EVENING
NO = ShiftKind.NONE

def sample_employees() -> List[Employee]:
    """Fixed eight-person roster used by the demo and the API sample endpoint."""
    return [
        Employee(name="Alan", preferred_per_day=[M] * 7, ranking=[M, A, E]),
        Employee(name="Bob", preferred_per_day=[A] * 7, ranking=[A, E, M]),
        Employee(name="Carol", preferred_per_day=[E, E, E, E, E, M, M], ranking=[E, M, A]),
        Employee(name="Dan", preferred_per_day=[M, A, E, M, A, E, M]),
        Employee(name="Eve", preferred_per_day=[A, A, M, M, E, A, E]),
        Employee(name="Frank", preferred_per_day=[M] * 7),
        Employee(name="Grace", preferred_per_day=[E] * 7),
        Employee(name="Heidi", preferred_per_day=[NO, A, A, A, NO, M, M]),
    ]
