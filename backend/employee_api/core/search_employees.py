"""Name Search: pure case-insensitive substring filter.

Invariants:
    - Order of the input is preserved
    - An empty query matches every employee (plain substring containment)
"""

from typing import Sequence, TypeVar

from employee_api.core.gateway_protocols import EmployeeLike

E = TypeVar("E", bound=EmployeeLike)


def filter_by_name(employees: Sequence[E], query: str) -> list[E]:
    """Keep employees whose name contains query, ignoring case."""
    needle = query.lower()
    return [e for e in employees if needle in (e.name or "").lower()]
