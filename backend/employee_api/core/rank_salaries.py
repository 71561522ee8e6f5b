"""Salary Ranking: pure top-N selection over upstream employee records.

Invariants:
    - top_n_by_salary is PURE: never mutates or reorders its input
    - Result is sorted by salary descending, length min(n, len(employees))
    - n <= 0 or employees is None -> empty list
    - Any unparsable salary raises DataIntegrityError; no partial result is returned
    - Tie order among equal salaries is whatever the heap produces (currently
      later-encountered first, and evictions drop earlier-encountered); callers
      must not rely on it

Design Decisions:
    - Bounded min-heap (heapq) capped at n: O(len * log n), evict minimum on overflow,
      drain ascending then reverse
    - Heap entries are (salary, seq, employee): seq keeps heapq from ever comparing
      employee objects
"""

import heapq
from typing import Sequence, TypeVar

from employee_api.core.domain_types import parse_integer
from employee_api.core.errors import DataIntegrityError, ErrorContext
from employee_api.core.gateway_protocols import EmployeeLike

E = TypeVar("E", bound=EmployeeLike)


def parse_salary(employee: EmployeeLike) -> int:
    """Parse an employee's salary string as an integer or raise DataIntegrityError."""
    raw = employee.salary
    salary = parse_integer(raw)
    if salary is None:
        raise DataIntegrityError(
            f"Salary {raw!r} for employee '{employee.id}' is not an integer",
            "salary",
            ErrorContext(employee_id=str(employee.id)),
        )
    return salary


def top_n_by_salary(n: int, employees: Sequence[E] | None) -> list[E]:
    """Return the n highest-paid employees, salary descending."""
    if n <= 0 or employees is None:
        return []

    heap: list[tuple[int, int, E]] = []
    for seq, employee in enumerate(employees):
        entry = (parse_salary(employee), seq, employee)
        if len(heap) < n:
            heapq.heappush(heap, entry)
        else:
            heapq.heappushpop(heap, entry)

    ranked = [heapq.heappop(heap)[2] for _ in range(len(heap))]
    ranked.reverse()
    return ranked
