"""Boundary Protocols: contracts between core/services and the upstream shell.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - The upstream is reached only through EmployeeGateway
    - Implementations provided by the shell via FastAPI dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no base class
    - Async in Protocol: implementations do IO; the pure functions in core that
      consume the results are never async themselves
"""

from typing import Protocol, Sequence


class EmployeeLike(Protocol):
    """Structural contract for employee records handed to pure core functions."""
    @property
    def id(self) -> str: ...
    @property
    def name(self) -> str: ...
    @property
    def salary(self) -> str | None: ...


class CreateEmployeeLike(Protocol):
    """Structural contract for create-employee input."""
    name: str | None
    salary: str | None
    age: int | None
    title: str | None


class EmployeeGateway(Protocol):
    """Contract for the upstream employee API, implemented by infrastructure."""
    async def list_all(self) -> Sequence[EmployeeLike]: ...
    async def get_by_id(self, employee_id: str) -> EmployeeLike | None: ...
    async def create(self, request: CreateEmployeeLike) -> EmployeeLike: ...
    async def delete_by_name(self, name: str) -> bool: ...
