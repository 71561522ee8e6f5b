"""Employee Service: orchestrates gateway calls around the pure core functions.

Invariants:
    - search, highest_salary and top_ten_names issue exactly one list_all each
    - Not-found is returned as None, never raised
    - Upstream, validation and data-integrity errors propagate unchanged

Design Decisions:
    - Imperative shell around functional core: IO here, ranking/filtering/validation
      in core/ (ADR: impureim sandwich)
    - delete_by_id resolves id -> name first because the upstream delete is name-keyed
"""

import logging

from employee_api.core.domain_types import TOP_EARNERS_LIMIT, UpstreamOperation
from employee_api.core.errors import (
    ErrorContext, MissingEmployeeNameError, UpstreamFailureError,
)
from employee_api.core.gateway_protocols import (
    CreateEmployeeLike, EmployeeGateway, EmployeeLike,
)
from employee_api.core.rank_salaries import parse_salary, top_n_by_salary
from employee_api.core.search_employees import filter_by_name
from employee_api.core.validate_employee import validate_create

logger = logging.getLogger(__name__)


class EmployeeService:
    """Presentation-facing contract over an EmployeeGateway."""

    def __init__(self, gateway: EmployeeGateway):
        self._gateway = gateway

    async def list_all(self) -> list[EmployeeLike]:
        return list(await self._gateway.list_all())

    async def search(self, query: str) -> list[EmployeeLike]:
        """Employees whose name contains query, case-insensitively."""
        matches = filter_by_name(await self._gateway.list_all(), query)
        logger.info(
            "Employee search completed", extra={"result_count": len(matches)},
        )
        return matches

    async def get_by_id(self, employee_id: str) -> EmployeeLike | None:
        return await self._gateway.get_by_id(employee_id)

    async def highest_salary(self) -> int:
        """Top salary across the roster; 0 when the roster is empty."""
        top = top_n_by_salary(1, await self._gateway.list_all())
        if not top:
            return 0
        return parse_salary(top[0])

    async def top_ten_names(self) -> list[str]:
        top = top_n_by_salary(TOP_EARNERS_LIMIT, await self._gateway.list_all())
        return [e.name for e in top]

    async def create(self, request: CreateEmployeeLike) -> EmployeeLike:
        """Validate, then create upstream. All violations reported at once."""
        validate_create(request)
        employee = await self._gateway.create(request)
        logger.info("Employee created", extra={"employee_id": employee.id})
        return employee

    async def delete_by_id(self, employee_id: str) -> str | None:
        """Delete by id via the name-keyed upstream delete.

        Returns the deleted employee's name, or None when the id is unknown.
        """
        employee = await self._gateway.get_by_id(employee_id)
        if employee is None:
            return None
        name = employee.name
        if not name or not name.strip():
            raise MissingEmployeeNameError(employee_id)

        if not await self._gateway.delete_by_name(name):
            op = UpstreamOperation.DELETE_BY_NAME
            raise UpstreamFailureError(
                op.failure_message(),
                ErrorContext(operation=op.value, employee_id=employee_id),
            )
        logger.info("Employee deleted", extra={"employee_id": employee_id})
        return name
