"""Employee Routes: HTTP surface over EmployeeService.

Invariants:
    - Routes contain no business logic (delegate to EmployeeService)
    - Employees serialized with upstream wire names (response_model by alias)
    - None from the service becomes 404; every other failure is an
      EmployeeApiError handled globally in api/error_handlers.py

Design Decisions:
    - Fixed paths (/highestSalary, /search/...) registered before /{employee_id}
      so they are not captured as ids
    - get_employee_service builds a service per request around the process-wide
      gateway; tests override get_employee_gateway
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from employee_api.core.errors import ResourceNotFoundError
from employee_api.core.gateway_protocols import EmployeeGateway
from employee_api.infrastructure.employee_client import get_employee_gateway
from employee_api.schemas.employee import Employee, EmployeeCreate
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employee", tags=["employees"])


def get_employee_service(
    gateway: EmployeeGateway = Depends(get_employee_gateway),
) -> EmployeeService:
    return EmployeeService(gateway)


def _not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status.HTTP_404_NOT_FOUND,
        detail=ResourceNotFoundError("Employee", employee_id).to_response(),
    )


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """All employees, in upstream order."""
    return await service.list_all()


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Employees whose name contains search_string (case-insensitive)."""
    return await service.search(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.top_ten_names()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get_by_id(employee_id)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.post(
    "", response_model=Employee, status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Validate and create an employee upstream."""
    return await service.create(body)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete by id; returns the deleted employee's name."""
    name = await service.delete_by_id(employee_id)
    if name is None:
        raise _not_found(employee_id)
    return name
