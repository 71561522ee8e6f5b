"""Service test fixtures: fake gateway and the service built on it."""

import pytest

from employee_api.services.employee_service import EmployeeService
from tests.fakes import FakeEmployeeGateway


@pytest.fixture
def gateway():
    return FakeEmployeeGateway()


@pytest.fixture
def service(gateway):
    return EmployeeService(gateway)
