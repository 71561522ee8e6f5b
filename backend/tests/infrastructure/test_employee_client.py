"""Upstream Employee Client: tests against httpx.MockTransport.

Tests cover:
    - Each operation hits the documented method/path/body
    - Absent payloads: [] for list, None for get, False for delete, error for create
    - 429 → RateLimitedError with "Rate limit exceeded" message and Retry-After
    - Other non-2xx and transport faults → UpstreamFailureError
"""

import json
import logging

import httpx
import pytest

from employee_api.core.errors import (
    DataIntegrityError, RateLimitedError, UpstreamFailureError,
)
from employee_api.core.rank_salaries import top_n_by_salary
from employee_api.infrastructure.employee_client import UpstreamEmployeeClient
from employee_api.schemas.employee import EmployeeCreate

BASE = "http://upstream.test/api/v1/employee"

EMPLOYEE_JSON = {
    "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
    "employee_name": "John Doe",
    "employee_salary": 57000,
    "employee_age": 54,
    "employee_title": "Software Engineer",
    "employee_email": "foo@bar.com",
}


def _client(handler) -> UpstreamEmployeeClient:
    """Gateway whose transport is the given request handler."""
    return UpstreamEmployeeClient(
        BASE, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def _responder(status_code: int = 200, payload=None, content: bytes | None = None,
               headers: dict | None = None, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if content is not None:
            return httpx.Response(status_code, content=content, headers=headers)
        return httpx.Response(status_code, json=payload, headers=headers)
    return handler


# ─── list_all ────────────────────────────────────────────────────

async def test_list_all_returns_employees_in_order():
    second = {**EMPLOYEE_JSON, "id": "2", "employee_name": "Jane Roe"}
    seen = []
    gateway = _client(_responder(
        payload={"data": [EMPLOYEE_JSON, second], "status": "ok"}, seen=seen,
    ))
    employees = await gateway.list_all()
    assert [e.name for e in employees] == ["John Doe", "Jane Roe"]
    assert employees[0].salary == "57000"
    assert seen[0].method == "GET"
    assert str(seen[0].url) == BASE


@pytest.mark.parametrize("salary,expected", [
    (None, None),
    (57000.5, "57000.5"),
    (True, "true"),
    ("lots", "lots"),
])
async def test_list_all_keeps_records_with_odd_salaries(salary, expected):
    odd = {"id": "2", "employee_name": "B", "employee_salary": salary}
    gateway = _client(_responder(payload={"data": [EMPLOYEE_JSON, odd]}))
    employees = await gateway.list_all()
    assert [e.id for e in employees] == [EMPLOYEE_JSON["id"], "2"]
    assert employees[1].salary == expected


async def test_ranking_odd_upstream_salary_is_data_integrity_error():
    odd = {"id": "2", "employee_name": "B", "employee_salary": 57000.5}
    gateway = _client(_responder(payload={"data": [EMPLOYEE_JSON, odd]}))
    with pytest.raises(DataIntegrityError):
        top_n_by_salary(1, await gateway.list_all())


async def test_successful_call_is_logged_at_info(caplog):
    gateway = _client(_responder(payload={"data": EMPLOYEE_JSON}))
    with caplog.at_level(logging.INFO, logger="employee_api.infrastructure.employee_client"):
        await gateway.get_by_id("x")
    records = [r for r in caplog.records if r.getMessage() == "Upstream call succeeded"]
    assert records[0].levelno == logging.INFO
    assert records[0].operation == "retrieve employee"
    assert records[0].status_code == 200


async def test_list_all_empty_body_returns_empty_list():
    gateway = _client(_responder(content=b""))
    assert await gateway.list_all() == []


async def test_list_all_null_data_returns_empty_list():
    gateway = _client(_responder(payload={"data": None}))
    assert await gateway.list_all() == []


async def test_list_all_rate_limited():
    gateway = _client(_responder(429, payload={"error": "slow"}))
    with pytest.raises(RateLimitedError) as exc_info:
        await gateway.list_all()
    assert exc_info.value.message == "Failed to retrieve employees. Rate limit exceeded"


async def test_list_all_bad_gateway_is_upstream_failure():
    gateway = _client(_responder(502))
    with pytest.raises(UpstreamFailureError) as exc_info:
        await gateway.list_all()
    assert exc_info.value.message == "Failed to retrieve employees"
    assert exc_info.value.context.upstream_status == 502


async def test_malformed_payload_is_upstream_failure():
    gateway = _client(_responder(payload={"data": [{"id": "1"}]}))
    with pytest.raises(UpstreamFailureError):
        await gateway.list_all()


async def test_non_json_body_is_upstream_failure():
    gateway = _client(_responder(content=b"<html>oops</html>"))
    with pytest.raises(UpstreamFailureError):
        await gateway.list_all()


async def test_transport_error_is_upstream_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamFailureError) as exc_info:
        await _client(handler).list_all()
    assert exc_info.value.message == "Failed to retrieve employees"


# ─── get_by_id ───────────────────────────────────────────────────

async def test_get_by_id_returns_employee():
    seen = []
    gateway = _client(_responder(payload={"data": EMPLOYEE_JSON}, seen=seen))
    employee = await gateway.get_by_id(EMPLOYEE_JSON["id"])
    assert employee.id == EMPLOYEE_JSON["id"]
    assert employee.email == "foo@bar.com"
    assert str(seen[0].url) == f"{BASE}/{EMPLOYEE_JSON['id']}"


async def test_get_by_id_empty_body_is_not_found():
    assert await _client(_responder(content=b"")).get_by_id("x") is None


async def test_get_by_id_null_data_is_not_found():
    gateway = _client(_responder(payload={"data": None}))
    assert await gateway.get_by_id("x") is None


async def test_get_by_id_rate_limited_carries_retry_after():
    gateway = _client(_responder(429, headers={"Retry-After": "30"}))
    with pytest.raises(RateLimitedError) as exc_info:
        await gateway.get_by_id("x")
    assert exc_info.value.message == "Failed to retrieve employee. Rate limit exceeded"
    assert exc_info.value.context.retry_after_ms == 30_000
    assert exc_info.value.context.employee_id == "x"


async def test_get_by_id_server_error():
    with pytest.raises(UpstreamFailureError) as exc_info:
        await _client(_responder(502)).get_by_id("x")
    assert exc_info.value.message == "Failed to retrieve employee"


# ─── create ──────────────────────────────────────────────────────

async def test_create_posts_request_and_returns_record():
    seen = []
    gateway = _client(_responder(payload={"data": EMPLOYEE_JSON}, seen=seen))
    request = EmployeeCreate(
        name="John Doe", salary="57000", age=54, title="Software Engineer",
    )
    employee = await gateway.create(request)
    assert employee.id == EMPLOYEE_JSON["id"]
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {
        "name": "John Doe", "salary": "57000",
        "age": 54, "title": "Software Engineer",
    }


@pytest.mark.parametrize("payload", [{"data": None}, {}])
async def test_create_without_record_fails(payload):
    gateway = _client(_responder(payload=payload))
    with pytest.raises(UpstreamFailureError) as exc_info:
        await gateway.create(EmployeeCreate(name="A", salary="1", age=20, title="T"))
    assert exc_info.value.message == "Failed to create employee"


async def test_create_empty_body_fails():
    gateway = _client(_responder(content=b""))
    with pytest.raises(UpstreamFailureError):
        await gateway.create(EmployeeCreate(name="A", salary="1", age=20, title="T"))


async def test_create_rate_limited():
    gateway = _client(_responder(429))
    with pytest.raises(RateLimitedError) as exc_info:
        await gateway.create(EmployeeCreate(name="A", salary="1", age=20, title="T"))
    assert exc_info.value.message == "Failed to create employee. Rate limit exceeded"


# ─── delete_by_name ──────────────────────────────────────────────

async def test_delete_sends_name_in_body():
    seen = []
    gateway = _client(_responder(payload={"data": True}, seen=seen))
    assert await gateway.delete_by_name("John Doe") is True
    assert seen[0].method == "DELETE"
    assert str(seen[0].url) == BASE
    assert json.loads(seen[0].content) == {"name": "John Doe"}


async def test_delete_false_data_returns_false():
    assert await _client(_responder(payload={"data": False})).delete_by_name("x") is False


async def test_delete_missing_payload_returns_false():
    assert await _client(_responder(content=b"")).delete_by_name("x") is False


async def test_delete_server_error():
    with pytest.raises(UpstreamFailureError) as exc_info:
        await _client(_responder(500)).delete_by_name("x")
    assert exc_info.value.message == "Failed to delete employee"


async def test_delete_rate_limited():
    with pytest.raises(RateLimitedError) as exc_info:
        await _client(_responder(429)).delete_by_name("x")
    assert exc_info.value.message == "Failed to delete employee. Rate limit exceeded"
