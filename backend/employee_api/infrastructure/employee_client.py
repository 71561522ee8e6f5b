"""Upstream Employee Client: wraps httpx.AsyncClient with failure classification.

Invariants:
    - Rate limits (429): RateLimitedError("Failed to <op>. Rate limit exceeded")
    - Any other non-2xx, transport fault, or unreadable payload:
      UpstreamFailureError("Failed to <op>")
    - Nothing is retried here; Retry-After is only recorded on the error
    - Absent payloads are results, not errors: [] for list, None for get,
      False for delete (create is the exception: no payload is a failure)

Design Decisions:
    - Wrapper over raw client: isolates upstream contract from EmployeeService
    - Singleton employee_client initialized on startup: FastAPI lifespan manages
      lifecycle, get_employee_gateway() is the route dependency
"""

import logging

import httpx
from pydantic import ValidationError

from employee_api.core.domain_types import UpstreamOperation
from employee_api.core.errors import (
    ErrorContext, RateLimitedError, UpstreamFailureError,
)
from employee_api.core.gateway_protocols import CreateEmployeeLike
from employee_api.schemas.employee import (
    DeleteEnvelope, Employee, EmployeeEnvelope, EmployeeListEnvelope,
)

logger = logging.getLogger(__name__)

_TOO_MANY_REQUESTS = 429


class UpstreamEmployeeClient:
    """EmployeeGateway backed by the third-party employee HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def list_all(self) -> list[Employee]:
        """GET {base}. Absent body or null data -> []."""
        op = UpstreamOperation.LIST_ALL
        payload = await self._request(op, "GET", self.base_url)
        if payload is None:
            return []
        envelope = self._parse(op, EmployeeListEnvelope, payload)
        employees = list(envelope.data or [])
        logger.info(
            "Fetched employee list",
            extra={"operation": op.value, "result_count": len(employees)},
        )
        return employees

    async def get_by_id(self, employee_id: str) -> Employee | None:
        """GET {base}/{id}. Absent body or null record -> None (not found)."""
        op = UpstreamOperation.GET_BY_ID
        payload = await self._request(
            op, "GET", f"{self.base_url}/{employee_id}",
            employee_id=employee_id,
        )
        if payload is None:
            return None
        return self._parse(op, EmployeeEnvelope, payload).data

    async def create(self, request: CreateEmployeeLike) -> Employee:
        """POST {base}. Returns the upstream-assigned record."""
        op = UpstreamOperation.CREATE
        body = {
            "name": request.name,
            "salary": request.salary,
            "age": request.age,
            "title": request.title,
        }
        payload = await self._request(op, "POST", self.base_url, json=body)
        employee = (
            self._parse(op, EmployeeEnvelope, payload).data
            if payload is not None else None
        )
        if employee is None:
            logger.warning(
                "Upstream create returned no record",
                extra={"operation": op.value},
            )
            raise UpstreamFailureError(
                op.failure_message(), ErrorContext(operation=op.value),
            )
        return employee

    async def delete_by_name(self, name: str) -> bool:
        """DELETE {base} with {"name": name}. Missing payload -> False."""
        op = UpstreamOperation.DELETE_BY_NAME
        payload = await self._request(
            op, "DELETE", self.base_url, json={"name": name},
        )
        if payload is None:
            return False
        return bool(self._parse(op, DeleteEnvelope, payload).data)

    async def _request(
        self,
        op: UpstreamOperation,
        method: str,
        url: str,
        *,
        json: dict | None = None,
        employee_id: str | None = None,
    ) -> object | None:
        """Send one request and classify the outcome. Returns decoded JSON or None."""
        context = ErrorContext(operation=op.value, employee_id=employee_id)
        try:
            response = await self.client.request(method, url, json=json)
        except httpx.RequestError as e:
            logger.warning(
                f"Upstream transport error: {e}",
                extra={"operation": op.value},
            )
            raise UpstreamFailureError(op.failure_message(), context)

        context.upstream_status = response.status_code
        if response.status_code == _TOO_MANY_REQUESTS:
            retry_after_ms = _extract_retry_after(response)
            logger.warning(
                "Upstream rate limit hit",
                extra={
                    "operation": op.value,
                    "status_code": response.status_code,
                    "retry_after_ms": retry_after_ms,
                },
            )
            raise RateLimitedError(
                op.failure_message(rate_limited=True), retry_after_ms, context,
            )
        if not response.is_success:
            logger.warning(
                "Upstream call failed",
                extra={"operation": op.value, "status_code": response.status_code},
            )
            raise UpstreamFailureError(op.failure_message(), context)

        logger.info(
            "Upstream call succeeded",
            extra={"operation": op.value, "status_code": response.status_code},
        )
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning(
                "Upstream returned a non-JSON body",
                extra={"operation": op.value, "status_code": response.status_code},
            )
            raise UpstreamFailureError(op.failure_message(), context)

    def _parse(self, op: UpstreamOperation, model, payload: object):
        """Validate an upstream envelope; malformed shapes are upstream failures."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                f"Upstream payload rejected: {e.error_count()} error(s)",
                extra={"operation": op.value},
            )
            raise UpstreamFailureError(
                op.failure_message(), ErrorContext(operation=op.value),
            )


def _extract_retry_after(response: httpx.Response) -> int | None:
    """Extract Retry-After header (returns milliseconds)."""
    val = response.headers.get("retry-after")
    if val and val.strip().isdigit():
        return int(val) * 1000
    return None


# Singleton (initialized on startup)
employee_client: UpstreamEmployeeClient | None = None


def init_employee_client(base_url: str, timeout_seconds: float = 10.0):
    global employee_client
    employee_client = UpstreamEmployeeClient(base_url, timeout_seconds)


async def close_employee_client():
    global employee_client
    if employee_client:
        await employee_client.aclose()
    employee_client = None


def get_employee_gateway() -> UpstreamEmployeeClient:
    """FastAPI dependency for the upstream gateway."""
    if not employee_client:
        raise RuntimeError("Employee client not initialized")
    return employee_client
