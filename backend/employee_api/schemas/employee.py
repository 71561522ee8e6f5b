"""Employee Schemas: Pydantic models for upstream envelopes and the create request.

Invariants:
    - Employee serializes with upstream wire names (employee_name, employee_salary, ...)
    - Employee.salary is a string or None; any JSON scalar is coerced to str, so a
      single odd salary never fails the whole envelope
    - EmployeeCreate is deliberately lenient: every field optional, rules live in
      core/validate_employee.py so all violations are reported together

Design Decisions:
    - validation_alias=AliasChoices(...): accepts wire names from upstream and
      Python names from tests/fixtures
    - Salary stays a string: parsing failures surface as DataIntegrityError during
      ranking, not as upstream failures while reading the payload; in EmployeeCreate
      they surface as a validate_create violation next to the others
"""

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, field_validator,
)


def _salary_to_str(v: object) -> object:
    """Coerce scalar salaries to their string form; None and containers pass through.

    Integral floats drop the fractional part ("57000.0" -> "57000"); other
    scalars keep their JSON spelling so the integer check can reject them.
    """
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return v


class Employee(BaseModel):
    """Employee record as returned by the upstream API."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str = Field(
        validation_alias=AliasChoices("employee_name", "name"),
        serialization_alias="employee_name",
    )
    salary: str | None = Field(
        None,
        validation_alias=AliasChoices("employee_salary", "salary"),
        serialization_alias="employee_salary",
    )
    age: int | None = Field(
        None,
        validation_alias=AliasChoices("employee_age", "age"),
        serialization_alias="employee_age",
    )
    title: str | None = Field(
        None,
        validation_alias=AliasChoices("employee_title", "title"),
        serialization_alias="employee_title",
    )
    email: str | None = Field(
        None,
        validation_alias=AliasChoices("employee_email", "email"),
        serialization_alias="employee_email",
    )

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: object) -> object:
        return str(v) if v is not None else v

    @field_validator("salary", mode="before")
    @classmethod
    def stringify_salary(cls, v: object) -> object:
        return _salary_to_str(v)


class EmployeeCreate(BaseModel):
    """Create-employee input. Unvalidated shape; see validate_create()."""
    name: str | None = None
    salary: str | None = None
    age: int | None = None
    title: str | None = None

    @field_validator("salary", mode="before")
    @classmethod
    def stringify_salary(cls, v: object) -> object:
        return _salary_to_str(v)


# ─── Upstream envelopes ─────────────────────────────────────────

class EmployeeListEnvelope(BaseModel):
    """GET {base} payload."""
    data: list[Employee] | None = None


class EmployeeEnvelope(BaseModel):
    """GET {base}/{id} and POST {base} payload."""
    data: Employee | None = None


class DeleteEnvelope(BaseModel):
    """DELETE {base} payload."""
    data: bool | None = None
