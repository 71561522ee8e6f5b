"""Create-Employee Validation: accumulates every rule violation into one error.

Invariants:
    - collect_violations is PURE: returns the ordered list of violation fragments
    - validate_create raises EmployeeValidationError iff that list is non-empty
    - Rule order is name, salary, age, title; each field reports at most one fragment
"""

from employee_api.core.domain_types import MIN_AGE, MAX_AGE, parse_integer
from employee_api.core.errors import EmployeeValidationError
from employee_api.core.gateway_protocols import CreateEmployeeLike


NAME_BLANK = "Name cannot be null or blank."
SALARY_MISSING = "Salary must not be null."
SALARY_NOT_INTEGER = "Salary string must parse to an integer."
SALARY_NOT_POSITIVE = "Salary must be greater than zero."
AGE_MISSING = "Age must not be null."
AGE_OUT_OF_RANGE = f"Age must be between {MIN_AGE} and {MAX_AGE}."
TITLE_BLANK = "Title must not be null or blank."


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _salary_violation(salary: str | None) -> str | None:
    if salary is None:
        return SALARY_MISSING
    amount = parse_integer(salary)
    if amount is None:
        return SALARY_NOT_INTEGER
    if amount <= 0:
        return SALARY_NOT_POSITIVE
    return None


def _age_violation(age: int | None) -> str | None:
    if age is None:
        return AGE_MISSING
    if age < MIN_AGE or age > MAX_AGE:
        return AGE_OUT_OF_RANGE
    return None


def collect_violations(request: CreateEmployeeLike) -> list[str]:
    """Return every violated rule, in rule order."""
    violations: list[str] = []
    if _is_blank(request.name):
        violations.append(NAME_BLANK)
    salary = _salary_violation(request.salary)
    if salary:
        violations.append(salary)
    age = _age_violation(request.age)
    if age:
        violations.append(age)
    if _is_blank(request.title):
        violations.append(TITLE_BLANK)
    return violations


def validate_create(request: CreateEmployeeLike) -> None:
    """Raise EmployeeValidationError carrying all violations, if any."""
    violations = collect_violations(request)
    if violations:
        raise EmployeeValidationError(violations)
