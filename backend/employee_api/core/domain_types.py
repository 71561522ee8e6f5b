"""Domain Types: identity types, upstream operations and validation bounds.

Invariants:
    - EmployeeId wraps the upstream's opaque id string; never parsed locally
    - UpstreamOperation values are the phrases used in "Failed to <operation>"
    - MIN_AGE / MAX_AGE are the single source of truth for the age rule
    - parse_integer is the one integer reading used by ranking and validation

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON log extras without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", str)


# ─── Bounds ──────────────────────────────────────────────────────

MIN_AGE: int = 16
MAX_AGE: int = 75
TOP_EARNERS_LIMIT: int = 10

# 32-bit signed range, the upstream's integer width
INT_MIN: int = -(2 ** 31)
INT_MAX: int = 2 ** 31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str | None) -> int | None:
    """Parse an ASCII decimal integer in 32-bit range; None when it is not one.

    No whitespace, underscores or non-ASCII digits.
    """
    if text is None or not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


# ─── Enums ───────────────────────────────────────────────────────

class UpstreamOperation(str, Enum):
    """Gateway operations, valued by the phrase used in failure messages."""
    LIST_ALL = "retrieve employees"
    GET_BY_ID = "retrieve employee"
    CREATE = "create employee"
    DELETE_BY_NAME = "delete employee"

    def failure_message(self, rate_limited: bool = False) -> str:
        """'Failed to <operation>', suffixed when the upstream throttled us."""
        message = f"Failed to {self.value}"
        if rate_limited:
            message += ". Rate limit exceeded"
        return message
