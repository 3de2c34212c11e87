"""Domain Types — named types for rows, ids and validation outcomes.

Invariants:
    - UserId wraps int, store-assigned and never client-supplied on create
    - A UserId always fits the users.id column (signed 32-bit)
    - A Row maps column name to scalar value; a RowSet keeps store order
    - Every way a user payload can be rejected is a PayloadIssue member
"""

import re
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

_USER_ID_PATTERN = re.compile(r"-?[0-9]{1,10}")

# users.id is a signed 32-bit Integer column
USER_ID_MIN = -(2 ** 31)
USER_ID_MAX = 2 ** 31 - 1


# ─── Store Types ─────────────────────────────────────────────────

Row = dict[str, Any]
RowSet = list[Row]


# ─── Enums ───────────────────────────────────────────────────────

class PayloadIssue(str, Enum):
    """Reasons a create/update body is rejected."""
    NOT_AN_OBJECT = "not_an_object"
    MISSING_NAME = "missing_name"
    MISSING_EMAIL = "missing_email"


def parse_user_id(raw: str) -> UserId | None:
    """Parse a path segment as a user id. None when it cannot name a stored row."""
    if not _USER_ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not USER_ID_MIN <= value <= USER_ID_MAX:
        return None
    return UserId(value)
