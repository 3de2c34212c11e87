"""User Schemas — Pydantic models and the payload validation step for API boundaries.

Invariants:
    - UserPayload holds exactly the mutable fields (name, email); id is never accepted
    - validate_user_payload never raises: it returns a UserPayload or a PayloadIssue
    - A field is present only if it is a non-empty string; values are not trimmed
    - UserResponse is the only shape a user is serialized in

Design Decisions:
    - Validation returns a typed result instead of raising: the route maps the issue
      to its 400 response explicitly
"""

from typing import Any

from pydantic import BaseModel

from users_api.core.domain_types import PayloadIssue


class UserPayload(BaseModel):
    """Create/update body. Update replaces both fields."""
    name: str
    email: str


class UserResponse(BaseModel):
    """Public user representation."""
    id: int
    name: str
    email: str


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_user_payload(body: Any) -> UserPayload | PayloadIssue:
    """Check a decoded JSON body for a usable name and email.

    Stricter than a truthiness check: a truthy non-string such as 123 or true
    counts as missing, since name and email are text columns.
    """
    if not isinstance(body, dict):
        return PayloadIssue.NOT_AN_OBJECT
    if not _is_present(body.get("name")):
        return PayloadIssue.MISSING_NAME
    if not _is_present(body.get("email")):
        return PayloadIssue.MISSING_EMAIL
    return UserPayload(name=body["name"], email=body["email"])
