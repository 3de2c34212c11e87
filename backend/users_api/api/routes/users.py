"""Users Resource — list, get, create, update and delete over the users table.

Invariants:
    - Each request makes at most ONE gateway call, with one parameterized statement
    - Body validation runs before any gateway call; a rejected body never reaches the store
    - Not-found is inferred only from an empty RowSet (no existence pre-check)
    - Store failures come back as QueryResult.error and are answered with a generic 500
    - Update replaces name and email together; there is no partial update
    - Path ids that are not integers in the id column range cannot name a row: 404, no store call
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse

from users_api.core.domain_types import PayloadIssue, Row, parse_user_id
from users_api.core.errors import (
    DatabaseError, PayloadValidationError, UserNotFoundError, UsersApiError,
)
from users_api.infrastructure.database import DatabaseGateway, get_gateway
from users_api.schemas.user import UserResponse, validate_user_payload

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])

LIST_USERS = "SELECT id, name, email FROM users ORDER BY id"
GET_USER = "SELECT id, name, email FROM users WHERE id = $1"
INSERT_USER = (
    "INSERT INTO users (name, email) VALUES ($1, $2) RETURNING id, name, email"
)
UPDATE_USER = (
    "UPDATE users SET name = $1, email = $2 WHERE id = $3 "
    "RETURNING id, name, email"
)
DELETE_USER = "DELETE FROM users WHERE id = $1 RETURNING id, name, email"


def _error_response(exc: UsersApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _store_failure(
    error: DatabaseError, action: str, user_id: str | None = None,
) -> JSONResponse:
    logger.error(
        f"Error {action}: {error.describe()}",
        extra={
            "operation": error.operation,
            "user_id": user_id,
            "severity": error.severity.value,
        },
    )
    return _error_response(error)


def _rejected_payload(issue: PayloadIssue, path: str) -> JSONResponse:
    error = PayloadValidationError(issue.value)
    logger.warning(
        f"Rejected user payload: {issue.value}",
        extra={"path": path, "severity": error.severity.value},
    )
    return _error_response(error)


def _serialize(row: Row) -> dict:
    return UserResponse.model_validate(row).model_dump()


@router.get("", response_model=list[UserResponse])
async def list_users(gateway: DatabaseGateway = Depends(get_gateway)):
    """All users, possibly none."""
    result = await gateway.execute(LIST_USERS)
    if not result.ok:
        return _store_failure(result.error, "fetching users")
    return [_serialize(row) for row in result.rows]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, gateway: DatabaseGateway = Depends(get_gateway),
):
    """One user by id."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return _error_response(UserNotFoundError(user_id))

    result = await gateway.execute(GET_USER, [parsed_id])
    if not result.ok:
        return _store_failure(result.error, "fetching user", user_id)
    if result.first is None:
        return _error_response(UserNotFoundError(user_id))
    return _serialize(result.first)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: Any = Body(None), gateway: DatabaseGateway = Depends(get_gateway),
):
    """Insert a user; the store assigns the id."""
    payload = validate_user_payload(body)
    if isinstance(payload, PayloadIssue):
        return _rejected_payload(payload, router.prefix)

    result = await gateway.execute(INSERT_USER, [payload.name, payload.email])
    if not result.ok:
        return _store_failure(result.error, "creating user")
    return _serialize(result.first)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: Any = Body(None),
    gateway: DatabaseGateway = Depends(get_gateway),
):
    """Replace a user's name and email."""
    payload = validate_user_payload(body)
    if isinstance(payload, PayloadIssue):
        return _rejected_payload(payload, f"{router.prefix}/{user_id}")

    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return _error_response(UserNotFoundError(user_id))

    result = await gateway.execute(
        UPDATE_USER, [payload.name, payload.email, parsed_id],
    )
    if not result.ok:
        return _store_failure(result.error, "updating user", user_id)
    if result.first is None:
        return _error_response(UserNotFoundError(user_id))
    return _serialize(result.first)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str, gateway: DatabaseGateway = Depends(get_gateway),
):
    """Remove a user. 204 with an empty body on success."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return _error_response(UserNotFoundError(user_id))

    result = await gateway.execute(DELETE_USER, [parsed_id])
    if not result.ok:
        return _store_failure(result.error, "deleting user", user_id)
    if result.first is None:
        return _error_response(UserNotFoundError(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
