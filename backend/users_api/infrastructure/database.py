"""Data Access Gateway — async connection pool exposing a single execute() operation.

Invariants:
    - One call == one pooled connection checkout == one transaction (commit on success)
    - Placeholders are positional ($1, $2, ...) and bound in order to params
    - Store failures are RETURNED as QueryResult.error (DatabaseError), never raised
    - The gateway never interprets a failure beyond classifying where it happened
    - No retries, no statement caching beyond what the pool/driver do

Design Decisions:
    - Gateway wraps an AsyncEngine it is given: lifecycle is owned by the app factory
      (create on startup, dispose on shutdown), tests inject an engine of their own
    - pool_pre_ping for stale connection detection, as in any long-lived pool
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from users_api.core.domain_types import Row, RowSet
from users_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)

_POSITIONAL_PLACEHOLDER = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one gateway call: rows on success, error on failure."""
    rows: RowSet = field(default_factory=list)
    error: DatabaseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def first(self) -> Row | None:
        return self.rows[0] if self.rows else None


def bind_positional(sql_text: str, params: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite $N placeholders to named binds and map params onto them."""
    named = _POSITIONAL_PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", sql_text)
    return named, {f"p{i}": value for i, value in enumerate(params, start=1)}


class DatabaseGateway:
    """Mediates all access to the relational store."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(
        self, sql_text: str, params: Sequence[Any] = (),
    ) -> QueryResult:
        """Run one statement in its own transaction and return its rows."""
        statement, bound = bind_positional(sql_text, params)
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(statement), bound)
                rows = (
                    [dict(row) for row in result.mappings().all()]
                    if result.returns_rows else []
                )
        except IntegrityError as e:
            return self._failure("commit", e)
        except OperationalError as e:
            return self._failure("execute", e)
        except DBAPIError as e:
            return self._failure("query", e)
        except SQLAlchemyError as e:
            return self._failure("statement", e)
        except OSError as e:
            return self._failure("connect", e)
        except Exception as e:
            return self._failure("unknown", e)
        return QueryResult(rows=rows)

    def _failure(self, operation: str, cause: BaseException) -> QueryResult:
        error = DatabaseError(operation, cause)
        logger.debug(error.describe(), extra={"operation": operation})
        return QueryResult(error=error)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def create_gateway(
    database_url: str, pool_size: int = 5, max_overflow: int = 10,
) -> DatabaseGateway:
    """Build a gateway with its own pooled engine."""
    engine = create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
    return DatabaseGateway(engine)


def get_gateway(request: Request) -> DatabaseGateway:
    """FastAPI dependency for the application's gateway."""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise DatabaseError("acquire")
    return gateway
