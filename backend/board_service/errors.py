"""Typed failures raised by the board operations.

Every error carries a stable ``code`` which the GraphQL schema copies into
``extensions.code`` so clients can branch on it without parsing messages.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class BoardServiceError(Exception):
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BoardServiceError):
    code = "NOT_FOUND"


class ForbiddenError(BoardServiceError):
    code = "FORBIDDEN"

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class DatabaseError(BoardServiceError):
    code = "DATABASE_ERROR"

    def __init__(self, message: str = "Database Error"):
        super().__init__(message)


class InvalidTokenError(BoardServiceError):
    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid Token"):
        super().__init__(message)


@asynccontextmanager
async def catch_db_error(session: AsyncSession) -> AsyncIterator[None]:
    """Run store calls, turning any SQLAlchemy failure into ``DatabaseError``.

    The session is rolled back before the error is raised so it stays usable
    for the rest of the request.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Database error: %s", exc)
        await session.rollback()
        raise DatabaseError() from exc
