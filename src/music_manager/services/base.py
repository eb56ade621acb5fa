"""Service-layer errors and the shared base for database services."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidPageError(ServiceError):
    """Raised when a page request has a non-positive page or page size."""

    def __init__(self, message: str = "Invalid page request"):
        super().__init__(message, status_code=422)


class ConstraintViolationError(ServiceError):
    """Raised when a write is rejected by a database constraint."""

    def __init__(self, message: str = "Constraint violation"):
        super().__init__(message, status_code=409)


class BaseService:
    """Base class for services working inside a caller-owned session.

    Services flush but never commit; the session owner decides whether the
    unit of work is committed or rolled back.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize the service.

        Args:
            db: The async session all queries and writes run in.
        """
        self.db = db

    async def _flush(self) -> None:
        """Flush pending changes, translating constraint failures.

        Raises:
            ConstraintViolationError: If the database rejects the write.
        """
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning("Write rejected by database: %s", e.orig)
            raise ConstraintViolationError(f"Constraint violation: {e.orig}") from e
