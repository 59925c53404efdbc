"""
Base service class for the Medal Bot.

Provides async database session management and translates database failures
into StoreError for the command layer.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from medalbot.utils.exceptions import StoreError

logger = logging.getLogger(__name__)

class BaseService:
    """Base class for database-backed services."""

    def __init__(self, session_factory):
        """
        Initialize base service with session factory.

        Args:
            session_factory: Async session factory from Database class
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def get_session(self, operation: str = "database operation") -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope for async database operations.

        Commits on success. SQLAlchemy errors are rolled back and re-raised as
        StoreError; anything else is rolled back and propagates unchanged.
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error during {operation}: {e}")
            raise StoreError(operation, e) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
