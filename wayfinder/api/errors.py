"""Shared error translation for the admin CRUD routes."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.db.crud import BaseCRUD
from wayfinder.db.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def database_errors(action: str) -> Iterator[None]:
    """Log database failures and answer 500 without leaking the driver message."""
    try:
        yield
    except SQLAlchemyError:
        logger.exception("Database error: failed to %s", action)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")


async def get_or_404(
    repo: BaseCRUD[ModelT], db: AsyncSession, id: UUID, label: str
) -> ModelT:
    row = await repo.get_by_id(db, id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row
