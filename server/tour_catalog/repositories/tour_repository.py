"""SQLAlchemy implementation of the tour storage gateway."""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.tour import Destination, Tour
from .base import TourGateway

logger = logging.getLogger(__name__)


def _with_aggregate(stmt):
    """Eager-load destinations and accommodations for a tour query."""
    return stmt.options(
        selectinload(Tour.destinations).selectinload(Destination.accommodation)
    )


class SqlAlchemyTourRepository(TourGateway):
    """Tour gateway over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_by_title_and_start_date(self, title: str, start_date: date) -> bool:
        stmt = (
            select(Tour.id)
            .where(Tour.title == title, Tour.start_date == start_date)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_id(self, tour_id: UUID) -> Optional[Tour]:
        stmt = _with_aggregate(select(Tour).where(Tour.id == tour_id))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_title(self, title: str) -> List[Tour]:
        stmt = _with_aggregate(
            select(Tour).where(Tour.title == title).order_by(Tour.start_date, Tour.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def find_all_with_destinations(self) -> List[Tour]:
        stmt = _with_aggregate(select(Tour).order_by(Tour.start_date, Tour.title, Tour.id))
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def save(self, tour: Tour) -> Tour:
        """
        Persist the tour aggregate in a single transaction.

        Args:
            tour: Transient or session-bound tour

        Returns:
            The persisted tour

        Raises:
            SQLAlchemyError: On any database failure, after rolling back
        """
        tour_id, title = str(tour.id), tour.title
        try:
            self.db.add(tour)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(
                "Tour save rolled back",
                extra={"tour_id": tour_id, "title": title},
                exc_info=True
            )
            raise

        logger.debug(
            "Tour saved",
            extra={
                "tour_id": str(tour.id),
                "destination_count": len(tour.destinations)
            }
        )
        return tour

    async def delete(self, tour: Tour) -> None:
        tour_id = str(tour.id)
        try:
            await self.db.delete(tour)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(
                "Tour delete rolled back",
                extra={"tour_id": tour_id},
                exc_info=True
            )
            raise

        logger.debug("Tour deleted", extra={"tour_id": tour_id})
