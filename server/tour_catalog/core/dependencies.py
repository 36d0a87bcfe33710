"""FastAPI dependencies wiring sessions, gateways, and services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories.base import TourGateway
from ..repositories.tour_repository import SqlAlchemyTourRepository
from ..services.tour_service import TourService
from .database import get_db


def get_tour_gateway(db: AsyncSession = Depends(get_db)) -> TourGateway:
    """
    Storage gateway bound to the request session.

    Args:
        db: Request-scoped database session

    Returns:
        TourGateway: SQLAlchemy-backed gateway
    """
    return SqlAlchemyTourRepository(db)


def get_tour_service(gateway: TourGateway = Depends(get_tour_gateway)) -> TourService:
    """Tour service bound to the request gateway."""
    return TourService(gateway)


DatabaseSession = Depends(get_db)
TourServiceDependency = Depends(get_tour_service)
