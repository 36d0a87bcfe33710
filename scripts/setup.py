#!/usr/bin/env python3
"""Setup script for the tour catalog API."""

import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from tour_catalog.core.database import async_session_factory, close_db, init_db
from tour_catalog.repositories.tour_repository import SqlAlchemyTourRepository
from tour_catalog.schemas.tour import AccommodationRequest, DestinationRequest, TourRequest
from tour_catalog.services.tour_service import TourService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_TOURS = [
    TourRequest(
        title="Alps Trek",
        description="Ten days hiking between Swiss mountain villages",
        duration="10 days",
        start_date=date(2025, 6, 1),
        price=2499.0,
        image_link="https://images.example.com/alps-trek.jpg",
        destinations=[
            DestinationRequest(
                dest_name="Zermatt",
                state="Valais",
                description="Car-free village below the Matterhorn",
                accommodation=AccommodationRequest(
                    name="Hotel X",
                    type="Hotel",
                    location="Bahnhofstrasse 12",
                    details="Half board, mountain view",
                    check_in="14:00",
                    check_out="10:00",
                ),
            ),
            DestinationRequest(
                dest_name="Grindelwald",
                state="Bern",
                description="Gateway to the Jungfrau region",
            ),
        ],
    ),
    TourRequest(
        title="Golden Triangle",
        description="Delhi, Agra and Jaipur by train",
        duration="7 days",
        start_date=date(2025, 11, 10),
        price=1299.0,
        image_link="https://images.example.com/golden-triangle.jpg",
        destinations=[
            DestinationRequest(dest_name="Delhi", state="Delhi"),
            DestinationRequest(
                dest_name="Agra",
                state="Uttar Pradesh",
                description="Taj Mahal at sunrise",
                accommodation=AccommodationRequest(name="Riverside Haveli", type="Heritage hotel"),
            ),
            DestinationRequest(dest_name="Jaipur", state="Rajasthan"),
        ],
    ),
]


async def setup_database():
    """Create the schema."""
    logger.info("Setting up database...")

    try:
        await init_db()
        logger.info("Database setup completed successfully!")
    except Exception as e:
        logger.error(f"Database setup failed: {e}")
        raise


async def create_sample_data():
    """Create some sample tours; existing title/date pairs are left alone."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        service = TourService(SqlAlchemyTourRepository(db))
        for request in SAMPLE_TOURS:
            response = await service.add_tour(request)
            logger.info(f"{request.title}: {response.status.phrase} - {response.message}")


async def main():
    """Main setup function."""
    try:
        await setup_database()
        await create_sample_data()
        logger.info("Setup completed successfully!")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
