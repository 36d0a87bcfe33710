"""Tour service for business logic operations."""

import logging
from http import HTTPStatus
from typing import List
from uuid import UUID

from ..core.exceptions import NotFoundError, OperationFailedError
from ..core.observability import metrics_collector
from ..models.tour import Tour
from ..repositories.base import TourGateway
from ..schemas.common import ApiResponse
from ..schemas.tour import TourDetail, TourRequest, TourSummary
from .tour_mapper import apply_tour_request, to_tour_detail, to_tour_summary, tour_from_request

logger = logging.getLogger(__name__)


class TourService:
    """
    Service for tour-related operations.

    Every operation lets NotFoundError through untouched and rewraps any
    other failure into OperationFailedError, prefixed with the operation
    that was attempted.
    """

    def __init__(self, gateway: TourGateway):
        self.gateway = gateway

    async def add_tour(self, request: TourRequest) -> ApiResponse:
        """
        Create a new tour package with its destinations and accommodations.

        Args:
            request: Tour creation request

        Returns:
            CREATED envelope, or BAD_REQUEST when the title and start date
            are already taken

        Raises:
            OperationFailedError: If mapping or persistence fails
        """
        try:
            exists = await self.gateway.exists_by_title_and_start_date(
                request.title, request.start_date
            )
            if exists:
                logger.warning(
                    "Tour creation rejected - title and start date already exist",
                    extra={
                        "title": request.title,
                        "start_date": request.start_date.isoformat()
                    }
                )
                metrics_collector.record_tour_operation("create", "conflict")
                return ApiResponse(
                    status=HTTPStatus.BAD_REQUEST,
                    message="Tour with the same title and start date already exists."
                )

            tour = tour_from_request(request)
            tour = await self.gateway.save(tour)

            logger.info(
                "Tour created successfully",
                extra={
                    "tour_id": str(tour.id),
                    "title": tour.title,
                    "destination_count": len(tour.destinations)
                }
            )
            metrics_collector.record_tour_operation("create", "success")

            return ApiResponse(
                status=HTTPStatus.CREATED,
                message="Tour package created successfully."
            )
        except Exception as e:
            raise self._failed("create", "Error creating tour package", e) from e

    async def update_tour(self, tour_id: UUID, request: TourRequest) -> ApiResponse:
        """
        Overwrite a tour and replace its destination list.

        Destinations missing from the request are dropped. The duplicate
        title/start date check of add_tour is not repeated here.

        Raises:
            NotFoundError: If tour not found
            OperationFailedError: On any other failure
        """
        try:
            tour = await self._get_tour_or_raise(tour_id)
            apply_tour_request(tour, request)
            await self.gateway.save(tour)

            logger.info(
                "Tour updated successfully",
                extra={
                    "tour_id": str(tour_id),
                    "destination_count": len(request.destinations)
                }
            )
            metrics_collector.record_tour_operation("update", "success")

            return ApiResponse(status=HTTPStatus.OK, message="Tour package updated successfully.")
        except NotFoundError:
            metrics_collector.record_tour_operation("update", "not_found")
            raise
        except Exception as e:
            raise self._failed("update", "Error updating tour package", e) from e

    async def delete_tour(self, tour_id: UUID) -> ApiResponse:
        """
        Delete a tour together with its destinations and accommodations.

        Raises:
            NotFoundError: If tour not found
            OperationFailedError: On any other failure
        """
        try:
            tour = await self._get_tour_or_raise(tour_id)
            await self.gateway.delete(tour)

            logger.info("Tour deleted successfully", extra={"tour_id": str(tour_id)})
            metrics_collector.record_tour_operation("delete", "success")

            return ApiResponse(status=HTTPStatus.OK, message="Tour package deleted successfully.")
        except NotFoundError:
            metrics_collector.record_tour_operation("delete", "not_found")
            raise
        except Exception as e:
            raise self._failed("delete", "Error deleting tour package", e) from e

    async def get_all_tours(self) -> List[TourSummary]:
        """
        List every tour as a summary, without accommodation detail.

        Returns:
            Summaries in store order; empty when there are no tours
        """
        try:
            tours = await self.gateway.find_all_with_destinations()
            return self._summaries(tours)
        except Exception as e:
            raise self._failed("list", "Error retrieving all tours", e) from e

    async def get_tour_by_title(self, title: str) -> List[TourSummary]:
        """
        Find tours whose title matches exactly.

        Raises:
            NotFoundError: If no tour has this title
            OperationFailedError: On any other failure
        """
        try:
            tours = await self.gateway.find_by_title(title)
            if not tours:
                logger.warning("No tours found for title", extra={"title": title})
                raise NotFoundError(
                    resource_type="tour",
                    detail=f"No tours found with title: {title}"
                )
            return self._summaries(tours)
        except NotFoundError:
            metrics_collector.record_tour_operation("search", "not_found")
            raise
        except Exception as e:
            raise self._failed("search", "Error retrieving tours by title", e) from e

    async def get_tour_by_id(self, tour_id: UUID) -> TourDetail:
        """
        Get the detail view of one tour, accommodations included.

        Raises:
            NotFoundError: If tour not found
            OperationFailedError: On any other failure
        """
        try:
            tour = await self._get_tour_or_raise(tour_id)
            return to_tour_detail(tour)
        except NotFoundError:
            metrics_collector.record_tour_operation("get", "not_found")
            raise
        except Exception as e:
            raise self._failed("get", "Error retrieving tour by ID", e) from e

    async def _get_tour_or_raise(self, tour_id: UUID) -> Tour:
        tour = await self.gateway.find_by_id(tour_id)
        if tour is None:
            logger.warning("Tour not found", extra={"tour_id": str(tour_id)})
            raise NotFoundError(
                resource_type="tour",
                resource_id=str(tour_id),
                detail=f"Tour not found with ID: {tour_id}"
            )
        return tour

    @staticmethod
    def _summaries(tours: List[Tour]) -> List[TourSummary]:
        return [to_tour_summary(tour) for tour in tours if tour is not None]

    @staticmethod
    def _failed(operation: str, prefix: str, error: Exception) -> OperationFailedError:
        logger.error(
            f"Tour {operation} failed",
            extra={"operation": operation, "error": str(error)},
            exc_info=error
        )
        metrics_collector.record_tour_operation(operation, "failed")
        return OperationFailedError(detail=f"{prefix}: {error}", operation=operation)
