"""Tour router for tour management operations."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ..core.dependencies import TourServiceDependency
from ..schemas.common import ApiResponse, Problem
from ..schemas.tour import TourDetail, TourRequest, TourSummary
from ..services.tour_service import TourService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/tour", tags=["tour"])

_problem_responses = {
    404: {"model": Problem, "description": "Tour not found"},
    500: {"model": Problem, "description": "Operation failed"},
}


def _envelope(response: ApiResponse) -> JSONResponse:
    return JSONResponse(
        status_code=int(response.status),
        content=response.model_dump(mode="json")
    )


def _views(views) -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content=[view.model_dump(mode="json", by_alias=True) for view in views]
    )


@router.post("/create", response_model=ApiResponse, status_code=201, responses={400: {"model": ApiResponse}, 500: _problem_responses[500]})
async def create_tour(
    request: TourRequest,
    tour_service: TourService = TourServiceDependency
) -> JSONResponse:
    """
    Create a new tour package.

    Answers 400 with the envelope when a tour with the same title and
    start date already exists.
    """
    response = await tour_service.add_tour(request)

    logger.info(
        "Tour creation handled",
        extra={
            "title": request.title,
            "status_code": int(response.status)
        }
    )

    return _envelope(response)


@router.get("/all", response_model=list[TourSummary], responses={500: _problem_responses[500]})
async def list_tours(tour_service: TourService = TourServiceDependency) -> JSONResponse:
    """List every tour without accommodation detail."""
    return _views(await tour_service.get_all_tours())


@router.get("/search", response_model=list[TourSummary], responses=_problem_responses)
async def search_tours(
    title: str = Query(..., min_length=1, description="Exact tour title"),
    tour_service: TourService = TourServiceDependency
) -> JSONResponse:
    """Find tours by exact title, without accommodation detail."""
    return _views(await tour_service.get_tour_by_title(title))


@router.get("/{tour_id}", response_model=TourDetail, responses=_problem_responses)
async def get_tour(
    tour_id: UUID,
    tour_service: TourService = TourServiceDependency
) -> JSONResponse:
    """Get one tour, including the accommodation of each destination."""
    detail = await tour_service.get_tour_by_id(tour_id)
    return JSONResponse(
        status_code=200,
        content=detail.model_dump(mode="json", by_alias=True, exclude_unset=True)
    )


@router.put("/{tour_id}", response_model=ApiResponse, responses=_problem_responses)
async def update_tour(
    tour_id: UUID,
    request: TourRequest,
    tour_service: TourService = TourServiceDependency
) -> JSONResponse:
    """Overwrite a tour and replace its destinations."""
    return _envelope(await tour_service.update_tour(tour_id, request))


@router.delete("/{tour_id}", response_model=ApiResponse, responses=_problem_responses)
async def delete_tour(
    tour_id: UUID,
    tour_service: TourService = TourServiceDependency
) -> JSONResponse:
    """Delete a tour with its destinations and accommodations."""
    return _envelope(await tour_service.delete_tour(tour_id))
