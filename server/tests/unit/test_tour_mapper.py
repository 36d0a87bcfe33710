"""Unit tests for the tour entity/schema conversions."""

from datetime import date
from types import SimpleNamespace

from tour_catalog.models.tour import Accommodation, Destination, Tour
from tour_catalog.services.tour_mapper import (
    apply_tour_request,
    to_tour_detail,
    to_tour_summary,
    tour_from_request,
)


def test_tour_from_request_copies_nested_aggregate(sample_tour_request):
    """Test the request becomes a fresh entity graph in request order."""
    tour = tour_from_request(sample_tour_request)

    assert tour.title == "Alps Trek"
    assert tour.id is not None
    assert tour.image == sample_tour_request.image_link
    assert [d.dest_name for d in tour.destinations] == ["Zermatt", "Grindelwald"]
    assert [d.position for d in tour.destinations] == [0, 1]
    assert isinstance(tour.destinations[0].accommodation, Accommodation)
    assert tour.destinations[0].accommodation.check_out == "10:00"
    assert tour.destinations[1].accommodation is None


def test_apply_tour_request_keeps_image(sample_tour_request):
    """Test update semantics leave the stored image untouched."""
    tour = Tour(title="Old", start_date=date(2023, 1, 1), price=1.0, image="old.jpg", destinations=[
        Destination(dest_name="Somewhere", position=0),
    ])

    apply_tour_request(tour, sample_tour_request)

    assert tour.title == "Alps Trek"
    assert tour.image == "old.jpg"
    assert [d.dest_name for d in tour.destinations] == ["Zermatt", "Grindelwald"]


def test_detail_json_omits_missing_accommodation(sample_tour_request):
    """Test the detail JSON has no accommodation key for destinations without one."""
    detail = to_tour_detail(tour_from_request(sample_tour_request))
    payload = detail.model_dump(mode="json", by_alias=True, exclude_unset=True)

    zermatt, grindelwald = payload["destinations"]
    assert zermatt["accommodation"] == {
        "name": "Hotel X",
        "type": "Hotel",
        "location": "Bahnhofstrasse 12",
        "details": "Half board, mountain view",
        "checkIn": "14:00",
        "checkOut": "10:00",
    }
    assert "accommodation" not in grindelwald
    assert payload["startDate"] == "2024-06-01"
    assert payload["imageLink"] == sample_tour_request.image_link


def test_summary_json_never_has_accommodation(sample_tour_request):
    """Test the summary JSON drops accommodation even when present."""
    summary = to_tour_summary(tour_from_request(sample_tour_request))
    payload = summary.model_dump(mode="json", by_alias=True)

    assert all("accommodation" not in d for d in payload["destinations"])
    assert set(payload["destinations"][0]) == {"destName", "state", "description"}


def test_summary_skips_missing_destinations():
    """Test null destinations and a null list are tolerated in listings."""
    tour = SimpleNamespace(
        title="Coast Road",
        description=None,
        image=None,
        duration="3 days",
        start_date=date(2024, 5, 1),
        price=300.0,
        destinations=[None, SimpleNamespace(dest_name="Big Sur", state="CA", description=None)],
    )

    summary = to_tour_summary(tour)
    assert [d.dest_name for d in summary.destinations] == ["Big Sur"]

    tour.destinations = None
    assert to_tour_summary(tour).destinations == []
