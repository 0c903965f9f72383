"""Shared model-to-response serializers."""

from typing import Any

from src.schemas import CitizenResponse, CitizenSearchResponse
from src.services.search import Page


def citizen_to_response(citizen: Any) -> CitizenResponse:
    """Map a Citizen row (ORM object or dict record) to CitizenResponse."""
    if isinstance(citizen, CitizenResponse):
        return citizen
    if isinstance(citizen, dict):
        return CitizenResponse.model_validate(citizen)
    return CitizenResponse.model_validate(citizen, from_attributes=True)


def page_to_response(page: Page) -> CitizenSearchResponse:
    return CitizenSearchResponse(
        data=[citizen_to_response(c) for c in page.rows],
        pagination=page.pagination,
    )
