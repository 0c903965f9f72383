"""Pydantic request/response schemas."""

from src.schemas.citizen import (
    CitizenResponse,
    PassportResponse,
    FamilyRelationshipResponse,
)
from src.schemas.search import (
    PaginationResponse,
    CitizenSearchResponse,
    SearchErrorResponse,
)

__all__ = [
    "CitizenResponse",
    "PassportResponse",
    "FamilyRelationshipResponse",
    "PaginationResponse",
    "CitizenSearchResponse",
    "SearchErrorResponse",
]
