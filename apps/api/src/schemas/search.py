from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.schemas.citizen import CitizenResponse


class PaginationResponse(BaseModel):
    """Pagination metadata; serialized camelCase (totalCount, hasNextPage, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_count: int
    current_page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class CitizenSearchResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: list[CitizenResponse]
    pagination: PaginationResponse


class SearchErrorResponse(BaseModel):
    error: str
    fields: list[str] = []
    details: dict[str, str] = {}
