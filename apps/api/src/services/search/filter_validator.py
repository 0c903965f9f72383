"""
Validate/normalize step for citizen search parameters.

Runs once at the HTTP boundary. Turns the raw query mapping into a frozen FilterSpec:
- Strips strings; blank values mean "facet not set" (the UI sends "" for "all")
- Enforces date format (YYYY-MM-DD, real calendar dates)
- Upper-cases and checks enum values (gender, marital status, relationship)
- Enforces page in [1, MAX_PAGE] and pageSize in [1, MAX_PAGE_SIZE]
Every offending parameter is reported in a single SearchValidationError.
"""

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from src.core.constants import DATE_FORMAT, DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from src.domain import Gender, MaritalStatus, RelationType

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_PAGINATION_FIELDS = frozenset({"page", "page_size"})


class SearchValidationError(Exception):
    """Raised when search parameters are malformed. ``fields`` holds the offending parameter names."""

    def __init__(self, fields: list[str], details: Optional[dict[str, str]] = None):
        self.fields = sorted(set(fields))
        self.details = details or {}
        super().__init__(f"Invalid search parameters: {', '.join(self.fields)}")


class FilterSpec(BaseModel):
    """Typed search facets plus pagination. Every facet is optional; none set means match all."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        alias_generator=to_camel,
    )

    name_ar: Optional[str] = None
    name_en: Optional[str] = None
    national_id: Optional[str] = None
    passport_number: Optional[str] = None
    family_member_id: Optional[str] = None
    relationship: Optional[RelationType] = None
    birth_date_from: Optional[date] = None
    birth_date_to: Optional[date] = None
    registration_date_from: Optional[date] = None
    registration_date_to: Optional[date] = None
    gender: Optional[Gender] = None
    marital_status: Optional[MaritalStatus] = None
    is_alive: Optional[bool] = None

    page: int = Field(DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @field_validator(
        "birth_date_from",
        "birth_date_to",
        "registration_date_from",
        "registration_date_to",
        mode="before",
    )
    @classmethod
    def _parse_date(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, datetime):
            raise ValueError("expected a date (YYYY-MM-DD), not a timestamp")
        if isinstance(v, date):
            return v
        if not isinstance(v, str) or not _DATE_RE.match(v):
            raise ValueError("expected a date in YYYY-MM-DD format")
        return datetime.strptime(v, DATE_FORMAT).date()

    @field_validator("gender", "marital_status", "relationship", mode="before")
    @classmethod
    def _upper_enum(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def active_facets(self) -> list[str]:
        """Parameter names of the facets that are set (pagination excluded)."""
        return [
            field.alias or name
            for name, field in type(self).model_fields.items()
            if name not in _PAGINATION_FIELDS and getattr(self, name) is not None
        ]


# field name and camelCase alias -> the parameter name reported back to the client
_PARAM_NAMES: dict[str, str] = {
    key: field.alias or name
    for name, field in FilterSpec.model_fields.items()
    for key in (name, field.alias or name)
}


def _clean(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Strip strings and drop blanks so absent and empty parameters behave the same."""
    out: dict[str, Any] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        out[key] = value
    return out


def validate_filters(raw: Optional[Mapping[str, Any]]) -> FilterSpec:
    """
    Parse raw request parameters into a FilterSpec.
    Raises SearchValidationError listing every malformed parameter; nothing is partially applied.
    """
    cleaned = _clean(raw or {})
    try:
        return FilterSpec.model_validate(cleaned)
    except ValidationError as exc:
        fields: list[str] = []
        details: dict[str, str] = {}
        for err in exc.errors():
            loc = err.get("loc") or ("",)
            param = _PARAM_NAMES.get(str(loc[0]), str(loc[0]))
            fields.append(param)
            details.setdefault(param, err.get("msg", "invalid value"))
        raise SearchValidationError(fields, details) from exc
