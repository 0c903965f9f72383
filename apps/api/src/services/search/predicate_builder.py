"""
FilterSpec -> Predicate.

One sub-predicate per facet group, all groups ANDed. The two name groups are the
only OR-groups: each name fragment must appear in at least one name part of its own
script, and when both fragments are given a citizen must satisfy both
(AND of the two ORs), not either one.
"""

from datetime import date, datetime, time, timezone
from typing import Optional

from src.domain import FAMILY_RELATIONSHIPS, NAME_FIELDS_AR, NAME_FIELDS_EN, PASSPORTS
from .filter_validator import FilterSpec
from .predicates import (
    MATCH_ALL,
    Between,
    Contains,
    Eq,
    Exists,
    Predicate,
    all_of,
    any_of,
)


def _name_group(fields: tuple[str, ...], fragment: Optional[str]) -> Optional[Predicate]:
    if fragment is None:
        return None
    return any_of(*(Contains(f, fragment) for f in fields))


def _date_range(field: str, lower: Optional[date], upper: Optional[date]) -> Optional[Predicate]:
    if lower is None and upper is None:
        return None
    return Between(field, lower=lower, upper=upper)


def _timestamp_range(field: str, lower: Optional[date], upper: Optional[date]) -> Optional[Predicate]:
    """Date bounds on a timestamp column: lower from start of day, upper through end of day (UTC)."""
    if lower is None and upper is None:
        return None
    return Between(
        field,
        lower=datetime.combine(lower, time.min, tzinfo=timezone.utc) if lower is not None else None,
        upper=datetime.combine(upper, time.max, tzinfo=timezone.utc) if upper is not None else None,
    )


def _family_relation(member_id: Optional[str], relation: Optional[str]) -> Optional[Predicate]:
    if member_id is None and relation is None:
        return None
    conds: list[Predicate] = []
    if member_id is not None:
        conds.append(Eq("related_citizen_id", member_id))
    if relation is not None:
        conds.append(Eq("relationship_type", relation))
    return Exists(FAMILY_RELATIONSHIPS, all_of(*conds))


def build_predicate(spec: FilterSpec) -> Predicate:
    """Compose every set facet of ``spec`` into one predicate. No facets -> MATCH_ALL. Never raises."""
    groups: list[Optional[Predicate]] = [
        _name_group(NAME_FIELDS_AR, spec.name_ar),
        _name_group(NAME_FIELDS_EN, spec.name_en),
        Contains("national_id", spec.national_id) if spec.national_id is not None else None,
        (
            Exists(PASSPORTS, Contains("passport_number", spec.passport_number))
            if spec.passport_number is not None
            else None
        ),
        _family_relation(spec.family_member_id, spec.relationship),
        _date_range("birth_date", spec.birth_date_from, spec.birth_date_to),
        _timestamp_range("registration_date", spec.registration_date_from, spec.registration_date_to),
        Eq("gender", spec.gender) if spec.gender is not None else None,
        Eq("marital_status", spec.marital_status) if spec.marital_status is not None else None,
        Eq("is_alive", spec.is_alive) if spec.is_alive is not None else None,
    ]
    present = [g for g in groups if g is not None]
    if not present:
        return MATCH_ALL
    return all_of(*present)
