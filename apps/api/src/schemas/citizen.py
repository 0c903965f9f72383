from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PassportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    passport_id: Optional[int] = None
    passport_number: str
    passport_type: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[str] = None


class FamilyRelationshipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    related_citizen_id: str
    relationship_type: str


class CitizenResponse(BaseModel):
    """Citizen row as returned by search. Field names match the registry UI (snake_case)."""

    model_config = ConfigDict(from_attributes=True)

    citizen_id: Optional[int] = None
    national_id: str
    first_name_ar: Optional[str] = None
    last_name_ar: Optional[str] = None
    father_name_ar: Optional[str] = None
    mother_name_ar: Optional[str] = None
    first_name_en: Optional[str] = None
    last_name_en: Optional[str] = None
    father_name_en: Optional[str] = None
    mother_name_en: Optional[str] = None
    gender: Optional[str] = None
    birth_date: Optional[date] = None
    birth_place: Optional[str] = None
    marital_status: Optional[str] = None
    occupation: Optional[str] = None
    nationality: Optional[str] = None
    is_alive: bool = True
    registration_date: Optional[datetime] = None
    passports: list[PassportResponse] = []
    family_relationships: list[FamilyRelationshipResponse] = []
