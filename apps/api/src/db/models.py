from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Boolean,
    Integer,
    Date,
    DateTime,
    ForeignKey,
    Index,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


class Citizen(Base):
    """Registered person. Names are stored in Arabic (_ar) and English (_en)."""
    __tablename__ = "citizens"

    citizen_id = Column(Integer, primary_key=True, autoincrement=True)
    national_id = Column(String(50), unique=True, nullable=False, index=True)

    first_name_ar = Column(String(100), nullable=True)
    last_name_ar = Column(String(100), nullable=True)
    father_name_ar = Column(String(100), nullable=True)
    mother_name_ar = Column(String(100), nullable=True)
    first_name_en = Column(String(100), nullable=True)
    last_name_en = Column(String(100), nullable=True)
    father_name_en = Column(String(100), nullable=True)
    mother_name_en = Column(String(100), nullable=True)

    gender = Column(String(1), nullable=True)  # M / F
    birth_date = Column(Date, nullable=True)
    birth_place = Column(String(255), nullable=True)
    marital_status = Column(String(20), nullable=True)
    occupation = Column(String(255), nullable=True)
    nationality = Column(String(100), nullable=True)
    is_alive = Column(Boolean, default=True, nullable=False)

    registration_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    passports = relationship(
        "Passport", back_populates="citizen", cascade="all, delete-orphan"
    )
    family_relationships = relationship(
        "FamilyRelationship", back_populates="citizen", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_citizens_registration_date", "registration_date"),
        Index("ix_citizens_birth_date", "birth_date"),
    )


class Passport(Base):
    """Travel document issued to a citizen."""
    __tablename__ = "passports"

    passport_id = Column(Integer, primary_key=True, autoincrement=True)
    citizen_id = Column(Integer, ForeignKey("citizens.citizen_id", ondelete="CASCADE"), nullable=False)
    passport_number = Column(String(50), nullable=False)
    passport_type = Column(String(30), nullable=True)  # ORDINARY, DIPLOMATIC, ...
    issue_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True)
    status = Column(String(30), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    citizen = relationship("Citizen", back_populates="passports")

    __table_args__ = (
        Index("ix_passports_citizen_id", "citizen_id"),
        Index("ix_passports_passport_number", "passport_number"),
    )


class FamilyRelationship(Base):
    """Directed link from a citizen to a relative, tagged SPOUSE / CHILD / PARENT / SIBLING / OTHER."""
    __tablename__ = "family_relationships"

    relationship_id = Column(Integer, primary_key=True, autoincrement=True)
    citizen_id = Column(Integer, ForeignKey("citizens.citizen_id", ondelete="CASCADE"), nullable=False)
    related_citizen_id = Column(String(50), nullable=False)  # related person's identifier
    relationship_type = Column(String(20), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    citizen = relationship("Citizen", back_populates="family_relationships")

    __table_args__ = (
        Index("ix_family_relationships_citizen_id", "citizen_id"),
        Index("ix_family_relationships_related", "related_citizen_id", "relationship_type"),
    )
