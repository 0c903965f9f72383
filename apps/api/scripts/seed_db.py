"""
Seed the database with citizens, their passports and family relationships for search testing.
Run from apps/api: uv run python scripts/seed_db.py
"""
import asyncio
import logging
import random
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

# Ensure src is importable when run from repo root or apps/api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)

from src.db.session import async_session
from src.db.models import Citizen, Passport, FamilyRelationship
from src.domain import GENDERS, MARITAL_STATUSES, RELATION_TYPES

NUM_CITIZENS = 200
MAX_PASSPORTS_PER_CITIZEN = 2
MAX_RELATIONS_PER_CITIZEN = 3

# (Arabic, English) pairs so both name facets have something to match
FIRST_NAMES_M = [
    ("محمد", "Mohammed"), ("علي", "Ali"), ("أحمد", "Ahmed"), ("عمر", "Omar"),
    ("خالد", "Khaled"), ("يوسف", "Youssef"), ("حسن", "Hassan"), ("إبراهيم", "Ibrahim"),
]
FIRST_NAMES_F = [
    ("فاطمة", "Fatima"), ("مريم", "Maryam"), ("عائشة", "Aisha"), ("سارة", "Sara"),
    ("نور", "Nour"), ("ليلى", "Layla"), ("هدى", "Huda"), ("زينب", "Zainab"),
]
LAST_NAMES = [
    ("الأحمد", "Al-Ahmad"), ("المصري", "Al-Masri"), ("الحسن", "Al-Hassan"),
    ("العلي", "Al-Ali"), ("الخطيب", "Al-Khatib"), ("النجار", "Al-Najjar"),
]
BIRTH_PLACES = ["Tripoli", "Benghazi", "Misrata", "Sabha", "Zawiya"]
OCCUPATIONS = ["Engineer", "Teacher", "Doctor", "Merchant", "Farmer", None]
PASSPORT_TYPES = ["ORDINARY", "DIPLOMATIC", "SERVICE"]


def _random_date(start: date, end: date) -> date:
    return start + timedelta(days=random.randint(0, (end - start).days))


def _citizen_data(i: int) -> dict:
    gender = random.choice(sorted(GENDERS))
    first_ar, first_en = random.choice(FIRST_NAMES_M if gender == "M" else FIRST_NAMES_F)
    last_ar, last_en = random.choice(LAST_NAMES)
    father_ar, father_en = random.choice(FIRST_NAMES_M)
    mother_ar, mother_en = random.choice(FIRST_NAMES_F)
    registered = datetime.now(timezone.utc) - timedelta(days=random.randint(0, 3650))
    return {
        "national_id": f"{1190000000 + i:012d}",
        "first_name_ar": first_ar,
        "last_name_ar": last_ar,
        "father_name_ar": father_ar,
        "mother_name_ar": mother_ar,
        "first_name_en": first_en,
        "last_name_en": last_en,
        "father_name_en": father_en,
        "mother_name_en": mother_en,
        "gender": gender,
        "birth_date": _random_date(date(1940, 1, 1), date(2020, 12, 31)),
        "birth_place": random.choice(BIRTH_PLACES),
        "marital_status": random.choice(sorted(MARITAL_STATUSES)),
        "occupation": random.choice(OCCUPATIONS),
        "nationality": "LY",
        "is_alive": random.random() > 0.1,
        "registration_date": registered,
    }


async def run_seed():
    async with async_session() as session:
        citizens: list[Citizen] = []
        for i in range(NUM_CITIZENS):
            citizen = Citizen(**_citizen_data(i))
            session.add(citizen)
            citizens.append(citizen)
        await session.flush()

        for citizen in citizens:
            for _ in range(random.randint(0, MAX_PASSPORTS_PER_CITIZEN)):
                issued = _random_date(date(2010, 1, 1), date(2025, 12, 31))
                session.add(
                    Passport(
                        citizen_id=citizen.citizen_id,
                        passport_number=f"P{random.randint(0, 99_999_999):08d}",
                        passport_type=random.choice(PASSPORT_TYPES),
                        issue_date=issued,
                        expiry_date=issued + timedelta(days=365 * 10),
                        status="ACTIVE",
                    )
                )
            for _ in range(random.randint(0, MAX_RELATIONS_PER_CITIZEN)):
                relative = random.choice(citizens)
                if relative is citizen:
                    continue
                session.add(
                    FamilyRelationship(
                        citizen_id=citizen.citizen_id,
                        related_citizen_id=relative.national_id,
                        relationship_type=random.choice(sorted(RELATION_TYPES)),
                    )
                )

        await session.commit()

    logger.info("Done. Seeded %s citizens", NUM_CITIZENS)
    logger.info("  Passports: 0-%s per citizen", MAX_PASSPORTS_PER_CITIZEN)
    logger.info("  Family relationships: 0-%s per citizen", MAX_RELATIONS_PER_CITIZEN)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Starting citizen seed: %s citizens", NUM_CITIZENS)
    asyncio.run(run_seed())
