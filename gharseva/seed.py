import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Worker

logger = logging.getLogger(__name__)

TEST_WORKERS = [
    {
        "name": "Sunita Devi",
        "phone": "+91 98765 11111",
        "work_type": "cooking",
        "work_subcategories": ["vegetarian", "eggitarian"],
        "years_experience": 8,
        "languages_spoken": ["Hindi", "English"],
        "preferred_areas": ["Koramangala", "HSR Layout", "BTM Layout"],
        "working_hours": "morning",
        "gender": "female",
        "age": 35,
        "residential_address": "Koramangala, Bangalore",
    },
    {
        "name": "Ramu Kumar",
        "phone": "+91 98765 22222",
        "work_type": "cooking",
        "work_subcategories": ["vegetarian", "eggitarian", "non_vegetarian"],
        "years_experience": 5,
        "languages_spoken": ["Hindi", "Kannada"],
        "preferred_areas": ["Whitefield", "Marathahalli", "ITPL"],
        "working_hours": "full_day",
        "gender": "male",
        "age": 42,
        "residential_address": "Whitefield, Bangalore",
    },
    {
        "name": "Venkatesh Rao",
        "phone": "+91 98765 33333",
        "work_type": "driving",
        "years_experience": 10,
        "languages_spoken": ["Hindi", "Kannada", "English"],
        "preferred_areas": ["Indiranagar", "Koramangala", "MG Road"],
        "working_hours": "full_day",
        "gender": "male",
        "age": 38,
        "residential_address": "Indiranagar, Bangalore",
    },
    {
        "name": "Mohammad Salim",
        "phone": "+91 98765 44444",
        "work_type": "driving",
        "years_experience": 7,
        "languages_spoken": ["Hindi", "Urdu", "English"],
        "preferred_areas": ["JP Nagar", "Jayanagar", "Banashankari"],
        "working_hours": "evening",
        "gender": "male",
        "age": 45,
        "residential_address": "JP Nagar, Bangalore",
    },
    {
        "name": "Lakshmi Bai",
        "phone": "+91 98765 55555",
        "work_type": "gardening",
        "years_experience": 12,
        "languages_spoken": ["Hindi", "Kannada"],
        "preferred_areas": ["HSR Layout", "Sarjapur", "Bellandur"],
        "working_hours": "morning",
        "gender": "female",
        "age": 48,
        "residential_address": "HSR Layout, Bangalore",
    },
    {
        "name": "Prakash Nair",
        "phone": "+91 98765 66666",
        "work_type": "gardening",
        "years_experience": 6,
        "languages_spoken": ["Hindi", "Malayalam", "English"],
        "preferred_areas": ["Koramangala", "Indiranagar", "Whitefield"],
        "working_hours": "full_day",
        "gender": "male",
        "age": 40,
        "residential_address": "Koramangala, Bangalore",
    },
    {
        "name": "Meena Kumari",
        "phone": "+91 98765 77777",
        "work_type": "domestic_help",
        "work_subcategories": ["brooming", "dusting", "dishwashing"],
        "years_experience": 9,
        "languages_spoken": ["Hindi", "Telugu"],
        "preferred_areas": ["Marathahalli", "Whitefield", "ITPL"],
        "working_hours": "morning",
        "gender": "female",
        "age": 36,
        "residential_address": "Marathahalli, Bangalore",
    },
    {
        "name": "Savitri Devi",
        "phone": "+91 98765 88888",
        "work_type": "domestic_help",
        "work_subcategories": ["laundry", "bathroom", "full-house"],
        "years_experience": 4,
        "languages_spoken": ["Hindi", "Kannada"],
        "preferred_areas": ["Electronic City", "HSR Layout", "BTM Layout"],
        "working_hours": "full_day",
        "gender": "female",
        "age": 32,
        "residential_address": "Electronic City, Bangalore",
    },
    {
        "name": "Rajesh Singh",
        "phone": "+91 98765 99999",
        "work_type": "driving",
        "years_experience": 15,
        "languages_spoken": ["Hindi", "English", "Punjabi"],
        "preferred_areas": ["MG Road", "Brigade Road", "Koramangala"],
        "working_hours": "full_day",
        "gender": "male",
        "age": 50,
        "residential_address": "MG Road, Bangalore",
    },
    {
        "name": "Kamala Bai",
        "phone": "+91 98765 00000",
        "work_type": "domestic_help",
        "work_subcategories": ["brooming", "dusting", "laundry", "dishwashing"],
        "years_experience": 6,
        "languages_spoken": ["Hindi", "Kannada"],
        "preferred_areas": ["Whitefield", "Marathahalli", "ITPL"],
        "working_hours": "morning",
        "gender": "female",
        "age": 38,
        "residential_address": "Whitefield, Bangalore",
    },
]


async def seed_test_workers(db: AsyncSession, roster: list[dict] = TEST_WORKERS) -> dict:
    results = []

    for entry in roster:
        existing = await db.execute(select(Worker.id).where(Worker.phone == entry["phone"]))
        if existing.scalar_one_or_none():
            results.append({"phone": entry["phone"], "success": False, "error": "Worker already exists"})
            continue

        try:
            db.add(Worker(id=str(uuid.uuid4()), status="verified", **entry))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning("seeding %s failed: %s", entry["name"], e)
            results.append({"phone": entry["phone"], "success": False, "error": str(e)})
            continue

        results.append({"phone": entry["phone"], "success": True})

    successful = sum(1 for r in results if r["success"])
    failed = len(results) - successful
    return {
        "message": f"Created {successful} test workers, {failed} failed",
        "results": results,
    }
