from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Worker, Booking

WORKER_FIELDS = (
    "id",
    "name",
    "phone",
    "work_type",
    "work_subcategories",
    "years_experience",
    "languages_spoken",
    "preferred_areas",
    "residential_address",
    "working_hours",
    "gender",
    "status",
    "assigned_customer_id",
)


def worker_to_dict(worker: Worker) -> dict:
    return {k: getattr(worker, k) for k in WORKER_FIELDS}


async def fetch_candidate_workers(db: AsyncSession, work_type: str) -> list[dict]:
    """
    Verified, unassigned workers of one work type, ordered by id so that
    ranking ties resolve the same way on every call.
    """
    result = await db.execute(
        select(Worker)
        .where(
            Worker.work_type == work_type,
            func.lower(Worker.status) == "verified",
            Worker.assigned_customer_id.is_(None),
        )
        .order_by(Worker.id)
    )
    return [worker_to_dict(w) for w in result.scalars().all()]


async def fetch_booking_sub_services(db: AsyncSession, booking_id: str) -> dict | None:
    result = await db.execute(select(Booking.sub_services).where(Booking.id == booking_id))
    return result.scalar_one_or_none()


def dietary_preference_from(sub_services: dict | None) -> str | None:
    if not isinstance(sub_services, dict):
        return None
    details = sub_services.get("serviceDetails")
    if not isinstance(details, dict):
        return None
    preference = details.get("dietaryPreference")
    return str(preference) if preference else None


def sub_service_items_from(sub_services: dict | None) -> list[dict]:
    if not isinstance(sub_services, dict):
        return []
    items = sub_services.get("subServices")
    if not isinstance(items, list):
        return []
    # stored JSON is loosely typed: numeric ids and null names occur
    return [
        {"id": str(i["id"]), "name": str(i.get("name") or "")}
        for i in items
        if isinstance(i, dict) and i.get("id") not in (None, "")
    ]
