"""
Worker selection: the write path that turns a match into an assignment.

Match lists are advisory snapshots; another booking may claim a worker in
between. Eligibility is therefore re-checked here, and the assignment itself
is a conditional UPDATE that only succeeds while the worker is still
unassigned.
"""
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from .config import TRIAL_DAYS, CALL_DELAY_HOURS
from .eligibility import check_worker
from .errors import BookingNotFound, WorkerNotFound, SelectionConflict
from .models import Worker, Booking
from .schemas import MatchRequest
from .scoring import score
from .services import worker_to_dict, dietary_preference_from, sub_service_items_from

logger = logging.getLogger(__name__)


def request_from_booking(booking: Booking) -> MatchRequest:
    return MatchRequest(
        booking_id=booking.id,
        service_type=booking.service_type,
        preferred_time=booking.preferred_time or "flexible",
        address=booking.address or "",
        sub_services=sub_service_items_from(booking.sub_services),
        dietary_preference=dietary_preference_from(booking.sub_services),
    )


async def select_worker(db: AsyncSession, booking_id: str, worker_id: str, now: datetime | None = None) -> dict:
    now = now or datetime.now(timezone.utc)

    booking = (await db.execute(select(Booking).where(Booking.id == booking_id))).scalar_one_or_none()
    if not booking:
        raise BookingNotFound(booking_id)
    if booking.status != "pending" or booking.assigned_worker_id:
        raise SelectionConflict(f"Booking is already {booking.status}")

    worker = (await db.execute(select(Worker).where(Worker.id == worker_id))).scalar_one_or_none()
    if not worker:
        raise WorkerNotFound(worker_id)

    request = request_from_booking(booking)
    worker_data = worker_to_dict(worker)
    failed_stage, level = check_worker(worker_data, request)
    if failed_stage is not None:
        raise SelectionConflict(f"Worker is no longer eligible for this booking ({failed_stage.value})")

    # stored score is recomputed, never taken from the client's match list
    match_score = score(worker_data, request, level)

    trial_start = now
    trial_end = now + timedelta(days=TRIAL_DAYS)
    call_at = now + timedelta(hours=CALL_DELAY_HOURS)

    claimed = await db.execute(
        update(Worker)
        .where(
            Worker.id == worker_id,
            Worker.assigned_customer_id.is_(None),
            func.lower(Worker.status) == "verified",
        )
        .values(
            assigned_customer_id=booking_id,
            trial_start_date=trial_start,
            trial_end_date=trial_end,
            scheduled_call_date=call_at,
            match_score=match_score,
        )
        .execution_options(synchronize_session=False)
    )
    if claimed.rowcount != 1:
        await db.rollback()
        raise SelectionConflict("Worker has already been assigned to another booking")

    confirmed = await db.execute(
        update(Booking)
        .where(
            Booking.id == booking_id,
            Booking.status == "pending",
            Booking.assigned_worker_id.is_(None),
        )
        .values(
            status="confirmed",
            assigned_worker_id=worker_id,
            call_scheduled_at=call_at,
            call_status="scheduled",
        )
        .execution_options(synchronize_session=False)
    )
    if confirmed.rowcount != 1:
        await db.rollback()
        raise SelectionConflict("Booking was confirmed concurrently")

    await db.commit()
    logger.info("worker %s assigned to booking %s (score %d)", worker_id, booking_id, match_score)

    return {
        "booking_id": booking_id,
        "worker_id": worker_id,
        "status": "confirmed",
        "match_score": match_score,
        "trial_start_date": trial_start,
        "trial_end_date": trial_end,
        "scheduled_call_date": call_at,
    }
