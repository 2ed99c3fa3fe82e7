import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from . import config
from .db import get_db
from .eligibility import FilterStage, required_work_type
from .errors import BookingNotFound, WorkerNotFound, SelectionConflict
from .location import resolve_employer_location, norm
from .rabbitmq import publisher
from .ranking import LOCATION_UNKNOWN_MESSAGE, empty_message, match_workers, no_match
from .schemas import MatchRequest, MatchResponse, SelectWorker, SelectWorkerResponse
from .seed import seed_test_workers
from .selection import select_worker
from .services import fetch_candidate_workers, fetch_booking_sub_services, dietary_preference_from

logger = logging.getLogger(__name__)

router = APIRouter()


def failure(error: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "matchedWorkers": []},
    )


@router.post("/match-workers", response_model=MatchResponse)
async def match(data: MatchRequest, db: AsyncSession = Depends(get_db)):
    logger.info(
        "match request booking=%s service=%s time=%s address=%r sub_services=%s",
        data.booking_id,
        data.service_type,
        data.preferred_time,
        data.address,
        [s.id for s in data.sub_services],
    )

    try:
        # 1) employer location must resolve before touching the store
        location = resolve_employer_location(data.address)
        logger.info("employer city=%s region=%s", location.city, location.region)
        if not location.resolved:
            return no_match(LOCATION_UNKNOWN_MESSAGE)

        work_type = required_work_type(data.service_type)
        if work_type is None:
            return no_match(empty_message(FilterStage.AVAILABILITY, location))

        # 2) cooking bookings carry the dietary preference in their details
        if norm(data.service_type) == "cooking" and not data.dietary_preference:
            sub_services = await fetch_booking_sub_services(db, data.booking_id)
            data = data.model_copy(update={"dietary_preference": dietary_preference_from(sub_services)})
            logger.info("dietary preference: %s", data.dietary_preference)

        # 3) verified, unassigned workers of the requested type
        pool = await fetch_candidate_workers(db, work_type)
        return match_workers(pool, data, location)
    except Exception as e:
        logger.exception("error in match-workers")
        return failure(str(e) or "Unknown error occurred", 500)


@router.post("/bookings/{booking_id}/select-worker", response_model=SelectWorkerResponse)
async def select(booking_id: str, data: SelectWorker, db: AsyncSession = Depends(get_db)):
    try:
        result = await select_worker(db, booking_id, data.worker_id)
    except BookingNotFound:
        raise HTTPException(status_code=404, detail="Booking not found")
    except WorkerNotFound:
        raise HTTPException(status_code=404, detail="Worker not found")
    except SelectionConflict as e:
        raise HTTPException(status_code=409, detail=str(e))

    await publisher.emit(
        "worker.assigned",
        {
            "booking_id": result["booking_id"],
            "worker_id": result["worker_id"],
            "match_score": result["match_score"],
            "trial_start_date": result["trial_start_date"].isoformat(),
            "trial_end_date": result["trial_end_date"].isoformat(),
            "scheduled_call_date": result["scheduled_call_date"].isoformat(),
        },
    )

    return SelectWorkerResponse(**result)


@router.post("/seed-test-workers")
async def seed(db: AsyncSession = Depends(get_db)):
    if not config.ENABLE_SEED_ENDPOINT:
        raise HTTPException(status_code=404, detail="Not Found")
    return await seed_test_workers(db)
