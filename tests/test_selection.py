"""Tests for the worker selection write path."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from gharseva import selection
from gharseva.errors import SelectionConflict
from gharseva.location import MatchLevel
from gharseva.models import Booking, Worker
from gharseva.selection import request_from_booking, select_worker
from tests.helpers import make_worker


async def seed(session_factory, worker: dict, *bookings: dict):
    async with session_factory() as db:
        db.add(Worker(**worker))
        for b in bookings:
            db.add(Booking(**b))
        await db.commit()


def booking(booking_id: str, **overrides) -> dict:
    data = {
        "id": booking_id,
        "service_type": "cleaning",
        "preferred_time": "morning",
        "address": "HSR Layout, Bangalore",
        "sub_services": None,
        "status": "pending",
    }
    data.update(overrides)
    return data


def test_request_from_booking_reads_details():
    b = Booking(**booking(
        "b-1",
        service_type="cooking",
        preferred_time=None,
        sub_services={
            "serviceDetails": {"dietaryPreference": "egg"},
            "subServices": [{"id": "laundry", "name": "Laundry"}, {"name": "no id"}],
        },
    ))
    request = request_from_booking(b)
    assert request.service_type == "cooking"
    assert request.preferred_time == "flexible"
    assert request.dietary_preference == "egg"
    assert [s.id for s in request.sub_services] == ["laundry"]


@pytest.mark.asyncio
async def test_trial_and_call_dates(session_factory):
    await seed(session_factory, make_worker(id="w-1", preferred_areas=["HSR Layout"]), booking("b-1"))
    now = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)

    async with session_factory() as db:
        result = await select_worker(db, "b-1", "w-1", now=now)

    assert result["trial_start_date"] == now
    assert result["trial_end_date"] == now + timedelta(days=7)
    assert result["scheduled_call_date"] == now + timedelta(hours=24)


@pytest.mark.asyncio
async def test_conditional_update_rejects_already_claimed_worker(session_factory, monkeypatch):
    # another booking claims the worker after eligibility was checked
    await seed(session_factory, make_worker(id="w-1", assigned_customer_id="b-other"), booking("b-1"))
    monkeypatch.setattr(selection, "check_worker", lambda worker, request: (None, MatchLevel.CITY))

    async with session_factory() as db:
        with pytest.raises(SelectionConflict):
            await select_worker(db, "b-1", "w-1")

    async with session_factory() as db:
        worker = (await db.execute(select(Worker).where(Worker.id == "w-1"))).scalar_one()
        b = (await db.execute(select(Booking).where(Booking.id == "b-1"))).scalar_one()
    assert worker.assigned_customer_id == "b-other"
    assert b.status == "pending"


@pytest.mark.asyncio
async def test_confirmed_booking_cannot_select_again(session_factory):
    await seed(
        session_factory,
        make_worker(id="w-1"),
        booking("b-1", status="confirmed", assigned_worker_id="w-0"),
    )
    async with session_factory() as db:
        with pytest.raises(SelectionConflict):
            await select_worker(db, "b-1", "w-1")


def test_request_from_booking_tolerates_loose_stored_json():
    b = Booking(**booking(
        "b-1",
        sub_services={
            "serviceDetails": "n/a",
            "subServices": [{"id": 7}, {"id": "laundry", "name": None}, {"id": ""}, "brooming"],
        },
    ))
    request = request_from_booking(b)
    assert [(s.id, s.name) for s in request.sub_services] == [("7", ""), ("laundry", "")]
    assert request.dietary_preference is None


@pytest.mark.asyncio
async def test_select_with_null_sub_service_name(session_factory):
    await seed(
        session_factory,
        make_worker(id="w-1", preferred_areas=["HSR Layout"]),
        booking("b-1", sub_services={"subServices": [{"id": "laundry", "name": None}]}),
    )
    async with session_factory() as db:
        result = await select_worker(db, "b-1", "w-1")
    assert result["status"] == "confirmed"
