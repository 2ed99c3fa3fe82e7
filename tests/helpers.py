"""Builders shared across the test modules."""

from gharseva.schemas import MatchRequest

_counter = {"n": 0}


def make_worker(**overrides) -> dict:
    _counter["n"] += 1
    worker = {
        "id": f"w-{_counter['n']:03d}",
        "name": f"Worker {_counter['n']}",
        "phone": f"+91 90000 {_counter['n']:05d}",
        "work_type": "domestic_help",
        "work_subcategories": ["brooming", "dusting", "laundry"],
        "years_experience": 4,
        "languages_spoken": ["Hindi"],
        "preferred_areas": ["Koramangala"],
        "residential_address": "Koramangala, Bangalore",
        "working_hours": "morning",
        "gender": "female",
        "status": "verified",
        "assigned_customer_id": None,
    }
    worker.update(overrides)
    return worker


def make_request(**overrides) -> MatchRequest:
    data = {
        "bookingId": "b-1",
        "serviceType": "cleaning",
        "preferredTime": "morning",
        "address": "123 Koramangala Main Rd, Bangalore",
    }
    data.update(overrides)
    return MatchRequest(**data)
