import math

from .eligibility import capability_requirement, required_work_type, worker_subcategories
from .location import MatchLevel, norm
from .registry import DEFAULT_TIME, TIME_TO_HOURS
from .schemas import MatchRequest

MAX_POINTS = {
    "service_type": 25,
    "capability": 25,
    "location": 30,
    "working_hours": 10,
    "experience": 10,
}

LOCATION_POINTS = {
    MatchLevel.EXACT: 30,
    MatchLevel.CITY: 25,
    MatchLevel.REGION: 15,
    MatchLevel.NONE: 0,
}

UNCONSTRAINED_CAPABILITY_POINTS = 15
FLEXIBLE_HOURS_POINTS = 5


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def service_type_score(worker: dict, request: MatchRequest) -> int:
    work_type = required_work_type(request.service_type)
    if work_type and worker.get("work_type") == work_type:
        return MAX_POINTS["service_type"]
    return 0


def capability_score(worker: dict, request: MatchRequest) -> int:
    requirement = capability_requirement(request)
    if requirement is None:
        return UNCONSTRAINED_CAPABILITY_POINTS

    subcategories = worker_subcategories(worker)
    matched = len(requirement.ids & subcategories)
    return _round_half_up(MAX_POINTS["capability"] * matched / len(requirement.ids))


def location_score(level: MatchLevel) -> int:
    return LOCATION_POINTS.get(level, 0)


def working_hours_score(worker: dict, request: MatchRequest) -> int:
    acceptable = TIME_TO_HOURS.get(norm(request.preferred_time)) or TIME_TO_HOURS[DEFAULT_TIME]
    hours = norm(worker.get("working_hours"))
    if not hours:
        return FLEXIBLE_HOURS_POINTS
    if hours in acceptable:
        return MAX_POINTS["working_hours"]
    return 0


def experience_score(years) -> int:
    years = years or 0
    if years >= 5:
        return 10
    if years >= 3:
        return 7
    if years >= 1:
        return 4
    return 0


def score_breakdown(worker: dict, request: MatchRequest, level: MatchLevel) -> dict:
    return {
        "service_type": service_type_score(worker, request),
        "capability": capability_score(worker, request),
        "location": location_score(level),
        "working_hours": working_hours_score(worker, request),
        "experience": experience_score(worker.get("years_experience")),
    }


def score(worker: dict, request: MatchRequest, level: MatchLevel) -> int:
    total = sum(score_breakdown(worker, request, level).values())
    return max(0, min(total, 100))
