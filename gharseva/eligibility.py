import enum
import logging
from dataclasses import dataclass, field

from .location import MatchLevel, match_level, norm
from .registry import DIETARY_PREFERENCE_MAP, SERVICE_TO_WORK_TYPE
from .schemas import MatchRequest

logger = logging.getLogger(__name__)


class FilterStage(str, enum.Enum):
    AVAILABILITY = "availability"  # work type / status / assignment
    CAPABILITY = "capability"
    LOCATION = "location"


@dataclass(frozen=True)
class CapabilityRequirement:
    kind: str  # "dietary" or "sub_services"
    ids: frozenset


@dataclass
class FilterOutcome:
    eligible: list = field(default_factory=list)  # (worker, MatchLevel) in pool order
    emptied_at: FilterStage | None = None


def required_work_type(service_type: str | None) -> str | None:
    return SERVICE_TO_WORK_TYPE.get(norm(service_type))


def dietary_tag(preference: str | None) -> str | None:
    return DIETARY_PREFERENCE_MAP.get(norm(preference))


def capability_requirement(request: MatchRequest) -> CapabilityRequirement | None:
    """
    Cooking requests constrain by dietary tag, cleaning requests by sub-service
    ids. Preferences with no known tag are treated as unconstrained.
    """
    service_type = norm(request.service_type)

    if service_type == "cooking":
        tag = dietary_tag(request.dietary_preference)
        if tag:
            return CapabilityRequirement("dietary", frozenset({tag}))

    if service_type == "cleaning":
        ids = frozenset(s.id for s in request.sub_services if s.id)
        if ids:
            return CapabilityRequirement("sub_services", ids)

    return None


def worker_subcategories(worker: dict) -> set[str]:
    return set(worker.get("work_subcategories") or [])


def is_available(worker: dict, work_type: str | None) -> bool:
    return (
        work_type is not None
        and worker.get("work_type") == work_type
        and norm(worker.get("status")) == "verified"
        and not worker.get("assigned_customer_id")
    )


def has_capabilities(worker: dict, requirement: CapabilityRequirement | None) -> bool:
    if requirement is None:
        return True
    subcategories = worker_subcategories(worker)
    if not subcategories:
        return False
    return requirement.ids <= subcategories


def check_worker(worker: dict, request: MatchRequest) -> tuple[FilterStage | None, MatchLevel]:
    """Single-worker version of the filter; returns the failing stage, if any."""
    if not is_available(worker, required_work_type(request.service_type)):
        return FilterStage.AVAILABILITY, MatchLevel.NONE
    if not has_capabilities(worker, capability_requirement(request)):
        return FilterStage.CAPABILITY, MatchLevel.NONE
    level = match_level(worker, request.address)
    if level == MatchLevel.NONE:
        return FilterStage.LOCATION, level
    return None, level


def filter_eligible(pool: list[dict], request: MatchRequest) -> FilterOutcome:
    # cheap checks first, address parsing last
    work_type = required_work_type(request.service_type)
    available = [w for w in pool if is_available(w, work_type)]
    logger.info("%d of %d workers are verified, unassigned %s", len(available), len(pool), work_type)
    if not available:
        return FilterOutcome(emptied_at=FilterStage.AVAILABILITY)

    requirement = capability_requirement(request)
    capable = []
    for worker in available:
        if has_capabilities(worker, requirement):
            capable.append(worker)
        else:
            logger.info("worker %s filtered out: subcategory mismatch", worker.get("id"))
    if not capable:
        return FilterOutcome(emptied_at=FilterStage.CAPABILITY)

    located = []
    for worker in capable:
        level = match_level(worker, request.address)
        if level == MatchLevel.NONE:
            logger.info("worker %s filtered out: no location match", worker.get("id"))
            continue
        logger.info("worker %s matched at %s level", worker.get("id"), level.value)
        located.append((worker, level))
    if not located:
        return FilterOutcome(emptied_at=FilterStage.LOCATION)

    return FilterOutcome(eligible=located)
