import logging

from .config import MATCH_LIMIT
from .eligibility import FilterStage, filter_eligible
from .location import EmployerLocation
from .schemas import MatchRequest, MatchResponse, WorkerSummary
from .scoring import score

logger = logging.getLogger(__name__)

# result contract: never more than five summaries, whatever MATCH_LIMIT says
MAX_MATCHES = 5

LOCATION_UNKNOWN_MESSAGE = (
    "Unable to determine your location. Please provide a valid city or area "
    "in your address for worker matching."
)

_EMPTY_MESSAGES = {
    FilterStage.AVAILABILITY: "No available workers found for this service type",
    FilterStage.CAPABILITY: "No workers found matching your service requirements",
}

PUBLIC_FIELDS = (
    "id",
    "name",
    "phone",
    "work_type",
    "work_subcategories",
    "years_experience",
    "languages_spoken",
    "preferred_areas",
    "working_hours",
    "gender",
)


def no_match(message: str) -> MatchResponse:
    return MatchResponse(success=True, matched_workers=[], message=message)


def empty_message(stage: FilterStage, location: EmployerLocation) -> str:
    if stage == FilterStage.LOCATION:
        return f"No workers found in {location.label}. We're expanding our network - please check back later."
    return _EMPTY_MESSAGES[stage]


def summarize(worker: dict, match_score: int) -> WorkerSummary:
    data = {k: worker.get(k) for k in PUBLIC_FIELDS}
    return WorkerSummary(**data, match_score=match_score)


def rank(scored: list[tuple[dict, int]], limit: int = MATCH_LIMIT) -> list[tuple[dict, int]]:
    """
    Highest score first; equal scores keep their pool position, which the
    worker store hands out ordered by worker id.
    """
    limit = max(0, min(limit, MAX_MATCHES))
    order = sorted(range(len(scored)), key=lambda i: (-scored[i][1], i))
    return [scored[i] for i in order[:limit]]


def match_workers(pool: list[dict], request: MatchRequest, location: EmployerLocation) -> MatchResponse:
    if not location.resolved:
        return no_match(LOCATION_UNKNOWN_MESSAGE)

    outcome = filter_eligible(pool, request)
    if outcome.emptied_at is not None:
        logger.info("no matches: pool emptied at %s stage", outcome.emptied_at.value)
        return no_match(empty_message(outcome.emptied_at, location))

    scored = [(worker, score(worker, request, level)) for worker, level in outcome.eligible]
    top = rank(scored)

    logger.info(
        "returning %d matched workers from %s: %s",
        len(top),
        location.label,
        [(w.get("id"), s) for w, s in top],
    )
    return MatchResponse(
        success=True,
        matched_workers=[summarize(w, s) for w, s in top],
        message=f"Found {len(top)} matching workers in {location.label}",
    )
