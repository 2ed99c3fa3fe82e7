"""
Free-text address resolution.

Addresses are plain strings typed by employers and workers, so everything here
is substring containment against the tables in registry.py. The result is a
small ordinal scale (exact > city > region > none) used both as a hard filter
and as a scoring input.
"""
import enum
from dataclasses import dataclass

from .registry import DEFAULT_REGISTRY, LocationRegistry


class MatchLevel(str, enum.Enum):
    EXACT = "exact"
    CITY = "city"
    REGION = "region"
    NONE = "none"


@dataclass(frozen=True)
class EmployerLocation:
    city: str | None
    region: str | None

    @property
    def resolved(self) -> bool:
        return bool(self.city or self.region)

    @property
    def label(self) -> str | None:
        return self.city or self.region


def norm(s: str | None) -> str:
    return (s or "").strip().lower()


def extract_city(address: str | None, registry: LocationRegistry = DEFAULT_REGISTRY) -> str | None:
    """
    First registry city found inside the address, resolved through aliases.
    With two cities in one address the registry order decides, not the text.
    """
    text = norm(address)
    if not text:
        return None
    for city in registry.cities:
        if city in text:
            return registry.canonical_city(city)
    return None


def extract_region(address: str | None, registry: LocationRegistry = DEFAULT_REGISTRY) -> str | None:
    text = norm(address)
    if not text:
        return None

    for region in registry.regions:
        if region in text:
            return region

    city = extract_city(text, registry)
    if city:
        return registry.city_to_region.get(city)
    return None


def extract_area_keywords(address: str | None, registry: LocationRegistry = DEFAULT_REGISTRY) -> set[str]:
    text = norm(address)
    if not text:
        return set()
    return {kw for kw in registry.area_keywords if kw in text}


def resolve_employer_location(address: str | None, registry: LocationRegistry = DEFAULT_REGISTRY) -> EmployerLocation:
    return EmployerLocation(
        city=extract_city(address, registry),
        region=extract_region(address, registry),
    )


def _worker_places(worker: dict) -> list[str]:
    # preferred areas take precedence over where the worker lives
    places = [a for a in (worker.get("preferred_areas") or []) if norm(a)]
    if norm(worker.get("residential_address")):
        places.append(worker["residential_address"])
    return places


def worker_city(worker: dict, registry: LocationRegistry = DEFAULT_REGISTRY) -> str | None:
    for place in _worker_places(worker):
        city = extract_city(place, registry)
        if city:
            return city
    return None


def worker_region(worker: dict, registry: LocationRegistry = DEFAULT_REGISTRY) -> str | None:
    for place in _worker_places(worker):
        region = extract_region(place, registry)
        if region:
            return region
    return None


def _overlaps(left, right) -> bool:
    return any(a in b or b in a for a in left for b in right)


def match_level(worker: dict, employer_address: str | None, registry: LocationRegistry = DEFAULT_REGISTRY) -> MatchLevel:
    """
    Most specific tier wins:
      - exact: an employer area keyword overlaps a preferred area or the
        worker's residential area keywords (substring either way)
      - city: same resolved city
      - region: same resolved state/region
    """
    employer_areas = extract_area_keywords(employer_address, registry)

    if employer_areas:
        preferred = [norm(a) for a in (worker.get("preferred_areas") or []) if norm(a)]
        if _overlaps(employer_areas, preferred):
            return MatchLevel.EXACT

        residential = extract_area_keywords(worker.get("residential_address"), registry)
        if _overlaps(employer_areas, residential):
            return MatchLevel.EXACT

    employer_city = extract_city(employer_address, registry)
    if employer_city and employer_city == worker_city(worker, registry):
        return MatchLevel.CITY

    employer_region = extract_region(employer_address, registry)
    if employer_region and employer_region == worker_region(worker, registry):
        return MatchLevel.REGION

    return MatchLevel.NONE
