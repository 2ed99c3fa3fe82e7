"""
Static lookup tables used by matching.

Everything here is data: the resolver and scorer only iterate and look up,
so new cities, aliases or neighbourhoods are added by extending these tables.
Iteration order matters for city extraction (first substring hit wins).
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


# ---- Service / capability tables ----

SERVICE_TO_WORK_TYPE: Mapping[str, str] = MappingProxyType({
    "cleaning": "domestic_help",
    "cooking": "cooking",
    "driver": "driving",
    "gardening": "gardening",
})

# booking form value -> worker subcategory; jain is served by vegetarian cooks
DIETARY_PREFERENCE_MAP: Mapping[str, str] = MappingProxyType({
    "veg": "vegetarian",
    "egg": "eggitarian",
    "nonveg": "non_vegetarian",
    "jain": "vegetarian",
})

TIME_TO_HOURS: Mapping[str, frozenset] = MappingProxyType({
    "morning": frozenset({"morning", "full_day"}),
    "midday": frozenset({"morning", "full_day"}),
    "afternoon": frozenset({"evening", "full_day"}),
    "evening": frozenset({"evening", "full_day"}),
    "flexible": frozenset({"morning", "evening", "full_day"}),
})

DEFAULT_TIME = "flexible"


# ---- Geography ----

@dataclass(frozen=True)
class LocationRegistry:
    cities: Tuple[str, ...]
    city_aliases: Mapping[str, str]
    regions: Tuple[str, ...]
    city_to_region: Mapping[str, str]
    area_keywords: Tuple[str, ...]

    def canonical_city(self, name: str) -> str:
        return self.city_aliases.get(name, name)


_CITIES = (
    "delhi", "new delhi", "mumbai", "bangalore", "bengaluru", "chennai", "kolkata",
    "hyderabad", "pune", "ahmedabad", "jaipur", "lucknow", "noida", "gurgaon",
    "gurugram", "chandigarh", "kochi", "indore", "nagpur", "ghaziabad", "faridabad",
    # Uttarakhand
    "dehradun", "haridwar", "rishikesh", "roorkee", "haldwani", "nainital", "mussoorie",
    # Uttar Pradesh
    "agra", "varanasi", "kanpur", "allahabad", "prayagraj", "meerut", "mathura",
    # Rajasthan
    "udaipur", "jodhpur", "ajmer", "kota", "bikaner",
    # Gujarat
    "surat", "vadodara", "rajkot", "gandhinagar",
    # Madhya Pradesh
    "bhopal", "gwalior", "jabalpur",
    # others
    "visakhapatnam", "vijayawada", "coimbatore", "madurai", "mysore", "mangalore",
    "bhubaneswar", "patna", "ranchi", "raipur", "thiruvananthapuram", "kozhikode",
)

_CITY_ALIASES = {
    "bengaluru": "bangalore",
    "new delhi": "delhi",
    "gurugram": "gurgaon",
    "prayagraj": "allahabad",
}

_REGIONS = (
    "uttarakhand", "delhi ncr", "haryana", "uttar pradesh", "rajasthan", "punjab",
    "maharashtra", "karnataka", "tamil nadu", "kerala", "telangana", "andhra pradesh",
    "west bengal", "gujarat", "madhya pradesh", "bihar", "jharkhand", "odisha",
    "chhattisgarh", "assam", "himachal pradesh", "jammu", "kashmir", "goa",
)

_CITY_TO_REGION = {
    "delhi": "delhi ncr",
    "noida": "delhi ncr",
    "gurgaon": "delhi ncr",
    "ghaziabad": "delhi ncr",
    "faridabad": "delhi ncr",
    "mumbai": "maharashtra",
    "pune": "maharashtra",
    "nagpur": "maharashtra",
    "bangalore": "karnataka",
    "mysore": "karnataka",
    "mangalore": "karnataka",
    "chennai": "tamil nadu",
    "coimbatore": "tamil nadu",
    "madurai": "tamil nadu",
    "hyderabad": "telangana",
    "kolkata": "west bengal",
    "ahmedabad": "gujarat",
    "surat": "gujarat",
    "vadodara": "gujarat",
    "rajkot": "gujarat",
    "gandhinagar": "gujarat",
    "jaipur": "rajasthan",
    "udaipur": "rajasthan",
    "jodhpur": "rajasthan",
    "ajmer": "rajasthan",
    "kota": "rajasthan",
    "bikaner": "rajasthan",
    "lucknow": "uttar pradesh",
    "kanpur": "uttar pradesh",
    "varanasi": "uttar pradesh",
    "agra": "uttar pradesh",
    "allahabad": "uttar pradesh",
    "meerut": "uttar pradesh",
    "mathura": "uttar pradesh",
    "dehradun": "uttarakhand",
    "haridwar": "uttarakhand",
    "rishikesh": "uttarakhand",
    "roorkee": "uttarakhand",
    "haldwani": "uttarakhand",
    "nainital": "uttarakhand",
    "mussoorie": "uttarakhand",
    "chandigarh": "punjab",
    "kochi": "kerala",
    "thiruvananthapuram": "kerala",
    "kozhikode": "kerala",
    "bhopal": "madhya pradesh",
    "indore": "madhya pradesh",
    "gwalior": "madhya pradesh",
    "jabalpur": "madhya pradesh",
    "visakhapatnam": "andhra pradesh",
    "vijayawada": "andhra pradesh",
    "patna": "bihar",
    "ranchi": "jharkhand",
    "bhubaneswar": "odisha",
    "raipur": "chhattisgarh",
}

# neighbourhood-level only; cities and states are resolved separately
_AREA_KEYWORDS = (
    # Delhi NCR
    "dwarka", "rohini", "pitampura", "janakpuri", "lajpat nagar", "saket",
    "greater kailash", "vasant kunj", "mayur vihar", "preet vihar", "karol bagh",
    # Bangalore
    "koramangala", "hsr layout", "whitefield", "indiranagar", "jayanagar",
    "marathahalli", "electronic city", "btm layout", "jp nagar", "hebbal",
    "yelahanka", "banashankari", "rajajinagar", "malleswaram", "basaveshwaranagar",
    "panathur", "kadabeesanahalli", "bellandur", "sarjapur", "itpl", "mg road",
    "brigade road",
    # Mumbai
    "andheri", "bandra", "juhu", "powai", "thane", "navi mumbai", "malad",
    "goregaon", "borivali", "kandivali", "dadar", "lower parel", "worli",
)

DEFAULT_REGISTRY = LocationRegistry(
    cities=_CITIES,
    city_aliases=MappingProxyType(dict(_CITY_ALIASES)),
    regions=_REGIONS,
    city_to_region=MappingProxyType(dict(_CITY_TO_REGION)),
    area_keywords=_AREA_KEYWORDS,
)
