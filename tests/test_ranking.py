"""Tests for ranking and response shaping."""

from gharseva.location import resolve_employer_location
from gharseva.ranking import LOCATION_UNKNOWN_MESSAGE, match_workers, rank
from tests.helpers import make_request, make_worker


def run(pool, request):
    return match_workers(pool, request, resolve_employer_location(request.address))


def test_returns_at_most_five_best_first():
    pool = [make_worker(years_experience=y) for y in (0, 1, 3, 5, 0, 1, 3, 5)]
    response = run(pool, make_request())
    scores = [w.match_score for w in response.matched_workers]
    assert response.success
    assert len(scores) == 5
    assert scores == sorted(scores, reverse=True)
    assert response.message == "Found 5 matching workers in bangalore"


def test_equal_scores_keep_pool_order_and_are_repeatable():
    first = make_worker()
    second = make_worker()
    pool = [first, second]
    a = run(pool, make_request())
    b = run(pool, make_request())
    ids = [w.id for w in a.matched_workers]
    assert ids == [first["id"], second["id"]]
    assert [w.id for w in b.matched_workers] == ids
    assert a.matched_workers[0].match_score == a.matched_workers[1].match_score


def test_rank_breaks_ties_by_position():
    scored = [({"id": "a"}, 82), ({"id": "b"}, 90), ({"id": "c"}, 82)]
    assert [w["id"] for w, _ in rank(scored)] == ["b", "a", "c"]


def test_rank_respects_limit():
    scored = [({"id": str(i)}, i) for i in range(10)]
    assert [s for _, s in rank(scored, limit=3)] == [9, 8, 7]


def test_summary_hides_private_fields():
    response = run([make_worker(assigned_customer_id=None)], make_request())
    summary = response.matched_workers[0].model_dump()
    assert "assigned_customer_id" not in summary
    assert "status" not in summary
    assert "residential_address" not in summary
    assert set(summary) >= {"id", "name", "phone", "work_type", "languages_spoken", "gender", "match_score"}


def test_unknown_location():
    response = run([make_worker()], make_request(address="Timbuktu"))
    assert response.success
    assert response.matched_workers == []
    assert response.message == LOCATION_UNKNOWN_MESSAGE


def test_no_workers_of_type():
    response = run([make_worker(work_type="gardening")], make_request())
    assert response.matched_workers == []
    assert response.message == "No available workers found for this service type"


def test_no_workers_with_capability():
    request = make_request(subServices=[{"id": "bathroom", "name": "Bathroom"}])
    response = run([make_worker(work_subcategories=["laundry"])], request)
    assert response.message == "No workers found matching your service requirements"


def test_no_workers_nearby_names_the_place():
    far = make_worker(preferred_areas=["Dwarka"], residential_address="Dwarka, Delhi")
    response = run([far], make_request(address="Haridwar"))
    assert response.matched_workers == []
    assert response.message == (
        "No workers found in haridwar. We're expanding our network - please check back later."
    )


def test_serialized_envelope_uses_client_keys():
    response = run([make_worker()], make_request())
    payload = response.model_dump(by_alias=True)
    assert set(payload) == {"success", "matchedWorkers", "message"}


def test_rank_never_exceeds_five():
    scored = [({"id": str(i)}, i) for i in range(10)]
    assert len(rank(scored, limit=10)) == 5


def test_no_workers_nearby_names_the_region():
    mumbai = make_worker(preferred_areas=["Andheri"], residential_address="Andheri, Mumbai")
    response = run([mumbai], make_request(address="somewhere in Kerala"))
    assert response.matched_workers == []
    assert response.message == (
        "No workers found in kerala. We're expanding our network - please check back later."
    )
