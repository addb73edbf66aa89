import copy
from types import SimpleNamespace

from services.itinerary_enricher import ENRICHMENT_SCORE, enrich_itinerary
from services.itinerary_generator import ItineraryConfig, generate_itinerary

TRIP = {
    "title": "Viaje a Bariloche",
    "start_date": "2025-07-15",
    "end_date": "2025-07-16",
    "budget": 600,
    "interests": ["nieve", "gastronomía", "trekking", "museos"],
}
ACTIVITIES = [
    {"id": "a1", "name": "City tour", "category": "paseo", "price_range": "low"},
    {"id": "a2", "name": "Cerro Catedral", "category": "aventura", "price_range": "high"},
]


def generated():
    return {"id": 1, "data": generate_itinerary(TRIP, ACTIVITIES)}


def test_structure_is_preserved_and_descriptions_rewritten():
    itinerary = generated()
    result = enrich_itinerary(itinerary, TRIP, {"name": "Ana"})

    original_days = itinerary["data"]["days"]
    enriched_days = result.data["days"]
    assert len(enriched_days) == len(original_days)

    for before_day, after_day in zip(original_days, enriched_days):
        assert after_day["day"] == before_day["day"]
        assert after_day["date"] == before_day["date"]
        assert len(after_day["periods"]) == len(before_day["periods"])
        for before, after in zip(before_day["periods"], after_day["periods"]):
            for key in ("timeOfDay", "title", "activityId", "estimatedCost"):
                assert after.get(key) == before.get(key)
            assert after["description"] != before["description"]
            assert before["description"] in after["description"]


def test_description_is_built_from_day_mood_and_profile():
    result = enrich_itinerary(generated(), TRIP, {"name": "Ana"})
    afternoon = result.data["days"][1]["periods"][1]

    original = generate_itinerary(TRIP, ACTIVITIES)["days"][1]["periods"][1]["description"]
    assert afternoon["description"] == (
        f"{original} "
        'Día 2 de tu viaje "Viaje a Bariloche". '
        "La tarde invita a seguir explorando sin apuro, combinando movimiento y pequeños descansos. "
        "Pensado para Ana, que disfruta especialmente de nieve, gastronomía, trekking."
    )


def test_profile_without_user_or_interests():
    trip = dict(TRIP, interests=[])
    result = enrich_itinerary(generated(), trip, None)
    description = result.data["days"][0]["periods"][0]["description"]
    assert description.endswith(
        "Pensado para la persona viajera, que busca una experiencia equilibrada entre descanso y descubrimiento."
    )


def test_model_tag_and_score():
    config = ItineraryConfig(default_model_tag="local-test-model")

    assert enrich_itinerary(generated(), TRIP, None, None, config).model_tag == "local-test-model"
    assert enrich_itinerary(generated(), TRIP, None, {"model_hint": "   "}, config).model_tag == "local-test-model"
    assert enrich_itinerary(generated(), TRIP, None, {"model_hint": " gpt-viajes "}, config).model_tag == "gpt-viajes"
    assert enrich_itinerary(generated(), TRIP, None, {"model_hint": 12}, config).model_tag == "local-test-model"
    assert enrich_itinerary(generated(), TRIP).score == ENRICHMENT_SCORE == 90


def test_default_model_tag():
    assert enrich_itinerary(generated(), TRIP).model_tag == "local-rules-enrichment-v1"


def test_enriching_twice_keeps_growing_the_text():
    once = enrich_itinerary(generated(), TRIP, {"name": "Ana"})
    twice = enrich_itinerary({"data": once.data}, TRIP, {"name": "Ana"})

    for first_day, second_day in zip(once.data["days"], twice.data["days"]):
        for first, second in zip(first_day["periods"], second_day["periods"]):
            assert second["description"].startswith(first["description"])
            assert len(second["description"]) > len(first["description"])


def test_input_is_not_mutated():
    itinerary = generated()
    snapshot = copy.deepcopy(itinerary)
    enrich_itinerary(itinerary, TRIP, {"name": "Ana"})
    assert itinerary == snapshot


def test_malformed_days_are_defaulted():
    itinerary = {
        "data": {
            "days": [
                {"periods": [{"timeOfDay": "full_day", "title": "Libre"}]},
                {"day": 2},
                {"day": -4, "periods": ["basura", {"timeOfDay": "evening", "description": 5}]},
                "no-es-un-dia",
            ]
        }
    }
    result = enrich_itinerary(itinerary, {"title": "Escapada"}, None)
    days = result.data["days"]

    assert len(days) == 4
    only = days[0]["periods"][0]
    assert only["title"] == "Libre"
    assert only["description"].startswith('Día 1 de tu viaje "Escapada". Este momento del día')

    assert days[1]["periods"] == []

    garbage, evening = days[2]["periods"]
    assert garbage["description"].startswith('Día 1 de tu viaje "Escapada".')
    assert evening["description"].startswith('5 Día 1 de tu viaje "Escapada". La noche es ideal')

    assert days[3] == {"periods": []}


def test_missing_data_gives_empty_days():
    assert enrich_itinerary({}, TRIP).data == {"days": []}
    assert enrich_itinerary(None, None).data == {"days": []}
    assert enrich_itinerary({"data": {"days": "nada"}}, TRIP).data == {"days": []}


def test_trip_without_title_uses_generic_label():
    result = enrich_itinerary(generated(), {}, None)
    assert 'Día 1 de tu viaje "el viaje".' in result.data["days"][0]["periods"][0]["description"]


def test_locale_option_switches_phrases():
    result = enrich_itinerary(generated(), TRIP, SimpleNamespace(name="Ana"), {"locale": "en"})
    morning = result.data["days"][0]["periods"][0]["description"]
    assert 'Day 1 of your trip "Viaje a Bariloche".' in morning
    assert "It's a good time to start the day calmly" in morning
    assert morning.endswith("Designed for Ana, who especially enjoys nieve, gastronomía, trekking.")


def test_accepts_orm_like_itinerary():
    itinerary = SimpleNamespace(id=3, data=generate_itinerary(TRIP, []))
    trip = SimpleNamespace(title="Viaje a Bariloche", interests=["nieve"])
    result = enrich_itinerary(itinerary, trip, SimpleNamespace(name="Ana"))
    assert len(result.data["days"]) == 2
    assert "Ana, que disfruta especialmente de nieve" in result.data["days"][0]["periods"][2]["description"]
