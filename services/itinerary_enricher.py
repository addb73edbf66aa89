"""
Enriquecimiento "IA" de un itinerario ya generado.

No llama a ningún modelo externo: reescribe la descripción de cada bloque
agregando contexto del día, del momento y del perfil del viajero. La
estructura (días, bloques, `timeOfDay`, `activityId`, `estimatedCost`) se
conserva tal cual.
"""
import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, List, Optional

from services.itinerary_generator import ItineraryConfig, join_clauses, read_field
from services.itinerary_phrases import get_phrases

logger = logging.getLogger("nomadiq.itinerary_ai")

# Valor fijo, no es una confianza calculada.
ENRICHMENT_SCORE = 90


@dataclass
class EnrichmentResult:
    data: Dict[str, List[Dict[str, Any]]]
    model_tag: str
    score: int


def traveler_profile(trip: Any, user: Any, phrases: Dict[str, Any]) -> str:
    traveler = read_field(user, "name") or phrases["traveler_default"]
    interests = read_field(trip, "interests")
    if isinstance(interests, (list, tuple)) and interests:
        main_interests = ", ".join(str(i) for i in interests[:3])
        return phrases["profile_interests"].format(traveler=traveler, interests=main_interests)
    return phrases["profile_balanced"].format(traveler=traveler)


def day_intro_clause(day_number: Any, trip: Any, phrases: Dict[str, Any]) -> str:
    title = read_field(trip, "title") or phrases["trip_default"]
    return phrases["day_intro"].format(day=day_number, title=title)


def mood_clause(time_of_day: Any, phrases: Dict[str, Any]) -> str:
    return phrases["moods"].get(time_of_day, phrases["mood_default"])


def enrich_period(period: Dict[str, Any], day_number: Any, trip: Any, profile: str,
                  phrases: Dict[str, Any]) -> Dict[str, Any]:
    base = period.get("description") or ""
    if not isinstance(base, str):
        base = str(base)

    enriched = dict(period)
    enriched["description"] = join_clauses(
        base,
        day_intro_clause(day_number, trip, phrases),
        mood_clause(period.get("timeOfDay"), phrases),
        phrases["traveler_sentence"].format(profile=profile),
    )
    return enriched


def _day_number(day: Dict[str, Any]) -> Any:
    value = day.get("day")
    if isinstance(value, Real) and not isinstance(value, bool) and value > 0:
        return value
    return 1


def _itinerary_days(itinerary: Any) -> List[Any]:
    data = read_field(itinerary, "data")
    if data is None and isinstance(itinerary, dict) and "days" in itinerary:
        data = itinerary
    days = read_field(data, "days") if isinstance(data, dict) else None
    return list(days) if isinstance(days, (list, tuple)) else []


def resolve_model_tag(options: Any, config: ItineraryConfig) -> str:
    hint = read_field(options, "model_hint")
    if isinstance(hint, str) and hint.strip():
        return hint.strip()
    return config.default_model_tag


def enrich_itinerary(
    itinerary: Any,
    trip: Any,
    user: Any = None,
    options: Any = None,
    config: Optional[ItineraryConfig] = None,
) -> EnrichmentResult:
    """Reescribe las descripciones de todos los bloques del itinerario.

    `options` acepta `model_hint` (etiqueta del modelo) y `locale`; el resto
    de las opciones se ignora. Nunca lanza excepciones: días o bloques mal
    formados se completan con valores por defecto.
    """
    config = config or ItineraryConfig()
    phrases = get_phrases(read_field(options, "locale") or config.locale)
    profile = traveler_profile(trip, user, phrases)

    enriched_days = []
    for raw_day in _itinerary_days(itinerary):
        day = dict(raw_day) if isinstance(raw_day, dict) else {}
        day_number = _day_number(day)
        raw_periods = day.get("periods")
        if not isinstance(raw_periods, (list, tuple)):
            raw_periods = []

        day["periods"] = [
            enrich_period(p if isinstance(p, dict) else {}, day_number, trip, profile, phrases)
            for p in raw_periods
        ]
        enriched_days.append(day)

    model_tag = resolve_model_tag(options, config)
    logger.info(
        "enrich_itinerary -> %s días enriquecidos usando modelo %s",
        len(enriched_days),
        model_tag,
    )
    return EnrichmentResult(data={"days": enriched_days}, model_tag=model_tag, score=ENRICHMENT_SCORE)
