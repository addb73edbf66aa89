"""
Motor de reglas para generar itinerarios día a día.

`generate_itinerary` es una función pura: recibe el viaje, la lista de
actividades candidatas y la configuración, y devuelve la estructura
`{"days": [...]}` que luego se guarda en la tabla `itineraries`.
Nunca lanza excepciones: los datos inválidos degradan a valores por defecto.
"""
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from numbers import Number
from typing import Any, Dict, List, Optional, Sequence

from services.itinerary_phrases import DEFAULT_LOCALE, get_phrases

TIME_SLOTS = ("morning", "afternoon", "evening")
MAX_DAYS = 30


@dataclass(frozen=True)
class ItineraryConfig:
    """Parámetros del generador y del enriquecimiento.

    Se construye una sola vez al arrancar la app (ver `config.py`) y se pasa
    explícitamente a las funciones.
    """
    default_day_count: int = 3
    default_model_tag: str = "local-rules-enrichment-v1"
    locale: str = DEFAULT_LOCALE


def read_field(obj: Any, name: str, default: Any = None) -> Any:
    """Lee `name` de un dict o de un objeto (p. ej. un modelo ORM)."""
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def read_field_or_alias(obj: Any, name: str, alias: str) -> Any:
    """Como `read_field`, pero acepta también la clave en camelCase (`startDate`)."""
    value = read_field(obj, name)
    return read_field(obj, alias) if value is None else value


def join_clauses(*clauses: Optional[str]) -> str:
    return " ".join(c for c in clauses if c).strip()


def js_round(value: float) -> int:
    # Math.round: .5 redondea hacia arriba
    return int(math.floor(value + 0.5))


def parse_trip_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def resolve_day_count(start: Any, end: Any, config: ItineraryConfig):
    """Devuelve (cantidad de días, fecha de inicio o None)."""
    start_date = parse_trip_date(start)
    end_date = parse_trip_date(end)

    if start_date is not None and end_date is not None and end_date >= start_date:
        diff_days = (end_date - start_date).days + 1
        return max(1, min(diff_days, MAX_DAYS)), start_date

    fallback = config.default_day_count if isinstance(config.default_day_count, int) else 3
    return max(1, min(fallback, MAX_DAYS)), None


def per_slot_budget(budget: Any, day_count: int) -> Optional[int]:
    # Decimal (columnas Numeric) cuenta como número; bool y complex no
    if isinstance(budget, (bool, complex)) or not isinstance(budget, Number):
        return None
    try:
        amount = float(budget)
    except (TypeError, ValueError, OverflowError):
        return None
    if not amount > 0 or not math.isfinite(amount):
        return None
    daily = amount / day_count
    return js_round(daily / len(TIME_SLOTS))


def destination_label(title: Any, phrases: Dict[str, Any]) -> str:
    if not isinstance(title, str):
        return ""
    cleaned = re.sub(phrases["title_prefix"], "", title, count=1, flags=re.IGNORECASE).strip()
    return cleaned or title


def interest_clause(interests: Any, phrases: Dict[str, Any]) -> Optional[str]:
    if not isinstance(interests, (list, tuple)) or not interests:
        return None
    picked = phrases["interest_joiner"].join(str(i) for i in interests[:2])
    return phrases["interests"].format(interests=picked)


def budget_clause(amount: Optional[int], phrases: Dict[str, Any]) -> Optional[str]:
    if amount is None:
        return None
    return phrases["budget"].format(amount=amount)


def slot_clause(time_of_day: str, place: str, phrases: Dict[str, Any]) -> str:
    label = phrases["slot_labels"].get(time_of_day, phrases["slot_label_default"])
    return phrases["slot_block"].format(label=label, place=place)


def activity_clause(activity: Any, phrases: Dict[str, Any]) -> str:
    if activity is None:
        return phrases["free_time"]

    parts = []
    name = read_field(activity, "name")
    if name:
        parts.append(phrases["activity"].format(name=name))
    category = read_field(activity, "category")
    if category:
        parts.append(phrases["category"].format(category=category))
    price_range = read_field_or_alias(activity, "price_range", "priceRange")
    if price_range:
        parts.append(phrases["price_range"].format(price_range=price_range))
    return join_clauses(*parts)


def generate_itinerary(
    trip: Any,
    activities: Optional[Sequence[Any]] = None,
    config: Optional[ItineraryConfig] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    """Genera el itinerario base (`ai_model_used = "rules"`) de un viaje.

    Las actividades se asignan en round-robin sobre la secuencia aplanada
    día x bloque: el bloque `s` del día `i` recibe `activities[(3*i + s) % k]`.

    `trip` y cada actividad pueden ser modelos ORM o dicts. Las fechas y el
    rango de precio se leen en snake_case (`start_date`, `price_range`) o en
    camelCase (`startDate`, `priceRange`).
    """
    config = config or ItineraryConfig()
    phrases = get_phrases(config.locale)
    # cualquier cosa que no sea lista o tupla se trata como "sin actividades"
    activities = list(activities) if isinstance(activities, (list, tuple)) else []

    day_count, start_date = resolve_day_count(
        read_field_or_alias(trip, "start_date", "startDate"),
        read_field_or_alias(trip, "end_date", "endDate"),
        config,
    )
    slot_budget = per_slot_budget(read_field(trip, "budget"), day_count)

    title = read_field(trip, "title")
    place = destination_label(title, phrases) or (title if isinstance(title, str) else "")
    interests = interest_clause(read_field(trip, "interests"), phrases)
    budget_sentence = budget_clause(slot_budget, phrases)

    days = []
    for i in range(day_count):
        periods = []
        for s, time_of_day in enumerate(TIME_SLOTS):
            activity = activities[(i * len(TIME_SLOTS) + s) % len(activities)] if activities else None

            period: Dict[str, Any] = {
                "timeOfDay": time_of_day,
                "title": (
                    read_field(activity, "name")
                    or phrases["explore_title"].format(place=place)
                ),
                "description": join_clauses(
                    slot_clause(time_of_day, place, phrases),
                    activity_clause(activity, phrases),
                    interests,
                    budget_sentence,
                ),
            }

            activity_id = read_field(activity, "id")
            if activity is not None and activity_id:
                period["activityId"] = str(activity_id)
            if slot_budget is not None:
                period["estimatedCost"] = slot_budget

            periods.append(period)

        day: Dict[str, Any] = {"day": i + 1}
        if start_date is not None:
            day["date"] = (start_date + timedelta(days=i)).isoformat()
        day["periods"] = periods
        days.append(day)

    return {"days": days}
