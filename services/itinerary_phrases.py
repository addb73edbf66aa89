"""
Textos usados por el generador de itinerarios y por el enriquecimiento.

Cada locale es un dict plano de plantillas `str.format`. El locale por defecto
es español; si se pide uno desconocido se usa español.
"""
from typing import Dict, Any

DEFAULT_LOCALE = "es"

PHRASES: Dict[str, Dict[str, Any]] = {
    "es": {
        # Generador (motor de reglas)
        "title_prefix": r"^Viaje a\s+",
        "slot_labels": {
            "morning": "la mañana",
            "afternoon": "la tarde",
            "evening": "la noche",
        },
        "slot_label_default": "el día",
        "slot_block": "Bloque de {label} en {place}.",
        "explore_title": "Explorar {place}",
        "activity": "Actividad sugerida: {name}.",
        "category": "Categoría: {category}.",
        "price_range": "Rango de precio aproximado: {price_range}.",
        "free_time": "Espacio libre para que el viajero descubra la ciudad a su propio ritmo.",
        "interests": "Actividades pensadas para quienes disfrutan de {interests}.",
        "interest_joiner": " y ",
        "budget": (
            "Presupuesto sugerido para este bloque: aproximadamente "
            "{amount} unidades de la moneda del viaje."
        ),
        # Enriquecimiento
        "traveler_default": "la persona viajera",
        "trip_default": "el viaje",
        "profile_interests": "{traveler}, que disfruta especialmente de {interests}",
        "profile_balanced": (
            "{traveler}, que busca una experiencia equilibrada entre descanso y descubrimiento"
        ),
        "day_intro": 'Día {day} de tu viaje "{title}".',
        "moods": {
            "morning": "Es un buen momento para empezar el día con calma, respirando el ambiente del lugar.",
            "afternoon": "La tarde invita a seguir explorando sin apuro, combinando movimiento y pequeños descansos.",
            "evening": "La noche es ideal para bajar revoluciones y disfrutar de la ciudad iluminada.",
        },
        "mood_default": "Este momento del día es perfecto para conectar con el lugar y contigo misma/o.",
        "traveler_sentence": "Pensado para {profile}.",
    },
    "en": {
        "title_prefix": r"^Trip to\s+",
        "slot_labels": {
            "morning": "morning",
            "afternoon": "afternoon",
            "evening": "evening",
        },
        "slot_label_default": "day",
        "slot_block": "A {label} block in {place}.",
        "explore_title": "Explore {place}",
        "activity": "Suggested activity: {name}.",
        "category": "Category: {category}.",
        "price_range": "Approximate price range: {price_range}.",
        "free_time": "Free time for the traveler to discover the city at their own pace.",
        "interests": "Activities designed for travelers who enjoy {interests}.",
        "interest_joiner": " and ",
        "budget": (
            "Suggested budget for this block: about "
            "{amount} units of the trip currency."
        ),
        "traveler_default": "the traveler",
        "trip_default": "the trip",
        "profile_interests": "{traveler}, who especially enjoys {interests}",
        "profile_balanced": (
            "{traveler}, who is looking for a balance between rest and discovery"
        ),
        "day_intro": 'Day {day} of your trip "{title}".',
        "moods": {
            "morning": "It's a good time to start the day calmly and take in the atmosphere of the place.",
            "afternoon": "The afternoon invites you to keep exploring unhurriedly, mixing movement with short breaks.",
            "evening": "The evening is ideal for slowing down and enjoying the city lights.",
        },
        "mood_default": "This moment of the day is perfect to connect with the place and with yourself.",
        "traveler_sentence": "Designed for {profile}.",
    },
}


def get_phrases(locale: str = DEFAULT_LOCALE) -> Dict[str, Any]:
    """Devuelve las plantillas del locale, o las de español si no existe."""
    if isinstance(locale, str):
        key = locale.strip().lower()
        if key in PHRASES:
            return PHRASES[key]
        # "es-AR" -> "es"
        short = key.split("-")[0].split("_")[0]
        if short in PHRASES:
            return PHRASES[short]
    return PHRASES[DEFAULT_LOCALE]
