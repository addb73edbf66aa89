"""
Carga el catálogo de destinos de ejemplo.

Uso:  python -m scripts.seed_destinations
Los destinos que ya existen (mismo nombre y país) no se duplican.
"""
import logging

from sqlalchemy.orm import Session

import models  # noqa: F401  registra todas las tablas en Base.metadata
from database import Base, SessionLocal, engine
from models.Destination import Destination

logger = logging.getLogger("nomadiq.seed")

DESTINATIONS = [
    {
        "name": "Ushuaia",
        "country": "Argentina",
        "summary": "La ciudad más austral del mundo, con paisajes patagónicos extremos, nieve gran parte del año y excursiones al fin del mundo.",
        "lat": -54.8019, "lng": -68.3030,
        "tags": ["nieve", "naturaleza", "aventura", "fin del mundo"],
    },
    {
        "name": "El Calafate",
        "country": "Argentina",
        "summary": "Puerta de entrada al glaciar Perito Moreno y a la Patagonia sur, ideal para amantes de la naturaleza y paisajes imponentes.",
        "lat": -50.3379, "lng": -72.2648,
        "tags": ["naturaleza", "glaciares", "aventura"],
    },
    {
        "name": "Cartagena de Indias",
        "country": "Colombia",
        "summary": "Ciudad colonial amurallada frente al mar Caribe, llena de color, historia y atardeceres inolvidables.",
        "lat": 10.3910, "lng": -75.4794,
        "tags": ["playa", "historia", "cultura", "romántico"],
    },
    {
        "name": "Ciudad de México",
        "country": "México",
        "summary": "Metrópolis inmensa con museos de primer nivel, barrios históricos, gastronomía potente y una energía urbana única.",
        "lat": 19.4326, "lng": -99.1332,
        "tags": ["ciudad", "cultura", "gastronomía", "historia"],
    },
    {
        "name": "Cancún",
        "country": "México",
        "summary": "Destino caribeño famoso por sus playas de agua turquesa, resorts todo incluido y vida nocturna intensa.",
        "lat": 21.1619, "lng": -86.8515,
        "tags": ["playa", "fiesta", "relax"],
    },
    {
        "name": "Cusco",
        "country": "Perú",
        "summary": "Ciudad andina histórica, mezcla de herencia inca y colonial, base ideal para explorar el Valle Sagrado y Machu Picchu.",
        "lat": -13.5319, "lng": -71.9675,
        "tags": ["historia", "montaña", "cultura"],
    },
    {
        "name": "Barcelona",
        "country": "España",
        "summary": "Ciudad mediterránea con arquitectura de Gaudí, vida cultural intensa y playa urbana para equilibrar turismo y relax.",
        "lat": 41.3874, "lng": 2.1686,
        "tags": ["ciudad", "arte", "playa", "gastronomía"],
    },
    {
        "name": "Madrid",
        "country": "España",
        "summary": "Capital europea vibrante, con grandes museos, parques, gastronomía y una vida nocturna que parece no terminar.",
        "lat": 40.4168, "lng": -3.7038,
        "tags": ["ciudad", "cultura", "vida nocturna"],
    },
    {
        "name": "Roma",
        "country": "Italia",
        "summary": "Ciudad eterna llena de ruinas romanas, plazas fotogénicas y gastronomía italiana clásica.",
        "lat": 41.9028, "lng": 12.4964,
        "tags": ["historia", "cultura", "gastronomía"],
    },
    {
        "name": "Nueva York",
        "country": "Estados Unidos",
        "summary": "Metrópolis icónica de rascacielos, barrios muy diferentes entre sí y una oferta cultural y gastronómica infinita.",
        "lat": 40.7128, "lng": -74.0060,
        "tags": ["ciudad", "tecnología", "cultura", "compras"],
    },
    {
        "name": "Tokio",
        "country": "Japón",
        "summary": "Megaciudad que combina templos tradicionales con barrios ultramodernos, neones y cultura pop japonesa.",
        "lat": 35.6762, "lng": 139.6503,
        "tags": ["ciudad", "tecnología", "cultura", "gastronomía"],
    },
    {
        "name": "Bangkok",
        "country": "Tailandia",
        "summary": "Capital del sudeste asiático con templos dorados, mercados flotantes y una de las mejores comidas callejeras del mundo.",
        "lat": 13.7563, "lng": 100.5018,
        "tags": ["ciudad", "cultura", "gastronomía", "exótico"],
    },
    {
        "name": "Bariloche",
        "country": "Argentina",
        "summary": "Destino de lagos, montañas y nieve, ideal para naturaleza y aventura.",
        "lat": -41.1335, "lng": -71.3103,
        "tags": ["montaña", "nieve", "aventura", "naturaleza"],
    },
    {
        "name": "Buenos Aires",
        "country": "Argentina",
        "summary": "Ciudad cosmopolita, llena de cultura, gastronomía y vida nocturna.",
        "lat": -34.6037, "lng": -58.3816,
        "tags": ["ciudad", "gastronomía", "cultura", "noche"],
    },
    {
        "name": "Mendoza",
        "country": "Argentina",
        "summary": "Región de viñedos y montañas, perfecta para enoturismo y aventura.",
        "lat": -32.8895, "lng": -68.8458,
        "tags": ["vino", "montaña", "naturaleza"],
    },
    {
        "name": "Salta",
        "country": "Argentina",
        "summary": "Paisajes únicos, pueblos coloniales y cultura del norte argentino.",
        "lat": -24.7829, "lng": -65.4232,
        "tags": ["cultura", "historia", "paisajes"],
    },
    {
        "name": "Iguazú",
        "country": "Argentina",
        "summary": "Cataratas impresionantes en plena selva misionera.",
        "lat": -25.6953, "lng": -54.4367,
        "tags": ["agua", "naturaleza", "selva"],
    },
    {
        "name": "Rio de Janeiro",
        "country": "Brasil",
        "summary": "Playas famosas, carnaval y vistas icónicas como el Cristo Redentor.",
        "lat": -22.9068, "lng": -43.1729,
        "tags": ["playa", "fiesta", "ciudad"],
    },
    {
        "name": "Florianópolis",
        "country": "Brasil",
        "summary": "Isla con playas, naturaleza y ambiente relajado.",
        "lat": -27.5949, "lng": -48.5482,
        "tags": ["playa", "naturaleza", "relax"],
    },
    {
        "name": "Santiago de Chile",
        "country": "Chile",
        "summary": "Capital moderna rodeada de montañas, ideal como base para explorar.",
        "lat": -33.4489, "lng": -70.6693,
        "tags": ["ciudad", "montaña", "gastronomía"],
    },
    {
        "name": "Lima",
        "country": "Perú",
        "summary": "Centro gastronómico de Sudamérica, frente al Pacífico.",
        "lat": -12.0464, "lng": -77.0428,
        "tags": ["gastronomía", "cultura", "ciudad"],
    },
]


def get_or_create_destination(db: Session, data: dict):
    """Devuelve (destino, creado)."""
    existing = (
        db.query(Destination)
        .filter(Destination.name == data["name"], Destination.country == data["country"])
        .first()
    )
    if existing:
        return existing, False

    d = Destination(images=[], **data)
    db.add(d)
    db.commit()
    db.refresh(d)
    return d, True


def seed_destinations(db: Session) -> int:
    """Carga `DESTINATIONS` y devuelve cuántos destinos se crearon."""
    created = 0
    for data in DESTINATIONS:
        d, was_created = get_or_create_destination(db, data)
        if was_created:
            created += 1
            logger.info("seed_destinations -> creado %s (id: %s)", d.name, d.id)
        else:
            logger.info("seed_destinations -> ya existía %s (id: %s)", d.name, d.id)
    return created


def main():
    logging.basicConfig(level=logging.INFO, format="[SEED] %(message)s")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        created = seed_destinations(db)
    finally:
        db.close()
    logger.info("Seed completado: %s destinos nuevos de %s", created, len(DESTINATIONS))


if __name__ == "__main__":
    main()
