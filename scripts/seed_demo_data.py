"""
Datos de demo: un usuario, el destino Bariloche con tres actividades, un
viaje y su itinerario generado con el motor de reglas.

Uso:  python -m scripts.seed_demo_data
Se puede correr varias veces: lo que ya existe se reutiliza.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session

import models  # noqa: F401  registra todas las tablas en Base.metadata
from config import get_itinerary_config
from database import Base, SessionLocal, engine
from models.Activity import Activity
from models.Itinerary import Itinerary
from models.Trip import Trip, TripStatus
from models.User import User
from routes.activities import list_destination_activities
from routes.itinerary import create_itinerary_record
from scripts.seed_destinations import DESTINATIONS, get_or_create_destination
from services.itinerary_generator import generate_itinerary

logger = logging.getLogger("nomadiq.seed")

DEMO_UID = "demo-nomad"
DEMO_EMAIL = "demo@nomadiq.test"
DEMO_TRIP_TITLE = "Viaje demo a Bariloche en invierno"

DEMO_ACTIVITIES = [
    {
        "name": "Paseo por el Centro Cívico y costanera",
        "category": "paseo",
        "price_range": "free",
        "opening_hours": "Libre durante el día",
        "rating": 4.7,
        "reviews_count": 128,
    },
    {
        "name": "Excursión Circuito Chico",
        "category": "aventura",
        "price_range": "medium",
        "opening_hours": "Salidas por la mañana y la tarde",
        "rating": 4.8,
        "reviews_count": 256,
    },
    {
        "name": "Cena típica patagónica",
        "category": "gastronomía",
        "price_range": "high",
        "opening_hours": "19:00 - 23:30",
        "rating": 4.6,
        "reviews_count": 89,
    },
]


def get_or_create_demo_user(db: Session) -> User:
    user = db.query(User).filter(User.email == DEMO_EMAIL).first()
    if user:
        logger.info("Usuario demo ya existía: %s", user.firebase_uid)
        return user

    user = User(firebase_uid=DEMO_UID, name="Demo Nomad", email=DEMO_EMAIL, role="user")
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Usuario demo creado: %s", user.firebase_uid)
    return user


def ensure_demo_activities(db: Session, destination) -> None:
    for data in DEMO_ACTIVITIES:
        exists = (
            db.query(Activity)
            .filter(Activity.destination_id == destination.id, Activity.name == data["name"])
            .first()
        )
        if exists:
            continue
        db.add(Activity(destination_id=destination.id, lat=destination.lat, lng=destination.lng, images=[], **data))
        logger.info("Actividad demo creada: %s", data["name"])
    db.commit()


def get_or_create_demo_trip(db: Session, user: User) -> Trip:
    trip = db.query(Trip).filter(Trip.owner_id == user.firebase_uid, Trip.title == DEMO_TRIP_TITLE).first()
    if trip:
        logger.info("Trip demo ya existía: %s", trip.id)
        return trip

    trip = Trip(
        owner_id=user.firebase_uid,
        title=DEMO_TRIP_TITLE,
        start_date=date(2025, 7, 15),
        end_date=date(2025, 7, 18),
        budget=800000,
        interests=["nieve", "paisajes", "gastronomía"],
        status=TripStatus.planned.value,
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)
    logger.info("Trip demo creado: %s", trip.id)
    return trip


def seed_demo_data(db: Session, config=None) -> Itinerary:
    """Crea (o reutiliza) los datos de demo y devuelve el itinerario del trip demo."""
    config = config or get_itinerary_config()

    user = get_or_create_demo_user(db)
    bariloche_data = next(d for d in DESTINATIONS if d["name"] == "Bariloche")
    bariloche, _ = get_or_create_destination(db, bariloche_data)
    ensure_demo_activities(db, bariloche)
    trip = get_or_create_demo_trip(db, user)

    itinerary = db.query(Itinerary).filter(Itinerary.trip_id == trip.id).first()
    if itinerary:
        logger.info("Itinerario demo ya existía: %s", itinerary.id)
        return itinerary

    activities = list_destination_activities(db, bariloche.id, limit=100)
    data = generate_itinerary(trip, activities, config)
    return create_itinerary_record(db, trip_id=trip.id, data=data, ai_model_used="rules")


def main():
    logging.basicConfig(level=logging.INFO, format="[SEED] %(message)s")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        itinerary = seed_demo_data(db)
        logger.info(
            "Seed de datos demo completado: usuario %s, trip %s, itinerario %s",
            DEMO_EMAIL, itinerary.trip_id, itinerary.id,
        )
    finally:
        db.close()


if __name__ == "__main__":
    main()
