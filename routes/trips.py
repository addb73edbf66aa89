import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from config import get_itinerary_config
from models.Trip import Trip
from models.User import User
from models.Destination import Destination
from schemas import TripWrite, TripRead, TripUpdate, TripStatusLiteral, ItineraryRead, GenerateItineraryRequest
from database import get_db
from services.itinerary_generator import ItineraryConfig, generate_itinerary
from utils.auth import get_current_user
from utils.pagination import paginate

router = APIRouter(prefix="/trips", tags=["Trips"])
logger = logging.getLogger("nomadiq.trips")

REQUIRED_FIELDS = {"title", "start_date", "end_date", "interests", "status"}


def get_own_trip_or_404(trip_id: int, user: User, db: Session) -> Trip:
    # Un trip de otro usuario se responde igual que uno inexistente
    t = db.query(Trip).filter(Trip.id == trip_id).first()
    if not t or t.owner_id != user.firebase_uid:
        raise HTTPException(status_code=404, detail="Viaje no encontrado")
    return t


@router.post("/", response_model=TripRead, status_code=status.HTTP_201_CREATED)
def create_trip(payload: TripWrite, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    trip = Trip(**payload.model_dump(), owner_id=user.firebase_uid)
    db.add(trip)
    db.commit()
    db.refresh(trip)
    logger.info("create_trip -> creado %s", trip.id)
    return trip


@router.get("/", response_model=List[TripRead])
def list_trips(
    status: Optional[TripStatusLiteral] = None,
    limit: Optional[int] = None,
    start_after_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    q = db.query(Trip).filter(Trip.owner_id == user.firebase_uid)
    if status:
        q = q.filter(Trip.status == status)
    return paginate(q, Trip, limit, start_after_id)


@router.get("/{trip_id}", response_model=TripRead)
def get_trip(trip_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return get_own_trip_or_404(trip_id, user, db)


@router.patch("/{trip_id}", response_model=TripRead)
def update_trip(
    trip_id: int,
    payload: TripUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    t = get_own_trip_or_404(trip_id, user, db)

    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is None and k in REQUIRED_FIELDS:
            continue
        setattr(t, k, v)

    db.commit()
    db.refresh(t)
    logger.info("update_trip -> ok %s", trip_id)
    return t


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(trip_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    t = get_own_trip_or_404(trip_id, user, db)
    db.delete(t)
    db.commit()
    logger.info("delete_trip -> deleted %s", trip_id)


@router.post("/{trip_id}/generate-itinerary", response_model=ItineraryRead, status_code=status.HTTP_201_CREATED)
def generate_trip_itinerary(
    trip_id: int,
    payload: Optional[GenerateItineraryRequest] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    config: ItineraryConfig = Depends(get_itinerary_config),
):
    """Genera un itinerario con el motor de reglas y lo guarda (`ai_model_used = "rules"`)."""
    from routes.activities import list_destination_activities
    from routes.itinerary import create_itinerary_record

    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise HTTPException(status_code=404, detail="Viaje no encontrado")
    if trip.owner_id != user.firebase_uid:
        raise HTTPException(status_code=403, detail="Solo el dueño del viaje puede generar su itinerario")

    activities = []
    destination_id = payload.destination_id if payload else None
    if destination_id is not None:
        if not db.query(Destination).filter(Destination.id == destination_id).first():
            raise HTTPException(status_code=404, detail="Destino no existe")
        activities = list_destination_activities(db, destination_id, limit=100)

    data = generate_itinerary(trip, activities, config)
    return create_itinerary_record(db, trip_id=trip.id, data=data, ai_model_used="rules")
