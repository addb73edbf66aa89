import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from config import get_itinerary_config
from models.Itinerary import Itinerary
from models.Trip import Trip
from models.User import User
from schemas import ItineraryWrite, ItineraryRead, ItineraryUpdate, EnrichItineraryRequest
from database import get_db
from services.itinerary_enricher import enrich_itinerary
from services.itinerary_generator import ItineraryConfig
from utils.auth import get_current_user
from utils.pagination import paginate

router = APIRouter(prefix="/itineraries", tags=["Itinerary"])
logger = logging.getLogger("nomadiq.itineraries")


def create_itinerary_record(
    db: Session,
    trip_id: int,
    data: Dict[str, Any],
    ai_model_used: Optional[str] = None,
    score: Optional[float] = None,
    generated_at: Optional[datetime] = None,
) -> Itinerary:
    """Guarda un itinerario nuevo; sin `ai_model_used` se asume el motor de reglas."""
    it = Itinerary(
        trip_id=trip_id,
        data=data,
        ai_model_used=ai_model_used or "rules",
        score=score,
    )
    if generated_at is not None:
        it.generated_at = generated_at

    db.add(it)
    db.commit()
    db.refresh(it)
    logger.info("create_itinerary -> creado %s (trip %s, %s)", it.id, trip_id, it.ai_model_used)
    return it


def get_owned_trip(trip_id: int, user: User, db: Session) -> Trip:
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip or trip.owner_id != user.firebase_uid:
        raise HTTPException(status_code=404, detail="Trip no existe")
    return trip


def get_owned_itinerary(itinerary_id: int, user: User, db: Session) -> Itinerary:
    it = (
        db.query(Itinerary)
        .join(Trip, Trip.id == Itinerary.trip_id)
        .filter(Itinerary.id == itinerary_id, Trip.owner_id == user.firebase_uid)
        .first()
    )
    if not it:
        logger.info("get_itinerary -> NOT_FOUND %s", itinerary_id)
        raise HTTPException(status_code=404, detail="Itinerario no encontrado")
    return it


@router.post("/", response_model=ItineraryRead, status_code=status.HTTP_201_CREATED)
def create_item(payload: ItineraryWrite, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    get_owned_trip(payload.trip_id, user, db)
    return create_itinerary_record(
        db,
        trip_id=payload.trip_id,
        data=payload.data.model_dump(exclude_none=True),
        ai_model_used=payload.ai_model_used,
        score=payload.score,
        generated_at=payload.generated_at,
    )


@router.get("/", response_model=List[ItineraryRead])
def list_items(
    trip_id: Optional[int] = None,
    limit: Optional[int] = None,
    start_after_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    q = (
        db.query(Itinerary)
        .join(Trip, Trip.id == Itinerary.trip_id)
        .filter(Trip.owner_id == user.firebase_uid)
    )
    if trip_id is not None:
        q = q.filter(Itinerary.trip_id == trip_id)

    items = paginate(q, Itinerary, limit, start_after_id)
    logger.info("list_itineraries -> count %s trip_id: %s", len(items), trip_id or "(all)")
    return items


@router.get("/{itinerary_id}", response_model=ItineraryRead)
def get_item(itinerary_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return get_owned_itinerary(itinerary_id, user, db)


@router.patch("/{itinerary_id}", response_model=ItineraryRead)
def update_item(
    itinerary_id: int,
    payload: ItineraryUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    it = get_owned_itinerary(itinerary_id, user, db)

    fields = payload.model_fields_set
    if "trip_id" in fields and payload.trip_id is not None and payload.trip_id != it.trip_id:
        get_owned_trip(payload.trip_id, user, db)
        it.trip_id = payload.trip_id
    if "generated_at" in fields and payload.generated_at is not None:
        it.generated_at = payload.generated_at
    if "data" in fields and payload.data is not None:
        it.data = payload.data.model_dump(exclude_none=True)
    if "ai_model_used" in fields and payload.ai_model_used is not None:
        it.ai_model_used = payload.ai_model_used
    if "score" in fields:
        it.score = payload.score

    db.commit()
    db.refresh(it)
    logger.info("update_itinerary -> ok %s", itinerary_id)
    return it


@router.delete("/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(itinerary_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    it = get_owned_itinerary(itinerary_id, user, db)
    db.delete(it)
    db.commit()
    logger.info("delete_itinerary -> deleted %s", itinerary_id)


@router.post("/{itinerary_id}/enrich-with-ai", response_model=ItineraryRead)
def enrich_with_ai(
    itinerary_id: int,
    payload: Optional[EnrichItineraryRequest] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    config: ItineraryConfig = Depends(get_itinerary_config),
):
    """
    Reescribe las descripciones del itinerario con más contexto narrativo
    y lo actualiza en el lugar (mismo id, mismo trip).
    """
    it = get_owned_itinerary(itinerary_id, user, db)

    trip = it.trip
    if not trip:
        raise HTTPException(status_code=404, detail="Trip del itinerario no encontrado")

    enriched = enrich_itinerary(it, trip, user, payload or EnrichItineraryRequest(), config)

    it.data = enriched.data
    it.ai_model_used = enriched.model_tag
    it.score = enriched.score
    db.commit()
    db.refresh(it)
    logger.info("enrich_itinerary -> %s usando modelo %s", itinerary_id, enriched.model_tag)
    return it
