import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from models.Activity import Activity
from models.Destination import Destination
from schemas import ActivityWrite, ActivityRead, ActivityUpdate
from database import get_db
from utils.auth import get_current_user
from utils.pagination import paginate

router = APIRouter(prefix="/activities", tags=["Activities"])
logger = logging.getLogger("nomadiq.activities")

REQUIRED_FIELDS = {"destination_id", "name", "category", "price_range", "reviews_count", "images"}


def get_activity_or_404(activity_id: int, db: Session) -> Activity:
    a = db.query(Activity).filter(Activity.id == activity_id).first()
    if not a:
        raise HTTPException(status_code=404, detail="Actividad no encontrada")
    return a


def list_destination_activities(db: Session, destination_id: int, limit: int = 100) -> List[Activity]:
    """Actividades de un destino, en el orden estable que usa el generador."""
    return paginate(db.query(Activity).filter(Activity.destination_id == destination_id), Activity, limit)


@router.post(
    "/",
    response_model=ActivityRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
def create_activity(payload: ActivityWrite, db: Session = Depends(get_db)):
    if not db.query(Destination).filter(Destination.id == payload.destination_id).first():
        raise HTTPException(status_code=404, detail="Destino no existe")

    a = Activity(**payload.model_dump())
    db.add(a)
    db.commit()
    db.refresh(a)
    logger.info("create_activity -> creado %s", a.id)
    return a


@router.get("/", response_model=List[ActivityRead])
def list_activities(
    destination_id: Optional[int] = None,
    category: Optional[str] = None,
    limit: Optional[int] = None,
    start_after_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Activity)
    if destination_id is not None:
        q = q.filter(Activity.destination_id == destination_id)
    if category:
        q = q.filter(Activity.category == category)
    return paginate(q, Activity, limit, start_after_id)


@router.get("/{activity_id}", response_model=ActivityRead)
def get_activity(activity_id: int, db: Session = Depends(get_db)):
    return get_activity_or_404(activity_id, db)


@router.patch("/{activity_id}", response_model=ActivityRead, dependencies=[Depends(get_current_user)])
def update_activity(activity_id: int, payload: ActivityUpdate, db: Session = Depends(get_db)):
    a = get_activity_or_404(activity_id, db)

    data = payload.model_dump(exclude_unset=True)
    if data.get("destination_id") is not None:
        if not db.query(Destination).filter(Destination.id == data["destination_id"]).first():
            raise HTTPException(status_code=404, detail="Destino no existe")

    for k, v in data.items():
        if v is None and k in REQUIRED_FIELDS:
            continue
        setattr(a, k, v)

    db.commit()
    db.refresh(a)
    logger.info("update_activity -> ok %s", activity_id)
    return a


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(get_current_user)])
def delete_activity(activity_id: int, db: Session = Depends(get_db)):
    a = get_activity_or_404(activity_id, db)
    db.delete(a)
    db.commit()
    logger.info("delete_activity -> deleted %s", activity_id)
