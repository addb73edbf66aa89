from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from models.User import User
from models.Trip import Trip
from schemas import UserRead, TripRead
from database import get_db
from utils.auth import require_admin

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)):
    return db.query(User).order_by(User.created_at.desc()).all()


@router.get("/trips", response_model=List[TripRead])
def list_trips(db: Session = Depends(get_db)):
    return db.query(Trip).order_by(Trip.created_at.desc(), Trip.id.desc()).limit(200).all()
