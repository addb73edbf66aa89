import logging

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy import or_

from models.User import User
from schemas import UserWrite, UserRead
from database import get_db
from utils.auth import get_current_uid, get_current_user

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("nomadiq.users")


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
)
def create_user(payload: UserWrite, uid: str = Depends(get_current_uid), db: Session = Depends(get_db)):
    """Registra el perfil del usuario autenticado en Firebase."""
    exists = db.query(User).filter(
        or_(User.firebase_uid == uid, User.email == payload.email)
    ).first()
    if exists:
        raise HTTPException(status_code=409, detail="UID o email ya existen")

    new_user = User(
        firebase_uid=uid,
        name=payload.name,
        email=payload.email,
        avatar_url=payload.avatar_url,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("create_user -> creado %s", uid)
    return new_user


@router.get("/me", response_model=UserRead)
def me(user: User = Depends(get_current_user)):
    return user
