from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from models.User import User
from services.firebase_service import InvalidTokenError, verify_id_token


def get_current_uid(authorization: Optional[str] = Header(default=None)) -> str:
    """Extrae y verifica el `Authorization: Bearer <token>` de Firebase."""
    parts = (authorization or "").split(" ")
    token = parts[1] if len(parts) == 2 and parts[0].lower() == "bearer" else None
    if not token:
        raise HTTPException(status_code=401, detail="Token requerido")

    try:
        uid = verify_id_token(token)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail="Token inválido")

    if not uid:
        raise HTTPException(status_code=401, detail="Token inválido")
    return uid


def get_current_user(uid: str = Depends(get_current_uid), db: Session = Depends(get_db)) -> User:
    user = db.query(User).filter(User.firebase_uid == uid).first()
    if not user:
        raise HTTPException(status_code=401, detail="Usuario no registrado")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != "admin":
        raise HTTPException(status_code=403, detail="Acceso denegado. Se requiere rol administrador.")
    return user
