import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials

from config import FIREBASE_CREDENTIALS_PATH

logger = logging.getLogger("nomadiq.firebase")

# Inicializar Firebase Admin (solo una vez)
_initialized = False


class InvalidTokenError(Exception):
    """El ID token de Firebase no pudo verificarse."""


def initialize_firebase_admin() -> bool:
    """Inicializar Firebase Admin SDK"""
    global _initialized
    if _initialized:
        return True

    if firebase_admin._apps:
        _initialized = True
        return True

    if os.path.exists(FIREBASE_CREDENTIALS_PATH):
        cred = credentials.Certificate(FIREBASE_CREDENTIALS_PATH)
        firebase_admin.initialize_app(cred)
        _initialized = True
        logger.info("Firebase Admin inicializado con: %s", FIREBASE_CREDENTIALS_PATH)
    elif os.getenv("GOOGLE_APPLICATION_CREDENTIALS"):
        # Producción: credenciales por variable de entorno
        firebase_admin.initialize_app()
        _initialized = True
        logger.info("Firebase Admin inicializado desde variable de entorno")
    else:
        logger.warning("Archivo de credenciales no encontrado: %s", FIREBASE_CREDENTIALS_PATH)

    return _initialized


def verify_id_token(token: str) -> Optional[str]:
    """Verifica un ID token de Firebase y devuelve el uid.

    Devuelve None si Firebase Admin no está configurado; lanza
    InvalidTokenError si el token es inválido o expiró.
    """
    if not initialize_firebase_admin():
        return None

    try:
        decoded = auth.verify_id_token(token)
    except (ValueError, auth.InvalidIdTokenError, auth.ExpiredIdTokenError,
            auth.RevokedIdTokenError, auth.CertificateFetchError) as exc:
        raise InvalidTokenError(str(exc)) from exc

    return decoded.get("uid")
