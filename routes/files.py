"""
File upload and download endpoints for user uploads.
Supports images (jpg, png, gif, webp) and PDFs.
"""
import logging
import os
import uuid
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, UploadFile, File, Form, HTTPException, Depends, status
from fastapi.responses import FileResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import UPLOAD_DIR
from database import get_db
from models.Upload import Upload
from models.User import User
from schemas import UploadRead, UploadTypeLiteral
from utils.auth import get_current_user
from utils.pagination import paginate

router = APIRouter(prefix="/files", tags=["Files"])
logger = logging.getLogger("nomadiq.uploads")

# Configuración
UPLOAD_BASE_DIR = Path(UPLOAD_DIR)
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB
ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
ALLOWED_PDF_TYPES = {"application/pdf"}
ALLOWED_TYPES = ALLOWED_IMAGE_TYPES | ALLOWED_PDF_TYPES

EXTENSION_MIME_MAP = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".pdf": "application/pdf",
}


def resolve_content_type(file: UploadFile) -> Optional[str]:
    """Usa el content_type del request o, si falta, lo deduce de la extensión."""
    if file.content_type and file.content_type != "application/octet-stream":
        return file.content_type
    if file.filename:
        return EXTENSION_MIME_MAP.get(Path(file.filename).suffix.lower())
    return None


def validate_file(file: UploadFile) -> str:
    """Valida el tipo del archivo y devuelve su content_type."""
    content_type = resolve_content_type(file)
    if not content_type or content_type not in ALLOWED_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Tipo de archivo no permitido. Tipos permitidos: imágenes (jpg, png, gif, webp) y PDFs. Recibido: {content_type or 'desconocido'}"
        )
    return content_type


def get_own_upload_or_error(upload_id: int, user: User, db: Session) -> Upload:
    upload = db.query(Upload).filter(Upload.id == upload_id).first()
    if not upload:
        raise HTTPException(status_code=404, detail="Archivo no encontrado")
    if upload.user_id != user.firebase_uid:
        raise HTTPException(status_code=403, detail="No tienes acceso a este archivo")
    return upload


@router.post("/upload", response_model=UploadRead, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    type: UploadTypeLiteral = Form(...),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Sube un archivo (avatar, imagen de actividad o documento) del usuario."""
    content_type = validate_file(file)

    content = await file.read()
    if len(content) > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"Archivo demasiado grande. Tamaño máximo: {MAX_FILE_SIZE / (1024 * 1024):.1f} MB"
        )

    # Generar nombre único
    file_ext = Path(file.filename or "").suffix.lower() or ".bin"
    unique_filename = f"{uuid.uuid4()}{file_ext}"

    subdir = UPLOAD_BASE_DIR / type
    subdir.mkdir(parents=True, exist_ok=True)
    file_path = subdir / unique_filename

    with open(file_path, "wb") as buffer:
        buffer.write(content)

    upload = Upload(
        user_id=user.firebase_uid,
        original_name=file.filename or unique_filename,
        storage_path=str(file_path),
        type=type,
        mime_type=content_type,
        size=len(content),
    )
    db.add(upload)
    try:
        db.commit()
    except SQLAlchemyError:
        # sin registro no debe quedar el archivo huérfano en disco
        db.rollback()
        file_path.unlink(missing_ok=True)
        logger.exception("upload_file -> error al guardar %s", file_path)
        raise HTTPException(status_code=500, detail="Error al guardar el archivo")
    db.refresh(upload)
    logger.info("upload_file -> creado %s (%s bytes)", upload.id, upload.size)
    return upload


@router.get("/", response_model=List[UploadRead])
def list_my_uploads(
    type: Optional[UploadTypeLiteral] = None,
    limit: Optional[int] = None,
    start_after_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    q = db.query(Upload).filter(Upload.user_id == user.firebase_uid)
    if type:
        q = q.filter(Upload.type == type)
    return paginate(q, Upload, limit, start_after_id)


@router.get("/{upload_id}", response_model=UploadRead)
def get_upload(upload_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return get_own_upload_or_error(upload_id, user, db)


@router.get("/{upload_id}/content")
def get_upload_content(upload_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    upload = get_own_upload_or_error(upload_id, user, db)

    file_path = Path(upload.storage_path)
    if not file_path.exists():
        raise HTTPException(status_code=404, detail="Archivo no encontrado")

    return FileResponse(
        file_path,
        media_type=upload.mime_type or "application/octet-stream",
        filename=upload.original_name,
    )


@router.delete("/{upload_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_upload(upload_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Elimina el registro y el archivo físico."""
    upload = get_own_upload_or_error(upload_id, user, db)

    file_path = Path(upload.storage_path)
    if file_path.exists():
        try:
            os.remove(file_path)
        except OSError as e:
            raise HTTPException(status_code=500, detail=f"Error al eliminar archivo: {str(e)}")

    db.delete(upload)
    db.commit()
    logger.info("delete_upload -> deleted %s", upload_id)
