import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from models.Destination import Destination
from schemas import DestinationWrite, DestinationRead, DestinationUpdate
from database import get_db
from utils.auth import get_current_user
from utils.geocoding_helpers import geocode_place_to_coords, build_place_query
from utils.pagination import paginate, paginate_list

router = APIRouter(prefix="/destinations", tags=["Destinations"])
logger = logging.getLogger("nomadiq.destinations")


def get_destination_or_404(destination_id: int, db: Session) -> Destination:
    d = db.query(Destination).filter(Destination.id == destination_id).first()
    if not d:
        raise HTTPException(status_code=404, detail="Destino no encontrado")
    return d


@router.post(
    "/",
    response_model=DestinationRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
async def create_destination(payload: DestinationWrite, db: Session = Depends(get_db)):
    data = payload.model_dump()

    # Auto-geocode: sin coords, buscar "name, country" en Nominatim
    if data.get("lat") is None or data.get("lng") is None:
        place_query = build_place_query(name=data.get("name"), country=data.get("country"))
        result = await geocode_place_to_coords(place_query) if place_query else None
        if not result:
            raise HTTPException(status_code=400, detail="No se pudieron obtener coordenadas para el destino")
        data["lat"], data["lng"], _ = result

    d = Destination(**data)
    db.add(d)
    db.commit()
    db.refresh(d)
    logger.info("create_destination -> creado %s", d.id)
    return d


@router.get("/", response_model=List[DestinationRead])
def list_destinations(
    country: Optional[str] = None,
    tag: Optional[str] = None,
    limit: Optional[int] = None,
    start_after_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    q = db.query(Destination)
    if country:
        q = q.filter(Destination.country == country)

    if not tag:
        return paginate(q, Destination, limit, start_after_id)

    # `tags` es JSON: el filtro por etiqueta se hace en Python
    items = q.order_by(Destination.created_at.desc(), Destination.id.desc()).all()
    matching = [d for d in items if tag in (d.tags or [])]
    return paginate_list(matching, limit, start_after_id)


@router.get("/{destination_id}", response_model=DestinationRead)
def get_destination(destination_id: int, db: Session = Depends(get_db)):
    return get_destination_or_404(destination_id, db)


@router.patch("/{destination_id}", response_model=DestinationRead, dependencies=[Depends(get_current_user)])
def update_destination(destination_id: int, payload: DestinationUpdate, db: Session = Depends(get_db)):
    d = get_destination_or_404(destination_id, db)

    # todas las columnas son NOT NULL: un null explícito se ignora
    for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(d, k, v)

    db.commit()
    db.refresh(d)
    logger.info("update_destination -> ok %s", destination_id)
    return d


@router.delete("/{destination_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(get_current_user)])
def delete_destination(destination_id: int, db: Session = Depends(get_db)):
    d = get_destination_or_404(destination_id, db)
    db.delete(d)
    db.commit()
    logger.info("delete_destination -> deleted %s", destination_id)
