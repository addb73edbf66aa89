import enum

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, func, Float, JSON
from sqlalchemy.orm import relationship
from database import Base


class TripStatus(str, enum.Enum):
    draft = "draft"              # borrador, aún sin confirmar
    planned = "planned"          # fechas y datos definidos
    in_progress = "in_progress"  # viaje en curso
    completed = "completed"
    cancelled = "cancelled"


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("users.firebase_uid", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(150), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    budget = Column(Float, nullable=True)
    interests = Column(JSON, nullable=False, default=list)  # ej: ["museos", "gastronomía"]
    status = Column(String(20), nullable=False, default=TripStatus.draft.value, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    owner = relationship("User", back_populates="trips", lazy="joined")
    itineraries = relationship("Itinerary", back_populates="trip", cascade="all, delete-orphan")
