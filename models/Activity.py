from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, func, JSON
from sqlalchemy.orm import relationship
from database import Base

class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    destination_id = Column(Integer, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    category = Column(String(80), nullable=False, index=True)  # ej: "gastronomía", "aventura"
    price_range = Column(String(10), nullable=False)
    opening_hours = Column(String(200), nullable=True)  # texto libre
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    rating = Column(Float, nullable=True)
    reviews_count = Column(Integer, default=0, nullable=False)
    images = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    destination = relationship("Destination", back_populates="activities")
