from sqlalchemy import Column, Integer, String, Text, Float, DateTime, func, JSON
from sqlalchemy.orm import relationship
from database import Base

class Destination(Base):
    __tablename__ = "destinations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False, index=True)
    country = Column(String(120), nullable=False, index=True)
    summary = Column(Text, nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    activities = relationship("Activity", back_populates="destination", cascade="all, delete-orphan")
