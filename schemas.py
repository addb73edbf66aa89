# schemas.py (Pydantic v2)
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict, Any, Literal
from datetime import date, datetime


PriceRange = Literal["free", "low", "medium", "high"]
TripStatusLiteral = Literal["draft", "planned", "in_progress", "completed", "cancelled"]
TimeOfDay = Literal["morning", "afternoon", "evening", "full_day"]
UploadTypeLiteral = Literal["avatar", "activityImage", "doc"]


# ---------- Users ----------
class UserBase(BaseModel):
    name: str = Field(min_length=2, max_length=80)
    email: EmailStr
    avatar_url: Optional[str] = None

class UserWrite(UserBase):
    pass

class UserRead(UserBase):
    firebase_uid: str
    role: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ---------- Destinations ----------
class DestinationBase(BaseModel):
    name: str = Field(min_length=2, max_length=120)
    country: str = Field(min_length=2, max_length=120)
    summary: str = Field(min_length=10, max_length=500)
    tags: List[str] = []
    images: List[str] = []

class DestinationWrite(DestinationBase):
    # Si faltan coords se geocodifica "name, country"
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)

class DestinationUpdate(BaseModel):
    """Partial update (PATCH) - all fields optional"""
    name: Optional[str] = Field(default=None, min_length=2, max_length=120)
    country: Optional[str] = Field(default=None, min_length=2, max_length=120)
    summary: Optional[str] = Field(default=None, min_length=10, max_length=500)
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = None

class DestinationRead(DestinationBase):
    id: int
    lat: float
    lng: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ---------- Activities ----------
class ActivityBase(BaseModel):
    name: str = Field(min_length=2, max_length=120)
    category: str = Field(min_length=2, max_length=80)
    price_range: PriceRange
    opening_hours: Optional[str] = Field(default=None, min_length=1, max_length=200)
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    reviews_count: int = Field(default=0, ge=0)
    images: List[str] = []

class ActivityWrite(ActivityBase):
    destination_id: int

class ActivityUpdate(BaseModel):
    destination_id: Optional[int] = None
    name: Optional[str] = Field(default=None, min_length=2, max_length=120)
    category: Optional[str] = Field(default=None, min_length=2, max_length=80)
    price_range: Optional[PriceRange] = None
    opening_hours: Optional[str] = Field(default=None, min_length=1, max_length=200)
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    reviews_count: Optional[int] = Field(default=None, ge=0)
    images: Optional[List[str]] = None

class ActivityRead(ActivityBase):
    id: int
    destination_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ---------- Trips ----------
class TripBase(BaseModel):
    title: str = Field(min_length=3, max_length=150)
    start_date: date
    end_date: date
    budget: Optional[float] = Field(default=None, ge=0)
    interests: List[str] = []
    status: TripStatusLiteral = "draft"

class TripWrite(TripBase):
    pass

class TripUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=3, max_length=150)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = Field(default=None, ge=0)
    interests: Optional[List[str]] = None
    status: Optional[TripStatusLiteral] = None

class TripRead(TripBase):
    id: int
    owner_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ---------- Itineraries ----------
# Los campos del JSON `data` van en camelCase: es el formato que consume el frontend.
class ItineraryPeriod(BaseModel):
    timeOfDay: TimeOfDay = "full_day"
    title: str = Field(min_length=3)
    description: Optional[str] = Field(default=None, min_length=3, max_length=2000)
    activityId: Optional[str] = Field(default=None, min_length=1)
    notes: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    estimatedCost: Optional[float] = Field(default=None, ge=0)

class ItineraryDay(BaseModel):
    day: int = Field(ge=1)
    date: Optional[str] = Field(default=None, min_length=4)
    periods: List[ItineraryPeriod] = Field(min_length=1)

class ItineraryData(BaseModel):
    days: List[ItineraryDay] = Field(min_length=1)

class ItineraryWrite(BaseModel):
    trip_id: int
    generated_at: Optional[datetime] = None
    data: ItineraryData
    ai_model_used: Optional[str] = Field(default=None, min_length=1)
    score: Optional[float] = Field(default=None, ge=0, le=100)

class ItineraryUpdate(BaseModel):
    """Partial update: only fields present in the body are written"""
    trip_id: Optional[int] = None
    generated_at: Optional[datetime] = None
    data: Optional[ItineraryData] = None
    ai_model_used: Optional[str] = Field(default=None, min_length=1)
    score: Optional[float] = Field(default=None, ge=0, le=100)

class ItineraryRead(BaseModel):
    id: int
    trip_id: int
    generated_at: Optional[datetime] = None
    data: Dict[str, Any] = {"days": []}
    ai_model_used: Optional[str] = None
    score: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class GenerateItineraryRequest(BaseModel):
    destination_id: Optional[int] = None

class EnrichItineraryRequest(BaseModel):
    tone: Optional[Literal["neutral", "relajado", "aventurero"]] = None
    locale: Optional[str] = Field(default=None, min_length=2, max_length=10)
    model_hint: Optional[str] = Field(default=None, min_length=1)


# ---------- Uploads ----------
class UploadRead(BaseModel):
    id: int
    user_id: str
    original_name: str
    storage_path: str
    type: str
    mime_type: Optional[str] = None
    size: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
