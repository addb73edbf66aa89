"""
Configuración de la app leída desde variables de entorno (y `.env` si existe).

Se lee una única vez al importar; el resto del código recibe los valores ya
resueltos, por ejemplo vía `get_itinerary_config()`.
"""
import os

from dotenv import load_dotenv

from services.itinerary_generator import ItineraryConfig

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./nomadiq.db")

AI_MODEL_NAME = os.getenv("AI_MODEL_NAME", "local-rules-enrichment-v1")
ITINERARY_LOCALE = os.getenv("ITINERARY_LOCALE", "es")

try:
    ITINERARY_DEFAULT_DAYS = int(os.getenv("ITINERARY_DEFAULT_DAYS", "3"))
except ValueError:
    ITINERARY_DEFAULT_DAYS = 3

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
LOG_DIR = os.getenv("LOG_DIR")  # None -> ./logs junto al proyecto

FIREBASE_CREDENTIALS_PATH = os.getenv(
    "FIREBASE_CREDENTIALS_PATH",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "serviceAccountKey.json"),
)

_itinerary_config = ItineraryConfig(
    default_day_count=ITINERARY_DEFAULT_DAYS,
    default_model_tag=AI_MODEL_NAME,
    locale=ITINERARY_LOCALE,
)


def get_itinerary_config() -> ItineraryConfig:
    return _itinerary_config
