from . import users
from . import admin
from . import destinations
from . import activities
from . import trips
from . import itinerary
from . import files

__all__ = [
    "users",
    "admin",
    "destinations",
    "activities",
    "trips",
    "itinerary",
    "files",
]
