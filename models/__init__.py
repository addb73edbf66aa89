from .User import User
from .Trip import Trip, TripStatus
from .Destination import Destination
from .Activity import Activity
from .Itinerary import Itinerary
from .Upload import Upload

__all__ = [
    "User",
    "Trip",
    "TripStatus",
    "Destination",
    "Activity",
    "Itinerary",
    "Upload",
]
