"""
Geocoding helper utilities for resolving destination names to coordinates
using Nominatim (OpenStreetMap).
"""
import logging

import httpx
from typing import Optional, Tuple

logger = logging.getLogger("nomadiq.geocoding")

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


async def geocode_place_to_coords(
    place_query: str,
    timeout: float = 10.0
) -> Optional[Tuple[float, float, str]]:
    """
    Convert a place name/address to coordinates.

    Returns:
        (lat, lon, display_name) or None if geocoding fails
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(
                NOMINATIM_URL,
                params={
                    "q": place_query,
                    "format": "json",
                    "limit": 1,
                },
                headers={"User-Agent": "NomadIQ/1.0"}
            )
            resp.raise_for_status()
            data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("geocode %r falló: %s", place_query, exc)
        return None

    if not data:
        return None

    result = data[0]
    return (float(result["lat"]), float(result["lon"]), result.get("display_name", ""))


def build_place_query(name: Optional[str] = None, country: Optional[str] = None) -> Optional[str]:
    """Build a place query string from destination name and country."""
    parts = [p for p in (name, country) if p]
    return ", ".join(parts) if parts else None
