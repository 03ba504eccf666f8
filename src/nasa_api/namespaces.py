"""
Endpoint groups exposed as accessors on NASAAPIClient.
Each group keeps a reference to the client and no state of its own.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import quote

if TYPE_CHECKING:
    from nasa_api.client import NASAAPIClient


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class NeoAPI:
    """Near Earth Object Web Service endpoints."""

    def __init__(self, client: "NASAAPIClient"):
        self.client = client

    def feed(self, start_date: str, end_date: str) -> Any:
        """Asteroids by closest approach date to Earth (dates as YYYY-MM-DD)."""
        return self.client.get(
            self.client.api_url("neo/rest/v1/feed"),
            params={"start_date": start_date, "end_date": end_date},
        )

    def lookup(self, asteroid_id: Any) -> Any:
        """Look up one asteroid by its NASA JPL small body (SPK-ID) ID."""
        return self.client.get(self.client.api_url(f"neo/rest/v1/neo/{_segment(asteroid_id)}"))

    def browse(self) -> Any:
        """Browse the overall asteroid data set."""
        return self.client.get(self.client.api_url("neo/rest/v1/neo/browse"))


class EarthAPI:
    """Landsat 8 imagery endpoints."""

    def __init__(self, client: "NASAAPIClient"):
        self.client = client

    def imagery(self, lon: Any, lat: Any, date: Optional[str] = None) -> Any:
        """Landsat 8 image for a location; the most recent one when ``date`` is omitted."""
        return self.client.get(
            self.client.api_url("planetary/earth/imagery"),
            params={"lon": lon, "lat": lat, "date": date},
        )

    def assets(self, lon: Any, lat: Any, date: str, dim: Any) -> Any:
        """Date-times and asset names of the imagery closest to a location and date.

        ``date`` starts the 30 day search window; ``dim`` is the width and height in degrees.
        """
        return self.client.get(
            self.client.api_url("planetary/earth/assets"),
            params={"lon": lon, "lat": lat, "date": date, "dim": dim},
        )


class ImageAndVideoAPI:
    """NASA Image and Video Library; requests go out without the API key."""

    def __init__(self, client: "NASAAPIClient"):
        self.client = client

    def search(self, query: str, **filters: Any) -> Any:
        """Free text search; extra keywords (``media_type``, ``page``, ``year_start``...) become filters."""
        params = {"q": query}
        params.update(filters)
        return self.client.get(self.client.image_library_url("search"), params=params, authenticated=False)

    def asset(self, nasa_id: str) -> Any:
        """Manifest of a media asset."""
        return self._by_id("asset", nasa_id)

    def metadata(self, nasa_id: str) -> Any:
        """Location of a media asset's metadata."""
        return self._by_id("metadata", nasa_id)

    def captions(self, nasa_id: str) -> Any:
        """Location of a video asset's captions."""
        return self._by_id("captions", nasa_id)

    def _by_id(self, kind: str, nasa_id: str) -> Any:
        return self.client.get(self.client.image_library_url(f"{kind}/{_segment(nasa_id)}"), authenticated=False)
