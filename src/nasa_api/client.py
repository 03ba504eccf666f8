"""Client for interacting with NASA's public APIs using an API key."""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Optional

import requests

from nasa_api.config import ClientSettings, get_settings
from nasa_api.errors import ConfigError, DecodeError, NetworkError, RemoteError, ValidationError
from nasa_api.namespaces import EarthAPI, ImageAndVideoAPI, NeoAPI

logger = logging.getLogger(__name__)
logging.getLogger("nasa_api").addHandler(logging.NullHandler())

_KEY_PATTERN = re.compile(r"(api_key=)[^&\s]*")


def redact(url: str) -> str:
    """Hide the API key in a URL before it is logged or shown in an error."""
    return _KEY_PATTERN.sub(r"\1***", url)


class NASAAPIClient:
    """Thin wrapper around NASA APIs that injects the API key and handles errors.

    Endpoints are grouped the way api.nasa.gov documents them::

        nasa = NASAAPIClient("YourAPIKeyHere")
        nasa.apod()
        nasa.neo.feed("2022-01-01", "2022-01-02")
        nasa.image_and_video.search("moon")

    Every call issues exactly one GET and returns the decoded JSON as is.
    """

    def __init__(
        self,
        api_key: str,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigError("api_key must be a non-empty string; get one at https://api.nasa.gov/")
        self._api_key = api_key
        self._settings = settings or get_settings()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key='{self._api_key[:4]}***', base_url='{self._settings.base_url}')"

    def __enter__(self) -> "NASAAPIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections of a session this client created."""
        if self._owns_session:
            self.session.close()

    # -- shared request routine ------------------------------------------------

    def _prepare(
        self, url: str, params: Optional[Dict[str, Any]] = None, authenticated: bool = True
    ) -> requests.PreparedRequest:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if authenticated:
            query["api_key"] = self._api_key
        return self.session.prepare_request(requests.Request("GET", url, params=query))

    def build_url(self, url: str, params: Optional[Dict[str, Any]] = None, authenticated: bool = True) -> str:
        """Return the exact URL a request would be sent to, without sending it."""
        return self._prepare(url, params, authenticated).url or url

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, authenticated: bool = True) -> Any:
        """Send one GET to an absolute URL and return the decoded JSON.

        Shared by every endpoint method; the API key is appended last when
        ``authenticated`` and query parameters set to None are dropped.
        """
        prepared = self._prepare(url, params, authenticated)
        safe_url = redact(prepared.url or url)
        logger.debug("GET %s", safe_url)
        try:
            response = self.session.send(prepared, timeout=self._settings.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Request to {safe_url} failed: {redact(str(exc))}") from exc
        logger.debug("%s returned %d", safe_url, response.status_code)

        if not response.ok:
            if self._settings.raise_for_status:
                raise RemoteError(response.status_code, safe_url, self._error_payload(response))
            logger.warning("NASA API returned %d for %s; passing payload through", response.status_code, safe_url)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Response from {safe_url} is not valid JSON",
                status_code=response.status_code,
                body=response.text[:200],
            ) from exc

    @staticmethod
    def _error_payload(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    def api_url(self, path: str) -> str:
        return f"{self._settings.base_url}/{path.lstrip('/')}"

    def image_library_url(self, path: str) -> str:
        return f"{self._settings.image_library_url}/{path.lstrip('/')}"

    def request(self, path_and_query: str) -> Any:
        """GET a path on api.nasa.gov; the API key is appended as the last query parameter.

        ``path_and_query`` may already carry an encoded query string, e.g.
        ``"neo/rest/v1/feed?start_date=2022-01-01&end_date=2022-01-02"``.
        """
        return self.get(self.api_url(path_and_query.rstrip("?&")))

    # -- endpoint groups -------------------------------------------------------

    @property
    def neo(self) -> NeoAPI:
        """Asteroids - NeoWs (Near Earth Object Web Service)."""
        return NeoAPI(self)

    @property
    def earth(self) -> EarthAPI:
        """Landsat 8 imagery and assets."""
        return EarthAPI(self)

    @property
    def image_and_video(self) -> ImageAndVideoAPI:
        """NASA Image and Video Library at images.nasa.gov; needs no API key."""
        return ImageAndVideoAPI(self)

    # -- root endpoints --------------------------------------------------------

    def apod(self, date: Optional[str] = None, **options: Any) -> Any:
        """Fetch Astronomy Picture of the Day metadata.

        Extra keyword arguments (``start_date``, ``end_date``, ``count``, ``thumbs``)
        are forwarded as query parameters.
        """
        params: Dict[str, Any] = {"date": date}
        params.update(options)
        return self.get(self.api_url("planetary/apod"), params=params)

    def insight(self, version: float) -> Any:
        """Mars weather summaries from the InSight lander at Elysium Planitia."""
        if isinstance(version, bool) or not isinstance(version, (int, float)):
            raise ValidationError(f"Version should be a number, got {version!r}")
        # only floats can be nan/inf; math.isfinite overflows on huge ints
        if isinstance(version, float) and not math.isfinite(version):
            raise ValidationError(f"Version should be a number, got {version!r}")
        return self.get(self.api_url("insight_weather/"), params={"feedtype": "json", "ver": version})

    def techport(self, project_id: int) -> Any:
        """Look up a TechPort project record by its numeric ID."""
        if isinstance(project_id, bool) or not isinstance(project_id, int):
            raise ValidationError(f"The ID should be an integer, got {project_id!r}")
        return self.get(self.api_url(f"techport/api/projects/{project_id}"))
