"""Read-only sources of per-animal favorite counts.

Favorites are written by a separate service; this package only reads a
snapshot of ``{animal_id: count}`` per ranking pass.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import requests

from homefurgood.errors import ProviderError

logger = logging.getLogger(__name__)


class FavoriteCountSource(Protocol):
    """Anything that can produce a favorite-count snapshot."""

    def get_favorite_counts(self) -> Mapping[str, int]: ...


class StaticFavoriteCounts:
    """Favorite counts held in process, e.g. for development or tests."""

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts = {str(k): int(v) for k, v in (counts or {}).items()}

    def get_favorite_counts(self) -> Mapping[str, int]:
        return dict(self._counts)


class HttpFavoriteCounts:
    """Favorite counts served by the favorites service.

    The endpoint answers ``GET`` with ``{"counts": {"<animal id>": <int>}}``.

    Args:
        session: HTTP session used for the call.
        url: Full URL of the counts endpoint.
        timeout: Request timeout in seconds.
    """

    def __init__(self, session: requests.Session, url: str, timeout: float = 10.0) -> None:
        self.session = session
        self.url = url
        self.timeout = timeout

    def get_favorite_counts(self) -> Mapping[str, int]:
        """Fetch the current counts.

        Raises:
            ProviderError: If the service fails or returns a malformed body.
        """
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.HTTPError as err:
            status = err.response.status_code if err.response is not None else 500
            raise ProviderError(f"Favorites service error: {err}", status=status) from err
        except (requests.RequestException, ValueError) as err:
            raise ProviderError(f"Favorites service unavailable: {err}", status=500) from err

        counts = body.get("counts") if isinstance(body, dict) else None
        if not isinstance(counts, dict):
            raise ProviderError("Favorites service returned no counts", status=500)

        parsed = {}
        for animal_id, count in counts.items():
            try:
                parsed[str(animal_id)] = max(int(count), 0)
            except (TypeError, ValueError):
                logger.warning("Ignoring non-numeric favorite count for %s", animal_id)
        return parsed
