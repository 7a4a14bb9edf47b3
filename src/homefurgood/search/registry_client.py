"""HTTP client for the RescueGroups v5 public API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests
from pydantic import ValidationError

from homefurgood.data.schemas import ExternalRequest, RawDetailResult, RawSearchResult
from homefurgood.errors import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.rescuegroups.org/v5"
SEARCH_PATH = "/public/animals/search/available/dogs"
DETAIL_INCLUDE = "pictures,locations"
JSON_API_CONTENT_TYPE = "application/vnd.api+json"


def build_session(api_key: str | None) -> requests.Session:
    """Build an authenticated session for the registry.

    Args:
        api_key: RescueGroups API key.

    Returns:
        requests.Session carrying the credential header.

    Raises:
        ConfigurationError: If no API key is given.
    """
    if not api_key:
        raise ConfigurationError("Missing RESCUEGROUPS_API_KEY")

    session = requests.Session()
    session.headers.update(
        {
            "Authorization": api_key,
            "Content-Type": JSON_API_CONTENT_TYPE,
        }
    )
    return session


class RegistryClient:
    """Performs search and detail calls against the registry.

    Related pictures and locations are requested inline so the normalizer
    never needs extra round trips. Failures are raised as ProviderError and
    never retried here.

    Args:
        session: Authenticated session, usually from :func:`build_session`.
        base_url: API root URL.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        session: requests.Session,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def search(self, request: ExternalRequest) -> RawSearchResult:
        """Run an available-dogs search.

        Args:
            request: Request built by the query builder.

        Returns:
            Raw search payload with its included side-table.

        Raises:
            ProviderError: If the call fails or the payload is malformed.
        """
        path = SEARCH_PATH + ("/haspic" if request.has_photo else "")
        payload = self._send(
            "POST",
            f"{self.base_url}{path}",
            json=request.to_body(),
            params=request.to_params(),
        )
        return _validate(RawSearchResult, payload)

    def get_by_id(self, animal_id: str) -> RawDetailResult:
        """Fetch one animal with its pictures and locations.

        An unknown ID yields an empty result rather than an error; callers
        decide what "not found" means.

        Raises:
            ProviderError: If the call fails for any other reason.
        """
        url = f"{self.base_url}/public/animals/{quote(str(animal_id), safe='')}"
        payload = self._send(
            "GET",
            url,
            params={"include": DETAIL_INCLUDE},
            missing_ok=True,
        )
        return _validate(RawDetailResult, payload)

    def _send(
        self,
        method: str,
        url: str,
        *,
        missing_ok: bool = False,
        **kwargs: Any,
    ) -> dict | None:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as err:
            status = err.response.status_code if err.response is not None else 500
            if missing_ok and status == 404:
                logger.info("Registry has no record at %s", url)
                return None
            message = err.response.text if err.response is not None else str(err)
            logger.error("RescueGroups error %d on %s %s: %s", status, method, url, message)
            raise ProviderError(message or str(err), status=status) from err
        except requests.RequestException as err:
            logger.error("RescueGroups request failed on %s %s: %s", method, url, err)
            raise ProviderError(str(err), status=500) from err

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as err:
            raise ProviderError(f"Invalid JSON from registry: {err}", status=500) from err


def _validate(model: type, payload: dict | None) -> Any:
    """Parse a registry payload into its raw model, treating None as empty."""
    try:
        return model.model_validate(payload or {})
    except ValidationError as err:
        raise ProviderError(f"Malformed registry response: {err}", status=500) from err
