import logging
from typing import Any, Dict, List, Optional

import requests

from .constants import API_URL, SYNC_REQUEST_TIMEOUT
from .exceptions import HttpError, MalformedEnvelope, NetworkFailure, UnexpectedContentType

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 100


def is_json_content_type(content_type: Optional[str]) -> bool:
    """True for ``application/json`` and structured ``+json`` media types."""
    if not content_type:
        return False
    media_type = content_type.split(';', 1)[0].strip().lower()
    return media_type == 'application/json' or media_type.endswith('+json')


class MoleculeApiClient:
    """
    Client for the BrainRoute-DB API server.

    ``sync`` is the only call the sync scheduler makes. It keeps no state
    between calls, so the caller decides when to retry.
    """

    def __init__(self, base_url: str = API_URL, timeout: float = SYNC_REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def molecules_url(self) -> str:
        return f"{self.base_url}/api/molecules"

    @property
    def export_url(self) -> str:
        """Direct download link for the full CSV export."""
        return f"{self.base_url}/api/export"

    @property
    def health_url(self) -> str:
        return f"{self.base_url}/api/health"

    def sync(self) -> List[Dict[str, Any]]:
        """
        Fetch the current molecule batch.

        Returns:
            The raw records from the ``data`` array of the envelope.

        Raises:
            NetworkFailure: transport error or timeout
            UnexpectedContentType: the endpoint did not answer with JSON
            HttpError: non-success status code
            MalformedEnvelope: body is not ``{success: true, data: [...]}``
        """
        logger.debug("Fetching molecules from %s", self.molecules_url)
        try:
            response = self.session.get(self.molecules_url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(f"Failed to reach {self.molecules_url}: {e}") from e

        # An HTML page here almost always means the URL points at the wrong process
        content_type = response.headers.get('Content-Type', '')
        if not is_json_content_type(content_type):
            excerpt = (response.text or '')[:EXCERPT_LENGTH]
            raise UnexpectedContentType(content_type, excerpt)

        if not response.ok:
            raise HttpError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedEnvelope(f"Response body is not valid JSON: {e}") from e

        if not isinstance(payload, dict) or payload.get('success') is not True:
            raise MalformedEnvelope("Invalid API response format: 'success' flag is not true")

        data = payload.get('data')
        if not isinstance(data, list):
            raise MalformedEnvelope("Invalid API response format: 'data' is not an array")

        logger.info("Successfully loaded %d molecules from %s", len(data), self.molecules_url)
        return data

    def check_health(self) -> Dict[str, Any]:
        """
        Query ``/api/health``. Operational only, the sync pipeline never calls it.
        """
        try:
            response = self.session.get(self.health_url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except ValueError as e:
            # requests' JSONDecodeError is also a RequestException, so check it first
            return {'status': 'invalid', 'error': str(e)}
        except requests.exceptions.RequestException as e:
            logger.warning("Health check against %s failed: %s", self.health_url, e)
            return {'status': 'unreachable', 'error': str(e)}
