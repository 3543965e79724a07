"""
hub-ez tracking API client.
"""

from typing import Optional
import aiohttp
from loguru import logger
from pydantic import ValidationError
from yarl import URL

from hubez_tracker.config import DEFAULT_TRACKING_URL
from hubez_tracker.exceptions import MalformedResponse, TransportError, UrlError
from hubez_tracker.models import TrackingSnapshot


def build_tracking_url(tracking_number: str, base_url: str = DEFAULT_TRACKING_URL) -> URL:
    """
    Build the ``GetTracking`` URL for a tracking number.
    
    Raises:
        UrlError: if the resulting URL is not an absolute http(s) URL
    """
    try:
        url = URL(base_url)
    except (TypeError, ValueError) as e:
        raise UrlError(f"Error parsing URL {base_url!r}: {e}") from e
    
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlError(f"Error parsing URL {base_url!r}: not an absolute http(s) URL")
    
    return url.update_query(trackingNumber=tracking_number)


class HubEzClient:
    """
    Client for the hub-ez tracking endpoint.
    
    One ``fetch()`` issues one ``POST`` with an empty body and returns the
    parsed snapshot. There is no retry: any failure is raised to the caller.
    """
    
    def __init__(self, tracking_number: str, base_url: str = DEFAULT_TRACKING_URL):
        self.tracking_number = tracking_number
        self.url = build_tracking_url(tracking_number, base_url)
        self._session: Optional[aiohttp.ClientSession] = None
    
    async def _ensure_session(self):
        """Ensure HTTP session is created."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
    
    async def close(self):
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
    
    async def fetch(self) -> TrackingSnapshot:
        """
        Fetch the current snapshot.
        
        Raises:
            TransportError: on network failure or a non-2xx status
            MalformedResponse: if the body is not a valid tracking response
        """
        await self._ensure_session()
        
        try:
            async with self._session.post(self.url, data=b"") as response:
                if response.status >= 300:
                    error = (await response.read()).decode("utf-8", errors="replace")
                    raise TransportError(
                        f"Tracking request failed: {response.status} - {error[:200]}"
                    )
                body = await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(f"Tracking request failed: {e}") from e
        
        logger.debug(f"Received {len(body)} bytes for {self.tracking_number}")
        return self._parse_response(body)
    
    def _parse_response(self, body: bytes) -> TrackingSnapshot:
        """Parse and shape-check a raw response body."""
        try:
            snapshot = TrackingSnapshot.model_validate_json(body)
        except ValidationError as e:
            raise MalformedResponse(f"Invalid tracking response: {e}") from e
        
        # Raises MalformedResponse unless there is exactly one shipment record
        snapshot.shipment
        return snapshot
