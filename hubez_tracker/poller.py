"""
Poll loop.
Fetches the tracking snapshot on a fixed interval, prints new events and
hands them to the delivery channel.
"""

import asyncio
from typing import Optional
from loguru import logger
from rich.console import Console

from hubez_tracker.delivery.channel import DeliveryChannel
from hubez_tracker.models import DeltaBatch, TrackingEvent, TrackingSnapshot
from hubez_tracker.tracking.client import HubEzClient
from hubez_tracker.tracking.delta import compute_delta
from hubez_tracker.tracking.formatter import format_updates


class TrackingPoller:
    """
    Drives fetch, diff, print, enqueue, sleep.
    
    The previous snapshot lives only here; the notification worker only ever
    sees delta batches. Fetch and parse errors propagate out of ``run`` with
    no retry.
    """
    
    def __init__(
        self,
        client: HubEzClient,
        channel: DeliveryChannel,
        interval: float = 1.0,
        console: Optional[Console] = None,
    ):
        self.client = client
        self.channel = channel
        self.interval = interval
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        
        self._previous: Optional[TrackingSnapshot] = None
        self._polls = 0
    
    @property
    def previous(self) -> Optional[TrackingSnapshot]:
        return self._previous
    
    @property
    def poll_count(self) -> int:
        return self._polls
    
    def _print(self, text: str = "", end: str = "\n"):
        self.console.print(text, end=end, markup=False, highlight=False, emoji=False)
    
    async def poll_once(self) -> list[TrackingEvent]:
        """
        Run one fetch/diff/dispatch cycle.
        
        Returns:
            The new events found by this poll (possibly empty)
        """
        snapshot = await self.client.fetch()
        self._polls += 1
        
        updates = compute_delta(snapshot, self._previous)
        
        if updates:
            tracking_number = snapshot.shipment.hawb_number
            self._print(format_updates(tracking_number, updates))
            self.channel.send(DeltaBatch(tracking_number=tracking_number, events=updates))
            self._print()
            logger.debug(f"Poll {self._polls}: {len(updates)} new event(s)")
        else:
            self._print("No updates...")
        
        self._previous = snapshot
        return updates
    
    async def run(self):
        """Poll forever at the configured interval."""
        logger.info(
            f"Polling {self.client.tracking_number} every {self.interval}s"
        )
        
        while True:
            await self.poll_once()
            await asyncio.sleep(self.interval)
