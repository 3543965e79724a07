"""
In-process delivery channel between the poller and the notification worker.
"""

import asyncio
from collections import defaultdict
from loguru import logger

from hubez_tracker.exceptions import ChannelClosedError
from hubez_tracker.models import DeltaBatch


_CLOSED = object()


class DeliveryChannel:
    """
    Unbounded FIFO queue of delta batches.
    
    Single producer (the poller), single consumer (the notification worker).
    Batches come out in the order they went in, never merged or reordered.
    Once closed, ``send`` fails and ``receive`` fails after the remaining
    batches have been drained.
    """
    
    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False
        
        # Statistics
        self._stats = defaultdict(int)
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    @property
    def pending_count(self) -> int:
        """Number of batches waiting to be received."""
        return self._queue.qsize() - (1 if self._closed and self._queue.qsize() else 0)
    
    def send(self, batch: DeltaBatch) -> None:
        """
        Enqueue a batch without blocking.
        
        Raises:
            ChannelClosedError: if the consumer side has gone away
        """
        if self._closed:
            raise ChannelClosedError("Error sending to bot worker: channel is closed")
        
        self._queue.put_nowait(batch)
        self._stats["sent"] += 1
        logger.debug(
            f"Batch queued for {batch.tracking_number} ({len(batch.events)} event(s))"
        )
    
    async def receive(self) -> DeltaBatch:
        """
        Wait for the next batch.
        
        Raises:
            ChannelClosedError: once the channel is closed and drained
        """
        if self._closed and self._queue.empty():
            raise ChannelClosedError("Error receiving update data: channel is closed")
        
        item = await self._queue.get()
        
        if item is _CLOSED:
            # Leave the marker for any later receive
            self._queue.put_nowait(_CLOSED)
            raise ChannelClosedError("Error receiving update data: channel is closed")
        
        self._stats["received"] += 1
        return item
    
    def close(self) -> None:
        """Close the channel; wakes a waiting receiver once drained."""
        if self._closed:
            return
        
        self._closed = True
        self._queue.put_nowait(_CLOSED)
        logger.debug("Delivery channel closed")
    
    def get_stats(self) -> dict:
        """Get channel statistics."""
        return {
            "pending": self.pending_count,
            "sent": self._stats["sent"],
            "received": self._stats["received"],
        }
