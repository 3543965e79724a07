"""
Notification worker.
Drains the delivery channel and forwards each batch to Telegram.
"""

import asyncio
from typing import Optional
from loguru import logger

from hubez_tracker.delivery.channel import DeliveryChannel
from hubez_tracker.delivery.telegram import TelegramBot
from hubez_tracker.exceptions import ChannelClosedError, DeliveryError
from hubez_tracker.models import DeltaBatch
from hubez_tracker.tracking.formatter import format_updates


class NotificationWorker:
    """
    Background task delivering delta batches.
    
    Delivery is best effort: a failed send is logged and the batch is
    dropped. The worker ends, without restarting, when the channel closes;
    it then closes the channel itself so the producer's next send fails.
    """
    
    def __init__(
        self,
        channel: DeliveryChannel,
        bot: TelegramBot,
        chat_id: str,
    ):
        self.channel = channel
        self.bot = bot
        self.chat_id = chat_id
        
        self._worker_task: Optional[asyncio.Task] = None
        self._delivered = 0
        self._failed = 0
    
    @property
    def is_running(self) -> bool:
        return self._worker_task is not None and not self._worker_task.done()
    
    @property
    def delivered_count(self) -> int:
        return self._delivered
    
    @property
    def failed_count(self) -> int:
        return self._failed
    
    async def start(self):
        """Start the worker task."""
        self._worker_task = asyncio.create_task(self._worker_loop())
        logger.info("Notification worker started")
    
    async def stop(self):
        """Stop the worker task."""
        if self._worker_task:
            self._worker_task.cancel()
            try:
                await self._worker_task
            except asyncio.CancelledError:
                pass
        
        logger.info("Notification worker stopped")
    
    async def join(self):
        """Wait for the worker loop to end on its own."""
        if self._worker_task:
            await self._worker_task
    
    async def _worker_loop(self):
        """Main worker loop that delivers batches."""
        # Captured once; later config changes do not move the destination
        chat_id = self.chat_id
        
        try:
            while True:
                try:
                    batch = await self.channel.receive()
                except ChannelClosedError as e:
                    logger.error(str(e))
                    break
                
                await self._deliver(chat_id, batch)
        finally:
            self.channel.close()
    
    async def _deliver(self, chat_id: str, batch: DeltaBatch):
        """Send one batch; delivery errors are logged, not raised."""
        text = format_updates(batch.tracking_number, batch.events)
        
        try:
            await self.bot.send_message(chat_id, text)
        except DeliveryError as e:
            self._failed += 1
            logger.error(f"Error sending update: {e}")
            return
        
        self._delivered += 1
        logger.info("Update sent")
