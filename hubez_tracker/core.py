"""
Tracker service that wires the components together.
This is the top-level error boundary: fatal errors end up here.
"""

import asyncio
import signal
import sys
from typing import Optional
from loguru import logger
from rich.console import Console

from hubez_tracker import __version__
from hubez_tracker.config import TrackerConfig, init_config
from hubez_tracker.delivery import DeliveryChannel, NotificationWorker, TelegramBot
from hubez_tracker.exceptions import TrackerError
from hubez_tracker.logging_config import setup_logging
from hubez_tracker.poller import TrackingPoller
from hubez_tracker.tracking import HubEzClient


class TrackerService:
    """
    Main service class.
    
    Orchestrates:
    - The hub-ez client and poll loop
    - The delivery channel
    - The Telegram notification worker
    """
    
    def __init__(
        self,
        tracking_number: str,
        config: TrackerConfig,
        console: Optional[Console] = None,
    ):
        self.tracking_number = tracking_number
        self.config = config
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        
        # Built before polling so URL errors surface at startup
        self.client = HubEzClient(tracking_number, config.tracking_url)
        self.bot = TelegramBot(config.telegram_bot_token, config.telegram_api_url)
        self.channel = DeliveryChannel()
        self.worker = NotificationWorker(self.channel, self.bot, config.telegram_bot_user)
        self.poller = TrackingPoller(
            self.client,
            self.channel,
            interval=config.poll_interval,
            console=self.console,
        )
    
    async def start(self):
        """Start the worker and poll until a fatal error."""
        logger.info(f"Starting hub-ez tracker v{__version__}")
        self.console.print(f"Checking tracking number: {self.tracking_number}", markup=False)
        
        self.console.print("Starting Telegram bot...", markup=False)
        await self.worker.start()
        
        try:
            await self.poller.run()
        finally:
            await self.stop()
    
    async def stop(self):
        """Stop the worker and release HTTP sessions."""
        await self.worker.stop()
        await self.client.close()
        await self.bot.close()
        
        stats = self.channel.get_stats()
        logger.info(
            f"Tracker stopped after {self.poller.poll_count} poll(s); "
            f"{stats['sent']} batch(es) queued, {self.worker.delivered_count} delivered"
        )
    
    def run(self):
        """Run the service (blocking)."""
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        
        main_task = loop.create_task(self.start())
        
        def signal_handler():
            logger.info("Received shutdown signal")
            main_task.cancel()
        
        try:
            if sys.platform != 'win32':
                loop.add_signal_handler(signal.SIGTERM, signal_handler)
                loop.add_signal_handler(signal.SIGINT, signal_handler)
        except NotImplementedError:
            pass
        
        try:
            loop.run_until_complete(main_task)
        except asyncio.CancelledError:
            logger.info("Tracker cancelled")
        except KeyboardInterrupt:
            logger.info("Keyboard interrupt received")
            main_task.cancel()
            try:
                loop.run_until_complete(main_task)
            except asyncio.CancelledError:
                pass
        finally:
            loop.close()


def run_tracker(
    tracking_number: str,
    env_file: Optional[str] = None,
    interval: Optional[float] = None,
    log_level: Optional[str] = None,
):
    """
    Run the tracker for one tracking number.
    
    Any fatal error is logged and the process exits with status 1.
    
    Args:
        tracking_number: The shipment to follow
        env_file: Optional .env file to load
        interval: Override for the poll interval in seconds
        log_level: Override for the log level
    """
    try:
        config = init_config(env_file, poll_interval=interval, log_level=log_level)
    except TrackerError as e:
        setup_logging(TrackerConfig())
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    
    setup_logging(config)
    
    try:
        service = TrackerService(tracking_number, config)
        service.run()
    except TrackerError as e:
        logger.error(f"Error encountered: {e}")
        sys.exit(1)
