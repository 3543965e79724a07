"""
Delivery module.
Carries delta batches from the poller to the Telegram notification worker.
"""

from hubez_tracker.delivery.channel import DeliveryChannel
from hubez_tracker.delivery.telegram import TelegramBot
from hubez_tracker.delivery.worker import NotificationWorker

__all__ = ["DeliveryChannel", "TelegramBot", "NotificationWorker"]
