"""
hub-ez shipment tracker.
Polls a single tracking number and pushes new tracking events to Telegram.
"""

__version__ = "1.0.0"
