"""
Text rendering of tracking updates.
The same text goes to the console and to Telegram.
"""

from typing import Iterable

from hubez_tracker.models import TrackingEvent


def format_updates(tracking_number: str, events: Iterable[TrackingEvent]) -> str:
    """Render new events as a numbered, human-readable block."""
    lines = [f"Updates for {tracking_number}:\n"]
    
    for i, event in enumerate(events, start=1):
        lines.append(f"  {i}: {event.location_name} at {event.event_time}\n")
        lines.append(f"      {event.description}\n")
    
    return "".join(lines)
