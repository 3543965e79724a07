"""
Delta engine.
Finds the events of the latest snapshot that were not in the previous one.
"""

from typing import Optional

from hubez_tracker.models import TrackingEvent, TrackingSnapshot


def compute_delta(
    current: TrackingSnapshot,
    previous: Optional[TrackingSnapshot],
) -> list[TrackingEvent]:
    """
    Return the events of ``current`` that are absent from ``previous``.
    
    Events compare by value (description, location, time), not by position,
    and the result keeps ``current``'s order. With no previous snapshot every
    event is new.
    
    Raises:
        MalformedResponse: if either snapshot does not hold exactly one
            shipment record
    """
    events = current.events
    
    if previous is None:
        return list(events)
    
    seen = set(previous.events)
    return [event for event in events if event not in seen]
