"""
Tracking module.
Fetches hub-ez snapshots, diffs them and formats the new events.
"""

from hubez_tracker.tracking.client import HubEzClient
from hubez_tracker.tracking.delta import compute_delta
from hubez_tracker.tracking.formatter import format_updates

__all__ = ["HubEzClient", "compute_delta", "format_updates"]
