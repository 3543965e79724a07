"""Tests for update formatting."""

from hubez_tracker.models import TrackingEvent
from hubez_tracker.tracking.formatter import format_updates


def test_single_event():
    event = TrackingEvent(
        description="Out for delivery",
        location_name="Denver, CO",
        event_time="2024-01-01T10:00:00",
    )
    
    assert format_updates("ABC123", [event]) == (
        "Updates for ABC123:\n"
        "  1: Denver, CO at 2024-01-01T10:00:00\n"
        "      Out for delivery\n"
    )


def test_events_numbered_from_one(events):
    text = format_updates("ABC123", events)
    lines = text.splitlines()
    
    assert lines[0] == "Updates for ABC123:"
    assert lines[1] == "  1: Shenzhen, CN at 2024-01-01T08:00:00"
    assert lines[2] == "      Shipment information received"
    assert lines[3] == "  2: Hong Kong, HK at 2024-01-01T09:00:00"
    assert lines[5] == "  3: Denver, CO at 2024-01-01T10:00:00"
    assert len(lines) == 7
    assert text.endswith("\n")


def test_accepts_any_iterable(events):
    assert format_updates("ABC123", iter(events)) == format_updates("ABC123", events)
