"""Shared fixtures."""

import sys

import pytest
from loguru import logger

from hubez_tracker.models import ShipmentRecord, TrackingEvent, TrackingSnapshot


def wire_event(desc: str, location: str, time: str) -> dict:
    return {"Desc": desc, "LocationName": location, "EventTime": time}


def wire_response(events: list[dict], shipments: int = 1, hawb: str = "ABC123") -> dict:
    """Build a GetTracking response body as the endpoint returns it."""
    return {
        "AllCount": shipments,
        "NoRecordCount": 0,
        "DeliveredCount": 0,
        "InTransitCount": shipments,
        "UnpickupCount": 0,
        "ListHawbDetails": [
            {
                "Id": 1000 + i,
                "HawbNumber": hawb,
                "HawbStatus": 2,
                "SenderCountry": "CN",
                "ReceiverCountry": "US",
                "ListTrackingDetails": events,
            }
            for i in range(shipments)
        ],
    }


@pytest.fixture
def make_snapshot():
    """Factory for snapshots holding the given events."""
    def _make(events: list[TrackingEvent], shipments: int = 1, hawb: str = "ABC123"):
        return TrackingSnapshot(
            all_count=shipments,
            in_transit_count=shipments,
            shipments=[
                ShipmentRecord(
                    id=1000 + i,
                    hawb_number=hawb,
                    hawb_status=2,
                    sender_country="CN",
                    receiver_country="US",
                    tracking_details=list(events),
                )
                for i in range(shipments)
            ],
        )
    return _make


@pytest.fixture
def events():
    """Three chronological events."""
    return [
        TrackingEvent(
            description="Shipment information received",
            location_name="Shenzhen, CN",
            event_time="2024-01-01T08:00:00",
        ),
        TrackingEvent(
            description="Departed facility",
            location_name="Hong Kong, HK",
            event_time="2024-01-01T09:00:00",
        ),
        TrackingEvent(
            description="Out for delivery",
            location_name="Denver, CO",
            event_time="2024-01-01T10:00:00",
        ),
    ]


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo any sinks a test installed via setup_logging."""
    yield
    logger.remove()
    logger.add(sys.stderr)
