"""
Data models for the tracker.

Wire models mirror the hub-ez ``GetTracking`` JSON response, whose field names
are PascalCase. Each field carries its wire name as an alias so a response
body can be validated directly, while code constructs models by field name.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hubez_tracker.exceptions import MalformedResponse


class TrackingEvent(BaseModel):
    """A single scan/event in a shipment's history."""
    
    description: str = Field(alias="Desc")
    location_name: str = Field(alias="LocationName")
    event_time: str = Field(alias="EventTime")
    
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ShipmentRecord(BaseModel):
    """One ``ListHawbDetails`` entry (house air waybill)."""
    
    id: int = Field(alias="Id")
    hawb_number: str = Field(alias="HawbNumber")
    hawb_status: int = Field(alias="HawbStatus")
    sender_country: Optional[str] = Field(default=None, alias="SenderCountry")
    receiver_country: Optional[str] = Field(default=None, alias="ReceiverCountry")
    tracking_details: list[TrackingEvent] = Field(alias="ListTrackingDetails")
    
    model_config = ConfigDict(populate_by_name=True)


class TrackingSnapshot(BaseModel):
    """Full response from one poll of the tracking endpoint."""
    
    all_count: int = Field(default=0, alias="AllCount")
    no_record_count: int = Field(default=0, alias="NoRecordCount")
    delivered_count: int = Field(default=0, alias="DeliveredCount")
    in_transit_count: int = Field(default=0, alias="InTransitCount")
    unpickup_count: int = Field(default=0, alias="UnpickupCount")
    shipments: list[ShipmentRecord] = Field(alias="ListHawbDetails")
    
    model_config = ConfigDict(populate_by_name=True)
    
    @property
    def shipment(self) -> ShipmentRecord:
        """
        The single shipment record of this snapshot.
        
        Raises:
            MalformedResponse: if the snapshot holds zero or several records
        """
        if len(self.shipments) != 1:
            raise MalformedResponse(
                "Expected exactly one tracking detail information block, "
                f"got {len(self.shipments)}"
            )
        return self.shipments[0]
    
    @property
    def events(self) -> list[TrackingEvent]:
        return self.shipment.tracking_details


class DeltaBatch(BaseModel):
    """New events for one tracking number, handed to the notification worker."""
    
    tracking_number: str
    events: list[TrackingEvent]
    
    @field_validator("events")
    @classmethod
    def _not_empty(cls, value: list[TrackingEvent]) -> list[TrackingEvent]:
        if not value:
            raise ValueError("a delta batch must contain at least one event")
        return value
