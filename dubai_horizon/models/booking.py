# dubai_horizon/models/booking.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from datetime import date, datetime, timedelta
from uuid import UUID, uuid4
from enum import Enum
import re

PHONE_PATTERN = r'^\+?[0-9\s\-()]*$'


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class BookingItem(BaseModel):
    id: UUID = Field(..., description="Destination ID")
    name: str
    quantity: int
    price: float
    currency: str


class BookingCreate(BaseModel):
    name: str = Field(..., description="Booker's full name")
    phone: str = Field(..., description="Phone number with country code")
    travel_date: date

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "John Doe",
            "phone": "+971 50 123 4567",
            "travel_date": "2026-12-01"
        }
    })

    @field_validator('name')
    @classmethod
    def name_validation(cls, v):
        if len(v.strip()) < 2:
            raise ValueError('Name must be at least 2 characters.')
        return v.strip()

    @field_validator('phone')
    @classmethod
    def phone_validation(cls, v):
        v = v.strip()
        if len(v) < 10:
            raise ValueError('Phone number must be at least 10 digits.')
        if not re.match(PHONE_PATTERN, v):
            raise ValueError('Invalid phone number format.')
        return v

    @field_validator('travel_date')
    @classmethod
    def travel_date_validation(cls, v):
        if v < date.today() - timedelta(days=1):
            raise ValueError('Travel date cannot be in the past.')
        return v


class Booking(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    name: str
    phone: str
    travel_date: date
    items: List[BookingItem]
    total_cost: float
    currency: str
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class AdminSummary(BaseModel):
    total_bookings: int
    pending_bookings: int
    registered_users: int
    featured_destinations: int
