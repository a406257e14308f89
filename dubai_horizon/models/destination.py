# dubai_horizon/models/destination.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from uuid import UUID, uuid4
from datetime import datetime
from enum import Enum

from dubai_horizon.config import get_default_currency
from dubai_horizon.models.review import Review


class DestinationType(str, Enum):
    ADVENTURE = "adventure"
    LUXURY = "luxury"
    CULTURAL = "cultural"
    DESERT = "desert"
    RELAXATION = "relaxation"
    FAMILY = "family"


DESTINATION_TYPE_LABELS = {
    DestinationType.ADVENTURE: "Adventure",
    DestinationType.LUXURY: "Luxury",
    DestinationType.CULTURAL: "Cultural",
    DestinationType.DESERT: "Desert",
    DestinationType.RELAXATION: "Relaxation",
    DestinationType.FAMILY: "Family Friendly",
}


def split_comma_separated(value):
    """Accept 'a, b,,c' as ['a', 'b', 'c']; lists pass through trimmed."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    return [item.strip() for item in value if item and item.strip()]


class DestinationBase(BaseModel):
    name: str = Field(..., min_length=3, description="Display name")
    short_description: str = Field(..., min_length=10)
    description: str = Field(..., min_length=20)
    main_image_url: Optional[str] = None
    gallery_image_urls: Optional[List[str]] = None
    types: List[DestinationType] = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    currency: str = Field(default_factory=get_default_currency)
    location_address: str = Field(..., min_length=5)
    availability: str = Field(..., min_length=3, description="Free-text availability, e.g. 'Daily 9am-6pm'")
    features: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    @field_validator('features', 'tags', mode='before')
    @classmethod
    def comma_separated_validation(cls, v):
        return split_comma_separated(v)


class DestinationCreate(DestinationBase):
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Desert Safari",
            "short_description": "Dune bashing and a Bedouin camp dinner.",
            "description": "An evening in the Lahbab desert with dune bashing, camel rides and a barbecue dinner under the stars.",
            "types": ["adventure", "desert"],
            "price": 250,
            "currency": "AED",
            "location_address": "Lahbab Desert, Dubai",
            "availability": "Daily, pickup at 3pm",
            "features": "Hotel pickup, BBQ dinner, Camel ride",
            "tags": "desert, family"
        }
    })


class DestinationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3)
    short_description: Optional[str] = Field(None, min_length=10)
    description: Optional[str] = Field(None, min_length=20)
    main_image_url: Optional[str] = None
    gallery_image_urls: Optional[List[str]] = None
    types: Optional[List[DestinationType]] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = None
    location_address: Optional[str] = Field(None, min_length=5)
    availability: Optional[str] = Field(None, min_length=3)
    features: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    @field_validator(
        "name", "short_description", "description", "types", "price", "currency",
        "location_address", "availability", mode="before"
    )
    @classmethod
    def required_field_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null; omit it to keep the current value.")
        return v

    @field_validator('features', 'tags', mode='before')
    @classmethod
    def comma_separated_validation(cls, v):
        return split_comma_separated(v)


class Destination(DestinationBase):
    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=datetime.now)
    # Filled in from the reviews collection; None when not computed.
    rating: Optional[float] = None
    review_count: Optional[int] = None


class DestinationDetail(Destination):
    reviews: List[Review] = Field(default_factory=list)


class DestinationTypeOption(BaseModel):
    value: DestinationType
    label: str


class PaginatedDestinations(BaseModel):
    items: List[Destination]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
