# dubai_horizon/models/itinerary.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from enum import Enum


class CategoryTag(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    MEAL = "meal"
    FLIGHT = "flight"
    LODGING = "lodging"
    SIGHTSEEING = "sightseeing"
    CULTURE = "culture"
    SHOPPING = "shopping"
    NIGHTLIFE = "nightlife"
    NATURE = "nature"
    WATER = "water"
    LANDMARK = "landmark"
    CRUISE = "cruise"
    TRANSIT = "transit"
    WORK = "work"


class Budget(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: str = Field("", description="Period label such as 'Morning', empty when unlabeled")
    description: str
    category_hint: Optional[CategoryTag] = None


class DaySection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    introduction: Optional[str] = None
    time_blocks: List[TimeBlock] = Field(default_factory=list)


class StructureRequest(BaseModel):
    text: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "text": "Day 1: Arrival\nMorning: Check in at the hotel.\nEvening: Dhow cruise at the Marina."
        }
    })


class ParsedItinerary(BaseModel):
    days: List[DaySection]


class ItinerarySuggestionRequest(BaseModel):
    interests: str = Field(..., description="Free-text interests, e.g. 'desert safari, fine dining'")
    duration: str = Field(..., description="Trip length in days, 1 to 30")
    budget: Budget

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "interests": "adventure, luxury shopping, local food",
            "duration": "3",
            "budget": "medium"
        }
    })

    @field_validator('interests')
    @classmethod
    def interests_validation(cls, v):
        if len(v.strip()) < 3:
            raise ValueError('Please describe your interests (e.g., adventure, luxury, cultural).')
        return v.strip()

    @field_validator('duration')
    @classmethod
    def duration_validation(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Trip duration is required.')
        if not v.isdigit():
            raise ValueError('Trip duration must be a whole number of days.')
        days = int(v)
        if days < 1:
            raise ValueError('Trip duration must be at least 1 day.')
        if days > 30:
            raise ValueError('Trip duration cannot exceed 30 days.')
        return v

    @property
    def days(self) -> int:
        return int(self.duration)


class GeneratedItinerary(BaseModel):
    itinerary: str
    days: List[DaySection]
