"""Pydantic schemas for shows, ad slots and the weekly grid."""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from stationops.infrastructure.api.schemas.record_schemas import PartialUpdate

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

ShowStatus = Literal["active", "inactive", "archived"]
AdType = Literal["spot", "sponsorship", "promo", "psa"]
AdSlotStatus = Literal["scheduled", "active", "completed", "cancelled"]


def _check_days(days: list[int]) -> list[int]:
    if not days:
        raise ValueError("At least one day is required")
    if any(day < 0 or day > 6 for day in days):
        raise ValueError("Days must be between 0 (Sunday) and 6 (Saturday)")
    return sorted(set(days))


def _check_time(value: str) -> str:
    if not _TIME_PATTERN.match(value):
        raise ValueError("Time must be HH:MM in 24-hour format")
    return value


DaysOfWeek = Annotated[list[int], AfterValidator(_check_days)]
ClockTime = Annotated[str, AfterValidator(_check_time)]


class ShowCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    presenter: str | None = Field(None, max_length=255)
    category: str | None = Field(None, max_length=50)
    days_of_week: DaysOfWeek
    start_time: ClockTime
    end_time: ClockTime
    start_date: date
    end_date: date | None = None
    status: ShowStatus = "active"


class ShowUpdateRequest(PartialUpdate):
    required_fields = ("name", "days_of_week", "start_time", "end_time", "start_date", "status")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    presenter: str | None = Field(None, max_length=255)
    category: str | None = Field(None, max_length=50)
    days_of_week: DaysOfWeek | None = None
    start_time: ClockTime | None = None
    end_time: ClockTime | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: ShowStatus | None = None


class ShowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    presenter: str | None = None
    category: str | None = None
    days_of_week: list[int]
    start_time: str
    end_time: str
    start_date: date
    end_date: date | None = None
    status: str
    created_at: datetime


class AdSlotCreateRequest(BaseModel):
    client_id: str
    title: str = Field(..., min_length=1, max_length=255)
    ad_type: AdType = "spot"
    days_of_week: DaysOfWeek
    time: ClockTime
    duration: int = Field(..., gt=0, description="Length in seconds")
    start_date: date
    end_date: date
    frequency: int = Field(1, ge=1)
    status: AdSlotStatus = "scheduled"
    cost: Decimal | None = Field(None, ge=0)

    @model_validator(mode="after")
    def check_date_range(self) -> "AdSlotCreateRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AdSlotUpdateRequest(PartialUpdate):
    """Changes to an ad slot. The date range is rechecked against stored values."""

    required_fields = (
        "client_id",
        "title",
        "ad_type",
        "days_of_week",
        "time",
        "duration",
        "start_date",
        "end_date",
        "frequency",
        "status",
    )

    client_id: str | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    ad_type: AdType | None = None
    days_of_week: DaysOfWeek | None = None
    time: ClockTime | None = None
    duration: int | None = Field(None, gt=0)
    start_date: date | None = None
    end_date: date | None = None
    frequency: int | None = Field(None, ge=1)
    status: AdSlotStatus | None = None
    cost: Decimal | None = Field(None, ge=0)


class AdSlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    client_name: str
    title: str
    ad_type: str
    days_of_week: list[int]
    time: str
    duration: int
    start_date: date
    end_date: date
    frequency: int
    status: str
    cost: Decimal | None = None
    created_at: datetime


class GridDayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: int
    name: str
    shows: list[ShowResponse]
    ad_slots: list[AdSlotResponse]


class WeekGridResponse(BaseModel):
    days: list[GridDayResponse]
