from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Dict, Literal
from datetime import datetime
from app.config.availability_options import (
    CURRENCIES, TIMEZONES, WEEKDAYS, response_time_values,
)

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class DaySchedule(BaseModel):
    enabled: bool = True
    start: str = Field("09:00", pattern=TIME_PATTERN)
    end: str = Field("17:00", pattern=TIME_PATTERN)

    @model_validator(mode="after")
    def end_after_start(self):
        # Zero-padded HH:MM strings compare correctly as text
        if self.end <= self.start:
            raise ValueError("End time must be after start time")
        return self


def default_work_schedule() -> Dict[str, DaySchedule]:
    return {
        day: DaySchedule(enabled=day not in ("saturday", "sunday"))
        for day in WEEKDAYS
    }


class BudgetRange(BaseModel):
    min: int = Field(500, ge=0)
    max: int = Field(10000, ge=0)

    @model_validator(mode="after")
    def min_not_above_max(self):
        if self.min > self.max:
            raise ValueError("Minimum budget cannot exceed maximum budget")
        return self


class AvailabilitySettings(BaseModel):
    is_available: bool = True
    availability_status: Literal["available", "busy", "away", "invisible"] = "available"
    hourly_rate: float = Field(50, ge=0)
    currency: str = "USD"
    timezone: str = "UTC"
    work_schedule: Dict[str, DaySchedule] = Field(default_factory=default_work_schedule)
    response_time: str = "within-24-hours"
    max_projects: int = Field(3, ge=1)
    skills: List[str] = []
    services: List[str] = []
    portfolio: str = ""
    bio: str = ""
    location: str = ""
    languages: List[str] = Field(default_factory=lambda: ["English"])
    preferred_communication: List[str] = Field(default_factory=lambda: ["email"])
    project_types: List[str] = []
    budget_range: BudgetRange = Field(default_factory=BudgetRange)
    availability_notes: str = ""
    auto_reply: bool = False
    auto_reply_message: str = "Thank you for your message. I'll get back to you soon!"
    vacation_mode: bool = False
    vacation_start: str = ""
    vacation_end: str = ""
    vacation_message: str = "I'm currently on vacation and will respond when I return."

    @field_validator("currency")
    @classmethod
    def known_currency(cls, v: str) -> str:
        if v not in CURRENCIES:
            raise ValueError(f"currency must be one of {', '.join(CURRENCIES)}")
        return v

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, v: str) -> str:
        if v not in TIMEZONES:
            raise ValueError(f"timezone must be one of {', '.join(TIMEZONES)}")
        return v

    @field_validator("response_time")
    @classmethod
    def known_response_time(cls, v: str) -> str:
        if v not in response_time_values():
            raise ValueError(f"response_time must be one of {', '.join(response_time_values())}")
        return v

    @field_validator("work_schedule")
    @classmethod
    def known_weekdays(cls, v: Dict[str, DaySchedule]) -> Dict[str, DaySchedule]:
        unknown = set(v) - set(WEEKDAYS)
        if unknown:
            raise ValueError(f"Unknown weekdays: {', '.join(sorted(unknown))}")
        schedule = default_work_schedule()
        schedule.update(v)
        return schedule


class AvailabilityResponse(AvailabilitySettings):
    saved_at: Optional[datetime] = None


class AvailabilitySaveResponse(BaseModel):
    settings: AvailabilityResponse
    synced: bool
    message: str


class ToggleRequest(BaseModel):
    field: Literal["skills", "services", "languages", "preferred_communication", "project_types"]
    value: str
