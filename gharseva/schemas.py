from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SubService(BaseModel):
    id: str
    name: str = ""


class MatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(alias="bookingId")
    # kept as plain strings: unknown values mean "no matches", not a 4xx
    service_type: str = Field(alias="serviceType")
    preferred_time: str = Field(default="flexible", alias="preferredTime")
    address: str = ""
    sub_services: List[SubService] = Field(default_factory=list, alias="subServices")
    dietary_preference: str | None = Field(default=None, alias="dietaryPreference")


class WorkerSummary(BaseModel):
    id: str
    name: str
    phone: str
    work_type: str
    work_subcategories: List[str] | None = None
    years_experience: int | None = None
    languages_spoken: List[str] | None = None
    preferred_areas: List[str] | None = None
    working_hours: str | None = None
    gender: str | None = None
    match_score: int


class MatchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    matched_workers: List[WorkerSummary] = Field(default_factory=list, alias="matchedWorkers")
    message: str


class SelectWorker(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    worker_id: str = Field(alias="workerId")


class SelectWorkerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(alias="bookingId")
    worker_id: str = Field(alias="workerId")
    status: str
    match_score: int
    trial_start_date: datetime
    trial_end_date: datetime
    scheduled_call_date: datetime
