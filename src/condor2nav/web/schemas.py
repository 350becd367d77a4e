"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TranslateRequest(BaseModel):
    task_text: str
    origin_lat: float = Field(gt=-90.0, lt=90.0)
    origin_lon: float = Field(ge=-180.0, le=180.0)
    aat_minutes: int | None = None
    max_task_points: int = Field(default=10, ge=1)
    max_start_points: int = Field(default=10, ge=0)
    generate_waypoint_file: bool = True
    path_prefix: str = ""
    auto_advance: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str


class TaskPointRecord(BaseModel):
    index: int
    sector_type: str
    sector_radius: float
    aat_start_radial: int
    aat_finish_radial: int


class TranslateResponse(BaseModel):
    profile: dict[str, str]
    waypoint_file: list[str]
    airspace_file: list[str]
    warnings: list[str]
    tps_valid: bool
    task_points: list[TaskPointRecord]
