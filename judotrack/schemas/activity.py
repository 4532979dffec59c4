from datetime import date
from enum import Enum
from pydantic import BaseModel, Field


class ActivityStatus(str, Enum):
    """Estado de actividad derivado; se recalcula en cada lectura."""
    active = "active"
    moderate = "moderate"
    inactive = "inactive"


class ActivitySummary(BaseModel):
    weekly_count: int = Field(..., ge=0, description="Sesiones en la ventana semanal")
    status: ActivityStatus


class UserActivity(ActivitySummary):
    user_id: int
    reference_date: date


class GroupActivitySummary(BaseModel):
    total_athletes: int = 0
    active_athletes: int = 0
    average_weekly_sessions: float = 0.0
