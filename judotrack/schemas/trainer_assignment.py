from typing import List, Optional
from datetime import date, datetime
from pydantic import BaseModel

from judotrack.schemas.activity import ActivitySummary, GroupActivitySummary


class TrainerAssignmentCreate(BaseModel):
    trainer_id: int
    student_id: int


class TrainerAssignment(TrainerAssignmentCreate):
    id: int
    assigned_at: Optional[datetime] = None
    assigned_by: Optional[int] = None

    class Config:
        from_attributes = True


class LastWeightEntry(BaseModel):
    weight: float
    date: date


class LastTrainingSession(BaseModel):
    session_type: str
    date: date


class AthleteOverview(BaseModel):
    """Ficha de un deportista asignado tal como la ve su entrenador."""
    id: int
    full_name: Optional[str] = None
    email: str
    club_name: Optional[str] = None
    current_belt: Optional[str] = None
    assigned_at: Optional[datetime] = None
    activity: ActivitySummary
    total_techniques: int = 0
    total_tactical_notes: int = 0
    last_weight_entry: Optional[LastWeightEntry] = None
    last_training_session: Optional[LastTrainingSession] = None


class TrainerAthletes(BaseModel):
    trainer_id: int
    athletes: List[AthleteOverview]
    summary: GroupActivitySummary


class AssignedTrainer(BaseModel):
    id: int
    full_name: Optional[str] = None
    email: str
    assigned_at: Optional[datetime] = None
