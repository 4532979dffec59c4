from typing import Optional
from datetime import date as DateType, datetime
from decimal import Decimal
from pydantic import BaseModel, Field


# === Sesiones de entrenamiento ===

class TrainingSessionBase(BaseModel):
    date: DateType
    session_type: str = Field(..., min_length=1)
    duration_minutes: Optional[int] = Field(None, ge=0)
    intensity: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = None
    training_category: Optional[str] = None


class TrainingSessionCreate(TrainingSessionBase):
    pass


class TrainingSessionUpdate(BaseModel):
    date: Optional[DateType] = None
    session_type: Optional[str] = Field(None, min_length=1)
    duration_minutes: Optional[int] = Field(None, ge=0)
    intensity: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = None
    training_category: Optional[str] = None


class TrainingSession(TrainingSessionBase):
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === Ejercicios ===

class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1)


class ExerciseUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)


class Exercise(ExerciseCreate):
    id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ExerciseRecordBase(BaseModel):
    exercise_id: int
    training_session_id: Optional[int] = None
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    weight_kg: Optional[Decimal] = Field(None, ge=0)
    duration_minutes: Optional[int] = Field(None, ge=0)
    rest_seconds: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    date: DateType


class ExerciseRecordCreate(ExerciseRecordBase):
    pass


class ExerciseRecordUpdate(BaseModel):
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    weight_kg: Optional[Decimal] = Field(None, ge=0)
    duration_minutes: Optional[int] = Field(None, ge=0)
    rest_seconds: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    date: Optional[DateType] = None


class ExerciseRecord(ExerciseRecordBase):
    id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
