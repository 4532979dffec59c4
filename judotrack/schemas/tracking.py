from typing import Optional
from datetime import date as DateType, datetime
from decimal import Decimal
from pydantic import BaseModel, Field


class WeightEntryCreate(BaseModel):
    date: DateType
    weight: Decimal = Field(..., gt=0, le=500, description="Peso en kg")


class WeightEntryUpdate(BaseModel):
    date: Optional[DateType] = None
    weight: Optional[Decimal] = Field(None, gt=0, le=500)


class WeightEntry(WeightEntryCreate):
    id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NutritionEntryCreate(BaseModel):
    date: DateType
    meal_description: str = Field(..., min_length=1)
    calories: Optional[int] = Field(None, ge=0)
    protein: Optional[Decimal] = Field(None, ge=0)
    carbs: Optional[Decimal] = Field(None, ge=0)
    fats: Optional[Decimal] = Field(None, ge=0)


class NutritionEntryUpdate(BaseModel):
    date: Optional[DateType] = None
    meal_description: Optional[str] = Field(None, min_length=1)
    calories: Optional[int] = Field(None, ge=0)
    protein: Optional[Decimal] = Field(None, ge=0)
    carbs: Optional[Decimal] = Field(None, ge=0)
    fats: Optional[Decimal] = Field(None, ge=0)


class NutritionEntry(NutritionEntryCreate):
    id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MoodEntryCreate(BaseModel):
    date: DateType
    mood_level: int = Field(..., ge=1, le=5)
    energy_level: Optional[int] = Field(None, ge=1, le=5)
    stress_level: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None


class MoodEntryUpdate(BaseModel):
    date: Optional[DateType] = None
    mood_level: Optional[int] = Field(None, ge=1, le=5)
    energy_level: Optional[int] = Field(None, ge=1, le=5)
    stress_level: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None


class MoodEntry(MoodEntryCreate):
    id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
