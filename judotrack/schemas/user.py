from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from judotrack.models.user import AppRole, BeltLevel, Gender


class UserBase(BaseModel):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    club_id: Optional[int] = None
    current_belt: Optional[BeltLevel] = BeltLevel.WHITE
    gender: Optional[Gender] = None
    competition_category: Optional[str] = None
    injury_description: Optional[str] = None


class UserCreate(UserBase):
    email: EmailStr


class UserUpdate(BaseModel):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    club_id: Optional[int] = None
    current_belt: Optional[BeltLevel] = None
    gender: Optional[Gender] = None
    competition_category: Optional[str] = None
    injury_description: Optional[str] = None


class User(UserBase):
    id: int
    email: str
    role: AppRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RoleAssignmentUpdate(BaseModel):
    role: AppRole = Field(..., description="Nuevo rol del usuario")


class RoleAssignment(BaseModel):
    user_id: int
    role: AppRole
    assigned_at: Optional[datetime] = None
    assigned_by: Optional[int] = None

    class Config:
        from_attributes = True
