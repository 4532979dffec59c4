from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from judotrack.models.user import BeltLevel


class TechniqueBase(BaseModel):
    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    belt_level: BeltLevel = BeltLevel.WHITE
    description: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    youtube_url: Optional[str] = None


class TechniqueCreate(TechniqueBase):
    pass


class TechniqueUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    belt_level: Optional[BeltLevel] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    youtube_url: Optional[str] = None


class Technique(TechniqueBase):
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TacticalNoteBase(BaseModel):
    title: str = Field(..., min_length=1)
    category: Optional[str] = None
    content: Optional[str] = None
    image_urls: Optional[List[str]] = None
    video_url: Optional[str] = None
    youtube_url: Optional[str] = None


class TacticalNoteCreate(TacticalNoteBase):
    pass


class TacticalNoteUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    content: Optional[str] = None
    image_urls: Optional[List[str]] = None
    video_url: Optional[str] = None
    youtube_url: Optional[str] = None


class TacticalNote(TacticalNoteBase):
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
