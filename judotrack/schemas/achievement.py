from typing import Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from judotrack.models.achievement import BadgeCategory, CriteriaType


class AchievementBadgeBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str
    icon_url: Optional[str] = None
    category: BadgeCategory
    criteria_type: CriteriaType
    criteria_value: int = Field(..., ge=0)
    is_active: bool = True


class AchievementBadgeCreate(AchievementBadgeBase):
    pass


class AchievementBadgeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    icon_url: Optional[str] = None
    criteria_value: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class AchievementBadge(BaseModel):
    # category y criteria_type como texto: el catálogo persistido puede traer valores desconocidos
    id: int
    name: str
    description: str
    icon_url: Optional[str] = None
    category: str
    criteria_type: str
    criteria_value: int
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserAchievement(BaseModel):
    id: int
    user_id: int
    badge_id: int
    earned_at: datetime
    progress: int
    level: int
    is_notified: bool

    class Config:
        from_attributes = True


class UserAchievementWithBadge(BaseModel):
    achievement: UserAchievement
    badge: AchievementBadge


class AchievementCheckRequest(BaseModel):
    """IDs de insignias milestone/achievement que el cliente da por cumplidas."""
    signals: List[int] = Field(default_factory=list)


class AchievementCheckResult(BaseModel):
    new_achievements: List[UserAchievementWithBadge]


class AchievementStats(BaseModel):
    total_badges: int
    earned_badges: int
    completion_rate: float = Field(..., ge=0, le=100)
    category_counts: Dict[str, int]
    earned_category_counts: Dict[str, int]
