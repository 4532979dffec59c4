from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class ThemeColors(BaseModel):
    primary: str
    secondary: str
    background: str
    foreground: str
    muted: str
    accent: str
    card: str
    border: str


class ThemeGradient(BaseModel):
    from_: str = Field(..., alias="from")
    to: str

    class Config:
        populate_by_name = True


class MoodTheme(BaseModel):
    id: str
    name: str
    description: str
    mood: int = Field(..., ge=1, le=5)
    colors: ThemeColors
    gradient: ThemeGradient

    class Config:
        frozen = True
        populate_by_name = True


class ThemeSuggestionRequest(BaseModel):
    mood_level: int = Field(..., ge=1, le=5)
    energy_level: Optional[int] = Field(None, ge=1, le=5)
    stress_level: Optional[int] = Field(None, ge=1, le=5)


class ThemeApplyRequest(BaseModel):
    theme_id: str
    user_mood: Optional[int] = Field(None, ge=1, le=5)


class ThemeHistoryEntry(BaseModel):
    theme: MoodTheme
    user_mood: Optional[int] = None
    timestamp: float
    auto_applied: bool


class AppliedTheme(BaseModel):
    theme: MoodTheme
    css_variables: Dict[str, str]


class ThemeStats(BaseModel):
    total_changes: int
    most_used_theme: str
    auto_applied_count: int
    manual_count: int
    theme_frequency: Dict[str, int]


class ThemeHistory(BaseModel):
    entries: List[ThemeHistoryEntry]
