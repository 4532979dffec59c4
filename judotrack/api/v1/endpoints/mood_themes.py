from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user, get_theme_selector
from judotrack.core.exceptions import NotFoundError
from judotrack.db.session import get_db
from judotrack.models.user import User
from judotrack.repositories.tracking import mood_entry_repository
from judotrack.schemas.mood_theme import (
    AppliedTheme, MoodTheme, ThemeApplyRequest, ThemeHistory, ThemeStats, ThemeSuggestionRequest
)
from judotrack.services.mood_theme import (
    DEFAULT_THEME, MOOD_THEMES, MoodThemeSelector, get_theme_by_id, suggest
)

router = APIRouter()


@router.get("", response_model=List[MoodTheme])
async def list_themes():
    """List the five mood themes, from `sad` (mood 1) to `happy` (mood 5)."""
    return MOOD_THEMES


@router.post("/suggest", response_model=MoodTheme)
async def suggest_theme(suggestion_in: ThemeSuggestionRequest):
    """
    Suggest a theme from a mood check-in.

    Low energy (2 or less) with a good mood (above 3) moves one theme down;
    high energy (4 or more) with a mood below 4 moves one theme up. High stress
    (4 or more) then moves one more theme down, towards the calmer palettes.
    """
    return suggest(suggestion_in.mood_level, suggestion_in.energy_level, suggestion_in.stress_level)


@router.post("/apply", response_model=AppliedTheme)
async def apply_theme(
    *,
    apply_in: ThemeApplyRequest,
    selector: MoodThemeSelector = Depends(get_theme_selector),
):
    """
    Apply a theme for the current user.

    Returns the CSS variables the client writes to its root element. The theme
    becomes the user's current theme and is appended to their history (last
    10 entries). An entry is `auto_applied` when `user_mood` is sent.
    """
    theme = get_theme_by_id(apply_in.theme_id)
    if theme.id != apply_in.theme_id:
        raise NotFoundError(f"Tema '{apply_in.theme_id}' no encontrado")
    variables = await selector.apply(theme, user_mood=apply_in.user_mood)
    return AppliedTheme(theme=theme, css_variables=variables)


@router.post("/apply-from-check-in", response_model=AppliedTheme)
async def apply_theme_from_check_in(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    selector: MoodThemeSelector = Depends(get_theme_selector),
):
    """
    Suggest and apply a theme from the current user's latest mood entry.

    Raises:
        404: the user has no mood entries yet
    """
    entry = mood_entry_repository.get_latest_by_user(db, user_id=current_user.id)
    if not entry:
        raise NotFoundError("No hay registros de ánimo para sugerir un tema")
    theme = suggest(entry.mood_level, entry.energy_level, entry.stress_level)
    variables = await selector.apply(theme, user_mood=entry.mood_level)
    return AppliedTheme(theme=theme, css_variables=variables)


@router.get("/current", response_model=MoodTheme)
async def read_current_theme(selector: MoodThemeSelector = Depends(get_theme_selector)):
    """Get the current theme of the user; neutral when none was ever applied."""
    return await selector.current() or DEFAULT_THEME


@router.get("/history", response_model=ThemeHistory)
async def read_theme_history(selector: MoodThemeSelector = Depends(get_theme_selector)):
    return ThemeHistory(entries=await selector.history())


@router.get("/stats", response_model=ThemeStats)
async def read_theme_stats(selector: MoodThemeSelector = Depends(get_theme_selector)):
    """Total changes, most used theme, and automatic vs manual applications."""
    return await selector.stats()


@router.post("/reset", response_model=AppliedTheme)
async def reset_theme(selector: MoodThemeSelector = Depends(get_theme_selector)):
    """Go back to the neutral theme."""
    variables = await selector.reset()
    return AppliedTheme(theme=DEFAULT_THEME, css_variables=variables)


@router.delete("/history", status_code=status.HTTP_204_NO_CONTENT)
async def clear_theme_history(selector: MoodThemeSelector = Depends(get_theme_selector)):
    await selector.clear_history()
