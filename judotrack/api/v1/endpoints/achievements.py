from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user, require_role
from judotrack.db.session import get_db
from judotrack.models.user import AppRole, User
from judotrack.schemas.achievement import (
    AchievementBadge, AchievementBadgeCreate, AchievementBadgeUpdate, AchievementCheckRequest,
    AchievementCheckResult, AchievementStats, UserAchievement, UserAchievementWithBadge
)
from judotrack.services.achievement import achievement_service

router = APIRouter()


def _with_badge(achievements) -> List[UserAchievementWithBadge]:
    return [
        UserAchievementWithBadge(
            achievement=UserAchievement.model_validate(achievement),
            badge=AchievementBadge.model_validate(achievement.badge),
        )
        for achievement in achievements
    ]


@router.get("/badges", response_model=List[AchievementBadge])
async def list_badges(
    db: Session = Depends(get_db),
    include_inactive: bool = Query(False, description="Incluir insignias desactivadas"),
    current_user: User = Depends(get_current_user),
):
    """List the badge catalog in evaluation order."""
    return achievement_service.get_catalog(db, active_only=not include_inactive)


@router.post("/badges", response_model=AchievementBadge, status_code=status.HTTP_201_CREATED)
async def create_badge(
    *,
    db: Session = Depends(get_db),
    badge_in: AchievementBadgeCreate,
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """Add a badge to the catalog. Administrators only."""
    return achievement_service.create_badge(db, badge_in)


@router.patch("/badges/{badge_id}", response_model=AchievementBadge)
async def update_badge(
    *,
    db: Session = Depends(get_db),
    badge_id: int = Path(..., title="ID de la insignia"),
    badge_in: AchievementBadgeUpdate,
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """
    Update a badge. Badges are never deleted; set `is_active` to false to
    retire one. Administrators only.
    """
    return achievement_service.update_badge(db, badge_id, badge_in)


@router.get("/me", response_model=List[UserAchievementWithBadge])
async def read_my_achievements(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List the achievements earned by the current user, newest first."""
    return _with_badge(achievement_service.get_user_achievements(db, current_user.id))


@router.post("/check", response_model=AchievementCheckResult)
async def check_achievements(
    *,
    db: Session = Depends(get_db),
    check_in: Optional[AchievementCheckRequest] = None,
    current_user: User = Depends(get_current_user),
):
    """
    Evaluate the badge catalog against the current user's metrics.

    Count and streak badges are computed from the stored sessions, techniques
    and weight/nutrition entries. Milestone and generic achievement badges are
    only awarded when their IDs are listed in `signals`.

    Every newly earned badge creates exactly one achievement and one
    notification ("¡Nuevo logro desbloqueado!"). Calling this again returns an
    empty list until a new threshold is crossed.
    """
    new_achievements = achievement_service.check_achievements(
        db, current_user.id, signals=check_in.signals if check_in else None
    )
    return AchievementCheckResult(new_achievements=_with_badge(new_achievements))


@router.patch("/{achievement_id}/notified", response_model=UserAchievement)
async def mark_achievement_notified(
    *,
    db: Session = Depends(get_db),
    achievement_id: int = Path(..., title="ID del logro"),
    current_user: User = Depends(get_current_user),
):
    """Mark an achievement as already shown to the user."""
    return achievement_service.mark_notified(db, current_user.id, achievement_id)


@router.get("/stats", response_model=AchievementStats)
async def read_achievement_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Progress of the current user over the active catalog."""
    return achievement_service.get_stats(db, current_user.id)


@router.get("/recent", response_model=List[UserAchievementWithBadge])
async def read_recent_achievements(
    db: Session = Depends(get_db),
    days: int = Query(30, ge=1, le=365),
    current_user: User = Depends(get_current_user),
):
    """Achievements earned in the last `days` days."""
    return _with_badge(achievement_service.get_recent(db, current_user.id, days=days))
