from datetime import datetime, timedelta, timezone
from typing import List, Optional, Set

from sqlalchemy.orm import Session, joinedload

from judotrack.models.achievement import AchievementBadge, UserAchievement
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.achievement import AchievementBadgeCreate, AchievementBadgeUpdate


class AchievementBadgeRepository(BaseRepository[AchievementBadge, AchievementBadgeCreate, AchievementBadgeUpdate]):
    def get_catalog(self, db: Session, *, active_only: bool = False) -> List[AchievementBadge]:
        """
        Catálogo de insignias en orden estable (por ID), que es el orden de evaluación.
        """
        query = db.query(AchievementBadge)
        if active_only:
            query = query.filter(AchievementBadge.is_active.is_(True))
        return query.order_by(AchievementBadge.id.asc()).all()

    def count(self, db: Session) -> int:
        return db.query(AchievementBadge).count()


class UserAchievementRepository:
    """Logros obtenidos por los usuarios. Solo lectura y alta; nunca se borran."""

    def get(self, db: Session, *, achievement_id: int, user_id: int) -> Optional[UserAchievement]:
        return db.query(UserAchievement).filter(
            UserAchievement.id == achievement_id,
            UserAchievement.user_id == user_id
        ).first()

    def get_by_user(self, db: Session, *, user_id: int) -> List[UserAchievement]:
        return db.query(UserAchievement).options(joinedload(UserAchievement.badge)).filter(
            UserAchievement.user_id == user_id
        ).order_by(UserAchievement.earned_at.desc(), UserAchievement.id.desc()).all()

    def get_earned_badge_ids(self, db: Session, *, user_id: int) -> Set[int]:
        rows = db.query(UserAchievement.badge_id).filter(UserAchievement.user_id == user_id).all()
        return {row[0] for row in rows}

    def get_recent(self, db: Session, *, user_id: int, days: int = 30) -> List[UserAchievement]:
        since = datetime.now(timezone.utc) - timedelta(days=days)
        return db.query(UserAchievement).options(joinedload(UserAchievement.badge)).filter(
            UserAchievement.user_id == user_id,
            UserAchievement.earned_at >= since
        ).order_by(UserAchievement.earned_at.desc(), UserAchievement.id.desc()).all()


achievement_badge_repository = AchievementBadgeRepository(AchievementBadge)
user_achievement_repository = UserAchievementRepository()
