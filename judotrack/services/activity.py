from datetime import date, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from judotrack.core.config import get_settings
from judotrack.repositories.training import training_session_repository
from judotrack.schemas.activity import ActivitySummary, UserActivity
from judotrack.services.activity_classifier import classify


class ActivityService:
    def get_summary(self, db: Session, user_id: int, reference_date: Optional[date] = None) -> ActivitySummary:
        """
        Clasifica la actividad semanal del usuario a partir de sus sesiones.
        """
        settings = get_settings()
        reference = reference_date or date.today()
        window_start = reference - timedelta(days=settings.ACTIVITY_WINDOW_DAYS)

        session_dates = training_session_repository.get_dates_by_user(
            db, user_id=user_id, since=window_start
        )
        return classify(
            session_dates,
            reference,
            window_days=settings.ACTIVITY_WINDOW_DAYS,
            active_threshold=settings.ACTIVE_SESSIONS_THRESHOLD,
        )

    def get_user_activity(self, db: Session, user_id: int, reference_date: Optional[date] = None) -> UserActivity:
        reference = reference_date or date.today()
        summary = self.get_summary(db, user_id, reference)
        return UserActivity(
            user_id=user_id,
            reference_date=reference,
            weekly_count=summary.weekly_count,
            status=summary.status,
        )


activity_service = ActivityService()
