"""
Métricas agregadas por categoría que alimentan el evaluador de logros.
"""

import logging
from datetime import date
from typing import Dict, Optional

from sqlalchemy.orm import Session

from judotrack.models.achievement import BadgeCategory
from judotrack.repositories.knowledge import technique_repository
from judotrack.repositories.tracking import nutrition_entry_repository, weight_entry_repository
from judotrack.repositories.training import training_session_repository
from judotrack.services.achievement_evaluator import CategoryMetrics
from judotrack.services.streaks import current_streak

logger = logging.getLogger(__name__)


class AchievementMetricsService:
    def collect(
        self, db: Session, user_id: int, reference_date: Optional[date] = None
    ) -> Dict[str, CategoryMetrics]:
        """
        Construye {categoría: CategoryMetrics(count, current_streak)} para el usuario.

        - training: número de sesiones y racha de días entrenados
        - technique: técnicas registradas y racha de días con registro
        - consistency: días distintos entrenados y la misma racha de entrenamiento
        - weight / nutrition: registros y racha de días con registro
        """
        reference = reference_date or date.today()

        training_dates = training_session_repository.get_dates_by_user(db, user_id=user_id)
        technique_dates = technique_repository.get_dates_by_user(db, user_id=user_id)
        weight_dates = weight_entry_repository.get_dates_by_user(db, user_id=user_id)
        nutrition_dates = nutrition_entry_repository.get_dates_by_user(db, user_id=user_id)

        training_streak = current_streak(training_dates, reference)

        metrics = {
            BadgeCategory.TRAINING.value: CategoryMetrics(
                count=len(training_dates), current_streak=training_streak
            ),
            BadgeCategory.TECHNIQUE.value: CategoryMetrics(
                count=len(technique_dates), current_streak=current_streak(technique_dates, reference)
            ),
            BadgeCategory.CONSISTENCY.value: CategoryMetrics(
                count=len(set(training_dates)), current_streak=training_streak
            ),
            BadgeCategory.WEIGHT.value: CategoryMetrics(
                count=len(weight_dates), current_streak=current_streak(weight_dates, reference)
            ),
            BadgeCategory.NUTRITION.value: CategoryMetrics(
                count=len(nutrition_dates), current_streak=current_streak(nutrition_dates, reference)
            ),
        }
        logger.debug(f"Métricas de logros para usuario {user_id}: {metrics}")
        return metrics


achievement_metrics_service = AchievementMetricsService()
