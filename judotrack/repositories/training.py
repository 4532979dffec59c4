from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from judotrack.models.training import Exercise, ExerciseRecord, TrainingSession
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.training import (
    ExerciseCreate, ExerciseRecordCreate, ExerciseRecordUpdate, ExerciseUpdate,
    TrainingSessionCreate, TrainingSessionUpdate
)


class TrainingSessionRepository(BaseRepository[TrainingSession, TrainingSessionCreate, TrainingSessionUpdate]):
    def get_latest_by_user(self, db: Session, *, user_id: int) -> Optional[TrainingSession]:
        return db.query(TrainingSession).filter(
            TrainingSession.user_id == user_id
        ).order_by(TrainingSession.date.desc(), TrainingSession.id.desc()).first()

    def get_dates_by_user(self, db: Session, *, user_id: int, since: Optional[date] = None) -> List[date]:
        """Fechas de las sesiones del usuario (con repeticiones), opcionalmente desde una fecha."""
        query = db.query(TrainingSession.date).filter(TrainingSession.user_id == user_id)
        if since is not None:
            query = query.filter(TrainingSession.date >= since)
        return [row[0] for row in query.all()]


class ExerciseRepository(BaseRepository[Exercise, ExerciseCreate, ExerciseUpdate]):
    pass


class ExerciseRecordRepository(BaseRepository[ExerciseRecord, ExerciseRecordCreate, ExerciseRecordUpdate]):
    pass


training_session_repository = TrainingSessionRepository(TrainingSession)
exercise_repository = ExerciseRepository(Exercise)
exercise_record_repository = ExerciseRecordRepository(ExerciseRecord)
