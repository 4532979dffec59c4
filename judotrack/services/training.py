from pydantic import BaseModel
from sqlalchemy.orm import Session

from judotrack.core.exceptions import NotFoundError
from judotrack.repositories.training import (
    exercise_record_repository, exercise_repository, training_session_repository
)
from judotrack.schemas.training import Exercise, ExerciseRecord, TrainingSession
from judotrack.services.crud import CRUDService


class ExerciseRecordService(CRUDService):
    def check_references(self, db: Session, *, user_id: int, obj_in: BaseModel) -> None:
        """
        El ejercicio y la sesión referenciados deben pertenecer al mismo usuario.
        """
        data = obj_in.model_dump(exclude_unset=True)

        exercise_id = data.get("exercise_id")
        if exercise_id is not None and not exercise_repository.exists(db, exercise_id, user_id=user_id):
            raise NotFoundError(f"Ejercicio {exercise_id} no encontrado")

        session_id = data.get("training_session_id")
        if session_id is not None and not training_session_repository.exists(db, session_id, user_id=user_id):
            raise NotFoundError(f"Sesión de entrenamiento {session_id} no encontrada")


training_session_service = CRUDService(
    "training_sessions",
    training_session_repository,
    TrainingSession,
    label="Sesión de entrenamiento",
    order_by="date",
    related_entities=("exercise_records",),
)
exercise_service = CRUDService(
    "exercises",
    exercise_repository,
    Exercise,
    label="Ejercicio",
    order_by="name",
    related_entities=("exercise_records",),
)
exercise_record_service = ExerciseRecordService(
    "exercise_records",
    exercise_record_repository,
    ExerciseRecord,
    label="Registro de ejercicio",
    order_by="date",
)
