from typing import List, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from judotrack.models.trainer_assignment import TrainerAssignment
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.trainer_assignment import TrainerAssignmentCreate


class TrainerAssignmentRepository(
    BaseRepository[TrainerAssignment, TrainerAssignmentCreate, TrainerAssignmentCreate]
):
    def get_by_trainer_and_student(
        self, db: Session, *, trainer_id: int, student_id: int
    ) -> Optional[TrainerAssignment]:
        """
        Obtiene la asignación concreta entre un entrenador y un deportista.
        """
        return db.query(TrainerAssignment).filter(
            and_(
                TrainerAssignment.trainer_id == trainer_id,
                TrainerAssignment.student_id == student_id
            )
        ).first()

    def get_by_trainer(self, db: Session, *, trainer_id: int) -> List[TrainerAssignment]:
        """
        Obtiene todas las asignaciones de un entrenador, más recientes primero.
        """
        return db.query(TrainerAssignment).filter(
            TrainerAssignment.trainer_id == trainer_id
        ).order_by(TrainerAssignment.assigned_at.desc(), TrainerAssignment.id.desc()).all()

    def get_by_student(self, db: Session, *, student_id: int) -> Optional[TrainerAssignment]:
        """
        Obtiene el entrenador asignado a un deportista (el más reciente si hay varios).
        """
        return db.query(TrainerAssignment).filter(
            TrainerAssignment.student_id == student_id
        ).order_by(TrainerAssignment.assigned_at.desc(), TrainerAssignment.id.desc()).first()


trainer_assignment_repository = TrainerAssignmentRepository(TrainerAssignment, owner_field="trainer_id")
