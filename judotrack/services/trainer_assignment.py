import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from judotrack.core.exceptions import ConflictError, NotFoundError, ValidationError
from judotrack.models.notification import NotificationType
from judotrack.models.trainer_assignment import TrainerAssignment
from judotrack.models.user import AppRole
from judotrack.repositories.knowledge import tactical_note_repository, technique_repository
from judotrack.repositories.notification import notification_repository
from judotrack.repositories.tracking import weight_entry_repository
from judotrack.repositories.training import training_session_repository
from judotrack.repositories.trainer_assignment import trainer_assignment_repository
from judotrack.repositories.user import user_repository
from judotrack.schemas.notification import NotificationCreate
from judotrack.schemas.trainer_assignment import (
    AssignedTrainer, AthleteOverview, LastTrainingSession, LastWeightEntry,
    TrainerAssignment as TrainerAssignmentSchema, TrainerAssignmentCreate, TrainerAthletes
)
from judotrack.services.activity import activity_service
from judotrack.services.activity_classifier import summarize_group

logger = logging.getLogger(__name__)


class TrainerAssignmentService:
    def get_assignments(self, db: Session, skip: int = 0, limit: int = 100) -> List[TrainerAssignment]:
        """
        Obtener todas las asignaciones (solo para administradores).
        """
        return trainer_assignment_repository.get_multi(db, skip=skip, limit=limit)

    def is_trainer_of(self, db: Session, trainer_id: int, student_id: int) -> bool:
        return trainer_assignment_repository.get_by_trainer_and_student(
            db, trainer_id=trainer_id, student_id=student_id
        ) is not None

    def create_assignment(
        self, db: Session, assignment_in: TrainerAssignmentCreate, assigned_by: int
    ) -> TrainerAssignment:
        """
        Asignar un deportista a un entrenador y avisar al deportista.
        """
        if assignment_in.trainer_id == assignment_in.student_id:
            raise ValidationError("Un usuario no puede ser su propio entrenador")

        trainer = user_repository.get(db, id=assignment_in.trainer_id)
        if not trainer:
            raise NotFoundError("Entrenador no encontrado")
        if trainer.role != AppRole.TRAINER:
            raise ValidationError("El usuario especificado no es un entrenador")

        student = user_repository.get(db, id=assignment_in.student_id)
        if not student:
            raise NotFoundError("Deportista no encontrado")

        if self.is_trainer_of(db, assignment_in.trainer_id, assignment_in.student_id):
            raise ConflictError("El deportista ya está asignado a este entrenador")

        assignment = TrainerAssignment(
            trainer_id=assignment_in.trainer_id,
            student_id=assignment_in.student_id,
            assigned_by=assigned_by,
        )
        db.add(assignment)
        notification_repository.add(db, notification=NotificationCreate(
            user_id=student.id,
            title="Nuevo entrenador asignado",
            message=f"{trainer.full_name or trainer.email} es ahora tu entrenador",
            notification_type=NotificationType.ASSIGNMENT,
        ))
        db.commit()
        db.refresh(assignment)
        logger.info(f"Deportista {student.id} asignado al entrenador {trainer.id} por {assigned_by}")
        return assignment

    def delete_assignment(self, db: Session, assignment_id: int) -> TrainerAssignmentSchema:
        assignment = trainer_assignment_repository.get(db, id=assignment_id)
        if not assignment:
            raise NotFoundError("Asignación no encontrada")
        deleted = TrainerAssignmentSchema.model_validate(assignment)
        trainer_assignment_repository.remove(db, id=assignment_id)
        return deleted

    def _athlete_overview(
        self, db: Session, assignment: TrainerAssignment, reference_date: date
    ) -> Optional[AthleteOverview]:
        student = user_repository.get(db, id=assignment.student_id)
        if not student:
            return None

        last_weight = weight_entry_repository.get_latest_by_user(db, user_id=student.id)
        last_session = training_session_repository.get_latest_by_user(db, user_id=student.id)

        return AthleteOverview(
            id=student.id,
            full_name=student.full_name,
            email=student.email,
            club_name=student.club.name if student.club else None,
            current_belt=student.current_belt.value if student.current_belt else None,
            assigned_at=assignment.assigned_at,
            activity=activity_service.get_summary(db, student.id, reference_date),
            total_techniques=technique_repository.count_by_user(db, student.id),
            total_tactical_notes=tactical_note_repository.count_by_user(db, student.id),
            last_weight_entry=LastWeightEntry(
                weight=float(last_weight.weight), date=last_weight.date
            ) if last_weight else None,
            last_training_session=LastTrainingSession(
                session_type=last_session.session_type, date=last_session.date
            ) if last_session else None,
        )

    def get_athletes(
        self, db: Session, trainer_id: int, reference_date: Optional[date] = None
    ) -> TrainerAthletes:
        """
        Deportistas de un entrenador con su actividad semanal y el resumen del grupo.
        """
        reference = reference_date or date.today()
        assignments = trainer_assignment_repository.get_by_trainer(db, trainer_id=trainer_id)

        athletes = []
        for assignment in assignments:
            overview = self._athlete_overview(db, assignment, reference)
            if overview:
                athletes.append(overview)

        return TrainerAthletes(
            trainer_id=trainer_id,
            athletes=athletes,
            summary=summarize_group([athlete.activity for athlete in athletes]),
        )

    def get_my_trainer(self, db: Session, student_id: int) -> AssignedTrainer:
        assignment = trainer_assignment_repository.get_by_student(db, student_id=student_id)
        if not assignment:
            raise NotFoundError("No tienes entrenador asignado")
        trainer = user_repository.get(db, id=assignment.trainer_id)
        if not trainer:
            raise NotFoundError("Entrenador no encontrado")
        return AssignedTrainer(
            id=trainer.id,
            full_name=trainer.full_name,
            email=trainer.email,
            assigned_at=assignment.assigned_at,
        )


trainer_assignment_service = TrainerAssignmentService()
