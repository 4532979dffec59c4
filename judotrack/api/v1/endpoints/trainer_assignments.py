from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user, require_role
from judotrack.db.session import get_db
from judotrack.models.user import AppRole, User
from judotrack.schemas.trainer_assignment import (
    AssignedTrainer, TrainerAssignment, TrainerAssignmentCreate, TrainerAthletes
)
from judotrack.services.trainer_assignment import trainer_assignment_service

router = APIRouter()


@router.post("", response_model=TrainerAssignment, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    *,
    db: Session = Depends(get_db),
    assignment_in: TrainerAssignmentCreate,
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """
    Assign an athlete to a trainer.

    The athlete receives an in-app notification about the new trainer.

    Permissions:
        - Administrators only

    Raises:
        404: trainer or athlete not found
        409: the athlete is already assigned to this trainer
        422: the target trainer does not have the trainer role, or trainer and
            athlete are the same user
    """
    return trainer_assignment_service.create_assignment(db, assignment_in, assigned_by=admin.id)


@router.get("", response_model=List[TrainerAssignment])
async def list_assignments(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """List every trainer-athlete assignment. Administrators only."""
    return trainer_assignment_service.get_assignments(db, skip=skip, limit=limit)


@router.get("/me/trainer", response_model=AssignedTrainer)
async def read_my_trainer(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get the trainer assigned to the current user (the latest one if several)."""
    return trainer_assignment_service.get_my_trainer(db, current_user.id)


@router.get("/trainer/{trainer_id}/athletes", response_model=TrainerAthletes)
async def read_trainer_athletes(
    *,
    db: Session = Depends(get_db),
    trainer_id: int = Path(..., title="ID del entrenador"),
    reference_date: Optional[date] = Query(None, description="Día de referencia de la ventana semanal"),
    current_user: User = Depends(get_current_user),
):
    """
    Get the athletes of a trainer with their weekly activity.

    Each athlete carries an activity summary (sessions in the last seven days
    and the active / moderate / inactive status), technique and tactical note
    totals, the last weight entry and the last training session. The group
    summary counts the active athletes and averages the weekly sessions.

    Permissions:
        - The trainer themself or an administrator
    """
    if current_user.id != trainer_id and current_user.role != AppRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Solo el propio entrenador o un administrador pueden ver sus deportistas"
        )
    return trainer_assignment_service.get_athletes(db, trainer_id, reference_date)


@router.delete("/{assignment_id}", response_model=TrainerAssignment)
async def delete_assignment(
    *,
    db: Session = Depends(get_db),
    assignment_id: int = Path(..., title="ID de la asignación"),
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """Remove a trainer-athlete assignment. Administrators only."""
    return trainer_assignment_service.delete_assignment(db, assignment_id)
