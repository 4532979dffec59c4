from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user
from judotrack.db.session import get_db
from judotrack.models.user import AppRole, User
from judotrack.schemas.activity import UserActivity
from judotrack.services.activity import activity_service
from judotrack.services.trainer_assignment import trainer_assignment_service
from judotrack.services.user import user_service

router = APIRouter()


@router.get("/me", response_model=UserActivity)
async def read_my_activity(
    db: Session = Depends(get_db),
    reference_date: Optional[date] = Query(None, description="Día de referencia (hoy por defecto)"),
    current_user: User = Depends(get_current_user),
):
    """
    Classify the weekly activity of the current user.

    Sessions dated within the seven days up to the reference date (both ends
    included) are counted: 3 or more is `active`, 1 or 2 is `moderate`, none is
    `inactive`.
    """
    return activity_service.get_user_activity(db, current_user.id, reference_date)


@router.get("/{user_id}", response_model=UserActivity)
async def read_user_activity(
    *,
    db: Session = Depends(get_db),
    user_id: int = Path(..., title="ID del deportista"),
    reference_date: Optional[date] = Query(None, description="Día de referencia (hoy por defecto)"),
    current_user: User = Depends(get_current_user),
):
    """
    Classify the weekly activity of an athlete.

    Permissions:
        - The athlete themself, a trainer assigned to them, or an administrator
    """
    allowed = (
        current_user.id == user_id
        or current_user.role == AppRole.ADMIN
        or trainer_assignment_service.is_trainer_of(db, current_user.id, user_id)
    )
    if not allowed:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No tienes acceso a la actividad de este deportista"
        )
    user_service.get_user(db, user_id)
    return activity_service.get_user_activity(db, user_id, reference_date)
