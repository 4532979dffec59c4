from typing import List

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from judotrack.core.deps import get_current_user, require_role
from judotrack.db.session import get_db
from judotrack.models.user import AppRole, User
from judotrack.schemas.user import RoleAssignment, RoleAssignmentUpdate
from judotrack.services.user import user_service

router = APIRouter()


@router.get("/me", response_model=RoleAssignment)
async def read_my_role(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get the role of the current user (athlete when none was ever assigned)."""
    return user_service.get_role(db, current_user)


@router.get("", response_model=List[RoleAssignment])
async def list_roles(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """List every explicit role assignment. Administrators only."""
    return user_service.list_roles(db, skip=skip, limit=limit)


@router.put("/{user_id}", response_model=RoleAssignment)
async def set_user_role(
    *,
    db: Session = Depends(get_db),
    user_id: int = Path(..., title="ID del usuario"),
    role_in: RoleAssignmentUpdate,
    admin: User = Depends(require_role(AppRole.ADMIN)),
):
    """
    Assign a role to a user, replacing the previous one.

    Each user has exactly one role assignment; this is the only place where
    roles change. Administrators only.
    """
    return user_service.set_role(db, user_id, role_in.role, assigned_by=admin.id)
