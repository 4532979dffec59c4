from typing import List, Optional

from sqlalchemy.orm import Session

from judotrack.models.user import AppRole, User, UserRoleAssignment
from judotrack.repositories.base import BaseRepository
from judotrack.schemas.user import UserCreate, UserUpdate


class UserRepository(BaseRepository[User, UserCreate, UserUpdate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def get_role_assignment(self, db: Session, *, user_id: int) -> Optional[UserRoleAssignment]:
        return db.query(UserRoleAssignment).filter(UserRoleAssignment.user_id == user_id).first()

    def set_role(
        self, db: Session, *, user_id: int, role: AppRole, assigned_by: Optional[int] = None
    ) -> UserRoleAssignment:
        """
        Crea o sustituye la asignación de rol del usuario (una fila por usuario).
        """
        assignment = self.get_role_assignment(db, user_id=user_id)
        if assignment is None:
            assignment = UserRoleAssignment(user_id=user_id, role=role, assigned_by=assigned_by)
        else:
            assignment.role = role
            assignment.assigned_by = assigned_by
        db.add(assignment)
        self._commit(db, assignment)
        return assignment

    def get_role_assignments(self, db: Session, *, skip: int = 0, limit: int = 100) -> List[UserRoleAssignment]:
        return (
            db.query(UserRoleAssignment)
            .order_by(UserRoleAssignment.user_id)
            .offset(skip)
            .limit(limit)
            .all()
        )


user_repository = UserRepository(User, owner_field="id")
