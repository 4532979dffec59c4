import logging
from typing import List

from sqlalchemy.orm import Session

from judotrack.core.exceptions import ConflictError, NotFoundError
from judotrack.models.user import AppRole, User, UserRoleAssignment
from judotrack.repositories.club import club_repository
from judotrack.repositories.user import user_repository
from judotrack.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    def get_user(self, db: Session, user_id: int) -> User:
        user = user_repository.get(db, id=user_id)
        if not user:
            raise NotFoundError("Usuario no encontrado")
        return user

    def _check_club(self, db: Session, club_id) -> None:
        if club_id is not None and not club_repository.exists(db, club_id):
            raise NotFoundError(f"Club {club_id} no encontrado")

    def register(self, db: Session, user_in: UserCreate) -> User:
        """
        Registrar el perfil de un usuario nuevo. El rol inicial es deportista.
        """
        if user_repository.get_by_email(db, email=user_in.email):
            raise ConflictError("Ya existe un usuario con ese email")
        self._check_club(db, user_in.club_id)

        user = user_repository.create(db, obj_in=user_in)
        user_repository.set_role(db, user_id=user.id, role=AppRole.ATHLETE)
        db.refresh(user)
        logger.info(f"Usuario {user.id} registrado")
        return user

    def update_profile(self, db: Session, user: User, user_in: UserUpdate) -> User:
        data = user_in.model_dump(exclude_unset=True)
        if "club_id" in data:
            self._check_club(db, data["club_id"])
        return user_repository.update(db, db_obj=user, obj_in=data)

    def get_role(self, db: Session, user: User) -> UserRoleAssignment:
        assignment = user_repository.get_role_assignment(db, user_id=user.id)
        if assignment is None:
            # Perfil sin asignación: se materializa como deportista
            assignment = user_repository.set_role(db, user_id=user.id, role=AppRole.ATHLETE)
        return assignment

    def set_role(self, db: Session, user_id: int, role: AppRole, assigned_by: int) -> UserRoleAssignment:
        self.get_user(db, user_id)
        assignment = user_repository.set_role(db, user_id=user_id, role=role, assigned_by=assigned_by)
        logger.info(f"Rol de usuario {user_id} cambiado a {role.value} por {assigned_by}")
        return assignment

    def list_roles(self, db: Session, skip: int = 0, limit: int = 100) -> List[UserRoleAssignment]:
        return user_repository.get_role_assignments(db, skip=skip, limit=limit)


user_service = UserService()
