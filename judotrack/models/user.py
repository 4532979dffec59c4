from sqlalchemy import Column, Integer, String, DateTime, Text, Enum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum

from judotrack.db.base_class import Base


class AppRole(str, enum.Enum):
    ATHLETE = "athlete"    # Deportista
    TRAINER = "trainer"    # Entrenador
    ADMIN = "admin"        # Administrador de la plataforma


class BeltLevel(str, enum.Enum):
    WHITE = "white"
    YELLOW = "yellow"
    ORANGE = "orange"
    GREEN = "green"
    BLUE = "blue"
    BROWN = "brown"
    BLACK = "black"


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class User(Base):
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Datos deportivos del perfil
    club_id = Column(Integer, ForeignKey("club.id", ondelete="SET NULL"), nullable=True)
    current_belt = Column(Enum(BeltLevel), default=BeltLevel.WHITE)
    gender = Column(Enum(Gender), nullable=True)
    competition_category = Column(String, nullable=True)
    injury_description = Column(Text, nullable=True)

    club = relationship("Club", foreign_keys=[club_id])
    role_assignment = relationship(
        "UserRoleAssignment",
        foreign_keys="UserRoleAssignment.user_id",
        uselist=False,
        cascade="all, delete-orphan",
        back_populates="user",
    )

    @property
    def role(self) -> AppRole:
        # Sin asignación explícita el usuario es deportista
        if self.role_assignment is None:
            return AppRole.ATHLETE
        return self.role_assignment.role


class UserRoleAssignment(Base):
    """Única fuente de verdad del rol de cada usuario."""
    __tablename__ = "user_role_assignment"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), unique=True, nullable=False)
    role = Column(Enum(AppRole), nullable=False, default=AppRole.ATHLETE)
    assigned_at = Column(DateTime(timezone=True), server_default=func.now())
    assigned_by = Column(Integer, ForeignKey("user.id"), nullable=True)

    user = relationship("User", foreign_keys=[user_id], back_populates="role_assignment")
