"""
Modelos de entrenamiento: sesiones, ejercicios y registros de ejercicio.

Borrar una sesión elimina en cascada los registros de ejercicio asociados.
"""

from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Numeric, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from judotrack.db.base_class import Base


class TrainingSession(Base):
    __tablename__ = "training_session"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    session_type = Column(String, nullable=False)
    duration_minutes = Column(Integer, nullable=True)
    intensity = Column(Integer, nullable=True, comment="Intensidad percibida 1-10")
    notes = Column(Text, nullable=True)
    training_category = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    exercise_records = relationship(
        "ExerciseRecord",
        back_populates="training_session",
        cascade="all, delete-orphan",
    )


class Exercise(Base):
    __tablename__ = "exercise"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class ExerciseRecord(Base):
    __tablename__ = "exercise_record"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercise.id", ondelete="CASCADE"), nullable=False)
    training_session_id = Column(
        Integer, ForeignKey("training_session.id", ondelete="CASCADE"), nullable=True
    )
    sets = Column(Integer, nullable=True)
    reps = Column(Integer, nullable=True)
    weight_kg = Column(Numeric(6, 2), nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    rest_seconds = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    training_session = relationship("TrainingSession", back_populates="exercise_records")
