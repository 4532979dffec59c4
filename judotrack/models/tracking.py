"""
Registros diarios del deportista: peso, nutrición y check-in de ánimo.
"""

from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Numeric, ForeignKey
from sqlalchemy.sql import func

from judotrack.db.base_class import Base


class WeightEntry(Base):
    __tablename__ = "weight_entry"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    weight = Column(Numeric(5, 2), nullable=False, comment="Peso en kg")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class NutritionEntry(Base):
    __tablename__ = "nutrition_entry"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    meal_description = Column(String, nullable=False)
    calories = Column(Integer, nullable=True)
    protein = Column(Numeric(6, 2), nullable=True)
    carbs = Column(Numeric(6, 2), nullable=True)
    fats = Column(Numeric(6, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class MoodEntry(Base):
    """Check-in diario: ánimo, energía y estrés en escala 1-5."""
    __tablename__ = "mood_entry"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    mood_level = Column(Integer, nullable=False)
    energy_level = Column(Integer, nullable=True)
    stress_level = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
