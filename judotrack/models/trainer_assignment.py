from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from judotrack.db.base_class import Base


class TrainerAssignment(Base):
    __tablename__ = "trainer_assignment"

    id = Column(Integer, primary_key=True, index=True)
    trainer_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    assigned_at = Column(DateTime(timezone=True), server_default=func.now())
    assigned_by = Column(Integer, ForeignKey("user.id"), nullable=True)

    __table_args__ = (
        UniqueConstraint('trainer_id', 'student_id', name='uq_trainer_student'),
    )
