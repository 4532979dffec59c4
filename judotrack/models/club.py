from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func

from judotrack.db.base_class import Base


class Club(Base):
    __tablename__ = "club"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    logo_url = Column(String, nullable=True)
    # Sin FK: user.club_id ya referencia a club
    created_by = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
