from sqlalchemy import Column, Integer, String, DateTime, Text, Enum, JSON, ForeignKey
from sqlalchemy.sql import func

from judotrack.db.base_class import Base
from judotrack.models.user import BeltLevel


class Technique(Base):
    __tablename__ = "technique"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True, comment="nage-waza, katame-waza, ...")
    belt_level = Column(Enum(BeltLevel), nullable=False, default=BeltLevel.WHITE)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    youtube_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class TacticalNote(Base):
    __tablename__ = "tactical_note"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    category = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    image_urls = Column(JSON, nullable=True)
    video_url = Column(String, nullable=True)
    youtube_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
