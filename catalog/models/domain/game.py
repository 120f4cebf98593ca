"""
Game catalog domain model
"""
from uuid import uuid4
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, UniqueConstraint

from catalog.db.database import Base
from catalog.db.types import GUID


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Game(Base):
    """Game model"""
    __tablename__ = "games"

    id = Column(GUID, primary_key=True, default=uuid4)
    name = Column(String(100), nullable=False)
    producer = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Business key: one game per (name, producer)
    __table_args__ = (
        UniqueConstraint('name', 'producer', name='uq_game_name_producer'),
    )

    @property
    def fingerprint(self):
        return (self.name, self.producer)

    def __repr__(self):
        return f"<Game {self.id}: {self.name} ({self.producer})>"
