"""SQLAlchemy ORM models."""
from datetime import datetime, timezone

from sqlalchemy import JSON, BigInteger, Column, DateTime, Index, Integer, String, Text

from commander.infrastructure.database.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Command(Base):
    __tablename__ = "commands"

    # SQLite only auto-increments an INTEGER PRIMARY KEY
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    command_text = Column(Text, nullable=False)
    platform = Column(String(20), nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    __table_args__ = (
        Index("ix_commands_platform_updated_at", "platform", "updated_at"),
    )

    def __repr__(self) -> str:
        return f"<Command(id={self.id}, platform={self.platform}, title={self.title!r})>"
