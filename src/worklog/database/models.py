"""SQLAlchemy models for worklog database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    time_entries = relationship("TimeEntry", back_populates="category")


class TimeEntry(Base):
    """Time entry model. Durations are stored in whole seconds."""

    __tablename__ = "time_entries"

    id = Column(Integer, primary_key=True)
    duration = Column(Integer, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    memo = Column(String, nullable=True)
    started_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    category = relationship("Category", back_populates="time_entries")


class TimerState(Base):
    """Single-row table holding the active timer."""

    __tablename__ = "timer_state"

    id = Column(Integer, primary_key=True)
    status = Column(String, default="idle", nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    memo = Column(String, nullable=True)
    started_at = Column(DateTime, nullable=True)
    accumulated_seconds = Column(Integer, default=0, nullable=False)
    resumed_at = Column(DateTime, nullable=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
