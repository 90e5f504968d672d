"""
Database configuration and ORM models.

This module defines the SQLAlchemy ORM models and the ``Database`` resource
that owns the engine. The application creates one ``Database`` at startup and
disposes it at shutdown; repositories only ever see its session factory.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    # Stored naive; every timestamp column holds UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _new_id() -> str:
    return str(uuid4())


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# ===========================================
# ORM Models
# ===========================================


class UserORM(Base):
    """Registered user ORM model."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), nullable=False, unique=True)
    display_name = Column(String(255), nullable=True)
    photo_url = Column(String(1000), nullable=True)
    created_at = Column(DateTime, default=_utcnow)


class ClassORM(Base):
    """Class ORM model."""

    __tablename__ = "classes"
    __table_args__ = (
        Index("ix_classes_owner_range", "user_email", "start_time", "end_time"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    user_email = Column(String(255), nullable=False)
    subject = Column(String(100), nullable=False)
    instructor = Column(String(100), nullable=False)
    color = Column(String(7), nullable=False)
    day = Column(String(10), nullable=True)
    date = Column(DateTime, nullable=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, nullable=True)


class TaskORM(Base):
    """Task ORM model."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_owner_range", "user_email", "start_time", "end_time"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    user_email = Column(String(255), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    subject = Column(String(100), nullable=True)
    priority = Column(String(10), nullable=False, default="medium")
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, nullable=True)


class NoteORM(Base):
    """Note ORM model."""

    __tablename__ = "notes"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_email = Column(String(255), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    subject = Column(String(100), nullable=True, index=True)
    content = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, nullable=True)


class ExpenseORM(Base):
    """Expense ORM model."""

    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_email = Column(String(255), nullable=False, index=True)
    budget_id = Column(String(36), nullable=True, index=True)
    title = Column(String(200), nullable=False)
    amount = Column(Float, nullable=False)
    category = Column(String(100), nullable=True)
    date = Column(DateTime, nullable=True)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime, default=_utcnow)


class BudgetORM(Base):
    """Monthly budget ORM model."""

    __tablename__ = "budgets"
    __table_args__ = (UniqueConstraint("user_email", "month", name="uq_budgets_owner_month"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    user_email = Column(String(255), nullable=False, index=True)
    month = Column(String(7), nullable=False)
    amount = Column(Float, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, nullable=True)


# ===========================================
# Database Session Management
# ===========================================


class Database:
    """Engine and session factory with explicit startup/shutdown."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self._engine: AsyncEngine = create_async_engine(url, echo=echo)
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    async def init(self) -> None:
        """Create tables and indexes that do not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close pooled connections."""
        await self._engine.dispose()
