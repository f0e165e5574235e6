"""
Database models for the Task Lists backend (authoritative ORM definitions).

Defines the SQLAlchemy Base with a naming convention for stable Alembic
autogenerate diffs, and exposes `target_metadata` for Alembic.

The three tables are kept normalized: to-dos point at their task list and
task lists hold their members as a JSON array of user ids. No foreign key
constraint links `todos.task_list_id` to `task_lists.id`, so deleting a
task list leaves its to-dos in place.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _isonow() -> str:
    return datetime.now(UTC).isoformat()


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        Index("idx_users_email", "email"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[str | None] = mapped_column(Text)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)


class TaskLists(Base):
    __tablename__ = "task_lists"
    __table_args__ = (PrimaryKeyConstraint("id", name="task_lists_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # ISO-8601 string, exposed verbatim as TaskList.createdAt
    created_at: Mapped[str] = mapped_column(String(64), nullable=False, default=_isonow)
    user_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)


class ToDos(Base):
    __tablename__ = "todos"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="todos_pkey"),
        Index("idx_todos_task_list_id", "task_list_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    task_list_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)


target_metadata = Base.metadata
