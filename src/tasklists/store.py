"""Repository helpers over the users, task_lists and todos tables.

Every method opens its own session, so each call is one transaction and
writes are atomic per record only. Identifiers are accepted as strings or
UUIDs; a malformed identifier behaves like one that does not exist.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import UUID

from sqlalchemy import String, cast, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .database.connection import get_session_factory, session_scope
from .dbmodels import TaskLists, ToDos, Users


def parse_id(value: str | UUID | None) -> UUID | None:
    """Convert a public identifier to a storage key, or None if malformed."""
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _parse_ids(values: Iterable[str | UUID]) -> list[UUID]:
    return [key for key in (parse_id(v) for v in values) if key is not None]


class DataStore:
    """Async access to the three normalized collections."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self._session_factory = session_factory

    def session(self):
        factory = self._session_factory or get_session_factory()
        return session_scope(factory)

    # Users

    async def get_user(self, user_id: str | UUID) -> Users | None:
        key = parse_id(user_id)
        if key is None:
            return None
        async with self.session() as session:
            return await session.get(Users, key)

    async def get_users(self, user_ids: Sequence[str | UUID]) -> list[Users]:
        keys = _parse_ids(user_ids)
        if not keys:
            return []
        async with self.session() as session:
            result = await session.execute(select(Users).where(Users.id.in_(keys)))
            return list(result.scalars().all())

    async def find_user_by_email(self, email: str) -> Users | None:
        async with self.session() as session:
            stmt = select(Users).where(Users.email == email).order_by(Users.created_at).limit(1)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def insert_user(
        self, *, name: str, email: str, password: str, avatar: str | None = None
    ) -> Users:
        user = Users(name=name, email=email, password=password, avatar=avatar)
        async with self.session() as session:
            session.add(user)
            await session.flush()
        return user

    # Task lists

    async def get_task_list(self, task_list_id: str | UUID) -> TaskLists | None:
        key = parse_id(task_list_id)
        if key is None:
            return None
        async with self.session() as session:
            return await session.get(TaskLists, key)

    async def get_task_lists(self, task_list_ids: Sequence[str | UUID]) -> list[TaskLists]:
        keys = _parse_ids(task_list_ids)
        if not keys:
            return []
        async with self.session() as session:
            result = await session.execute(select(TaskLists).where(TaskLists.id.in_(keys)))
            return list(result.scalars().all())

    async def find_task_lists_for_user(self, user_id: str | UUID) -> list[TaskLists]:
        key = parse_id(user_id)
        if key is None:
            return []
        # user_ids is a JSON array of quoted id strings on every backend
        member_pattern = f'%"{key}"%'
        async with self.session() as session:
            stmt = (
                select(TaskLists)
                .where(cast(TaskLists.user_ids, String).like(member_pattern))
                .order_by(TaskLists.created_at)
            )
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def insert_task_list(self, *, title: str, owner_id: str | UUID) -> TaskLists:
        task_list = TaskLists(title=title, user_ids=[str(owner_id)])
        async with self.session() as session:
            session.add(task_list)
            await session.flush()
        return task_list

    async def update_task_list_title(self, task_list_id: str | UUID, title: str) -> bool:
        key = parse_id(task_list_id)
        if key is None:
            return False
        async with self.session() as session:
            stmt = update(TaskLists).where(TaskLists.id == key).values(title=title)
            result = await session.execute(stmt)
            return result.rowcount > 0

    async def add_task_list_member(
        self, task_list_id: str | UUID, user_id: str | UUID
    ) -> TaskLists | None:
        """Append ``user_id`` to the list's members unless already present.

        Returns the list as committed, or None when it does not exist. A
        malformed ``user_id`` leaves the members unchanged.
        """
        key = parse_id(task_list_id)
        if key is None:
            return None
        member = parse_id(user_id)
        async with self.session() as session:
            stmt = select(TaskLists).where(TaskLists.id == key).with_for_update()
            task_list = (await session.execute(stmt)).scalar_one_or_none()
            if task_list is None:
                return None
            if member is not None and str(member) not in task_list.user_ids:
                task_list.user_ids = [*task_list.user_ids, str(member)]
        return task_list

    async def delete_task_list(self, task_list_id: str | UUID) -> bool:
        key = parse_id(task_list_id)
        if key is None:
            return False
        async with self.session() as session:
            result = await session.execute(delete(TaskLists).where(TaskLists.id == key))
            return result.rowcount > 0

    # To-dos

    async def get_todo(self, todo_id: str | UUID) -> ToDos | None:
        key = parse_id(todo_id)
        if key is None:
            return None
        async with self.session() as session:
            return await session.get(ToDos, key)

    async def find_todos_for_task_lists(
        self, task_list_ids: Sequence[str | UUID]
    ) -> list[ToDos]:
        keys = _parse_ids(task_list_ids)
        if not keys:
            return []
        async with self.session() as session:
            result = await session.execute(select(ToDos).where(ToDos.task_list_id.in_(keys)))
            return list(result.scalars().all())

    async def insert_todo(self, *, content: str, task_list_id: str | UUID) -> ToDos:
        key = parse_id(task_list_id)
        if key is None:
            raise ValueError(f"Invalid task list id: {task_list_id}")
        todo = ToDos(content=content, task_list_id=key, is_completed=False)
        async with self.session() as session:
            session.add(todo)
            await session.flush()
        return todo

    async def update_todo(
        self,
        todo_id: str | UUID,
        *,
        content: str | None = None,
        is_completed: bool | None = None,
    ) -> bool:
        """Merge the supplied fields into the to-do; omitted fields are untouched."""
        key = parse_id(todo_id)
        if key is None:
            return False
        values: dict[str, object] = {}
        if content is not None:
            values["content"] = content
        if is_completed is not None:
            values["is_completed"] = is_completed
        async with self.session() as session:
            if not values:
                return await session.get(ToDos, key) is not None
            result = await session.execute(update(ToDos).where(ToDos.id == key).values(**values))
            return result.rowcount > 0

    async def delete_todo(self, todo_id: str | UUID) -> bool:
        key = parse_id(todo_id)
        if key is None:
            return False
        async with self.session() as session:
            result = await session.execute(delete(ToDos).where(ToDos.id == key))
            return result.rowcount > 0
