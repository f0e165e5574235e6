"""Request-scoped batch loaders used by the field resolvers."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from strawberry.dataloader import DataLoader

from ..dbmodels import TaskLists, ToDos, Users

if TYPE_CHECKING:
    from ..store import DataStore


class Loaders:
    def __init__(self, store: DataStore):
        self.store = store
        self.user_loader = DataLoader(load_fn=self.load_users)
        self.task_list_loader = DataLoader(load_fn=self.load_task_lists)
        self.todos_by_task_list_loader = DataLoader(load_fn=self.load_todos_by_task_list)

    async def load_users(self, keys: list[str]) -> list[Users | None]:
        """Batch load users by ID."""
        users = await self.store.get_users(keys)
        users_map = {str(user.id): user for user in users}
        return [users_map.get(key) for key in keys]

    async def load_task_lists(self, keys: list[str]) -> list[TaskLists | None]:
        """Batch load task lists by ID."""
        task_lists = await self.store.get_task_lists(keys)
        task_lists_map = {str(task_list.id): task_list for task_list in task_lists}
        return [task_lists_map.get(key) for key in keys]

    async def load_todos_by_task_list(self, keys: list[str]) -> list[list[ToDos]]:
        """Batch load the to-dos of several task lists."""
        todos = await self.store.find_todos_for_task_lists(keys)
        grouped: dict[str, list[ToDos]] = defaultdict(list)
        for todo in todos:
            grouped[str(todo.task_list_id)].append(todo)
        return [grouped.get(key, []) for key in keys]

    def clear_all(self) -> None:
        self.user_loader.clear_all()
        self.task_list_loader.clear_all()
        self.todos_by_task_list_loader.clear_all()
