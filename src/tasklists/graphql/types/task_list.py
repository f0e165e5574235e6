"""
TaskList GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..access_control import get_request_context

if TYPE_CHECKING:
    from .todo import ToDo
    from .user import User


@strawberry.type
class TaskList:
    """Task list type for GraphQL API."""

    id: strawberry.ID
    created_at: str
    title: str
    user_ids: strawberry.Private[list[str]]

    @strawberry.field
    async def progress(self, info: strawberry.Info) -> float:
        """Percentage of completed to-dos in this list."""
        from ..resolvers.task_list import resolve_task_list_progress

        return await resolve_task_list_progress(self, get_request_context(info))

    @strawberry.field
    async def users(
        self, info: strawberry.Info
    ) -> list[Annotated["User", strawberry.lazy(".user")]]:
        """Members of this list, in membership order."""
        from ..resolvers.task_list import resolve_task_list_users

        return await resolve_task_list_users(self, get_request_context(info))

    @strawberry.field
    async def todos(
        self, info: strawberry.Info
    ) -> list[Annotated["ToDo", strawberry.lazy(".todo")]]:
        """To-do items belonging to this list."""
        from ..resolvers.task_list import resolve_task_list_todos

        return await resolve_task_list_todos(self, get_request_context(info))
