"""
ToDo GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..access_control import get_request_context

if TYPE_CHECKING:
    from .task_list import TaskList


@strawberry.type
class ToDo:
    """To-do item type for GraphQL API."""

    id: strawberry.ID
    content: str
    is_completed: bool
    task_list_id: strawberry.Private[str]

    @strawberry.field
    async def task_list(
        self, info: strawberry.Info
    ) -> Annotated["TaskList", strawberry.lazy(".task_list")] | None:
        """The parent list, or null once that list has been deleted."""
        from ..resolvers.todo import resolve_todo_task_list

        return await resolve_todo_task_list(self, get_request_context(info))
