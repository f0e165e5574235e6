"""
Root GraphQL query definitions
"""

import strawberry

from ..access_control import get_request_context
from ..types.task_list import TaskList
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="myTaskList")
    async def my_task_list(self, info: strawberry.Info) -> list[TaskList]:
        """Get the task lists the current user belongs to."""
        from ..resolvers.task_list import resolve_my_task_lists

        return await resolve_my_task_lists(get_request_context(info))

    @strawberry.field(name="getTaskList")
    async def get_task_list(self, info: strawberry.Info, id: strawberry.ID) -> TaskList | None:
        """Get a task list by ID."""
        from ..resolvers.task_list import resolve_task_list_by_id

        return await resolve_task_list_by_id(get_request_context(info), id)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the current authenticated user."""
        from ..resolvers.user import resolve_current_user

        return await resolve_current_user(get_request_context(info))
