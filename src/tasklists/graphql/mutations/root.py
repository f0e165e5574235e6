"""
Root GraphQL mutation definitions
"""

import strawberry

from ..access_control import get_request_context
from ..types.task_list import TaskList
from ..types.todo import ToDo
from ..types.user import AuthUser


# Input types for mutations
@strawberry.input
class SignUpInput:
    """Input for registering a new user."""

    email: str
    password: str
    name: str
    avatar: str | None = None


@strawberry.input
class SignInInput:
    """Input for signing in."""

    email: str
    password: str


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Auth mutations
    @strawberry.mutation(name="signUp")
    async def sign_up(self, info: strawberry.Info, input: SignUpInput) -> AuthUser:
        """Register a new user."""
        from ..resolvers.auth import sign_up

        return await sign_up(get_request_context(info), input)

    @strawberry.mutation(name="signIn")
    async def sign_in(self, info: strawberry.Info, input: SignInInput) -> AuthUser:
        """Sign in with email and password."""
        from ..resolvers.auth import sign_in

        return await sign_in(get_request_context(info), input)

    # Task list mutations
    @strawberry.mutation(name="createTaskList")
    async def create_task_list(self, info: strawberry.Info, title: str) -> TaskList:
        """Create a new task list."""
        from ..resolvers.task_list import create_task_list

        return await create_task_list(get_request_context(info), title)

    @strawberry.mutation(name="updateTaskList")
    async def update_task_list(
        self, info: strawberry.Info, id: strawberry.ID, title: str
    ) -> TaskList:
        """Rename a task list."""
        from ..resolvers.task_list import update_task_list

        return await update_task_list(get_request_context(info), id, title)

    @strawberry.mutation(name="deleteTaskList")
    async def delete_task_list(self, info: strawberry.Info, id: strawberry.ID) -> bool | None:
        """Delete a task list."""
        from ..resolvers.task_list import delete_task_list

        return await delete_task_list(get_request_context(info), id)

    @strawberry.mutation(name="addUserToTaskList")
    async def add_user_to_task_list(
        self, info: strawberry.Info, task_list_id: strawberry.ID, user_id: strawberry.ID
    ) -> TaskList | None:
        """Add a collaborator to a task list."""
        from ..resolvers.task_list import add_user_to_task_list

        return await add_user_to_task_list(get_request_context(info), task_list_id, user_id)

    # To-do mutations
    @strawberry.mutation(name="createToDo")
    async def create_todo(
        self, info: strawberry.Info, content: str, task_list_id: strawberry.ID
    ) -> ToDo:
        """Create a to-do in a task list."""
        from ..resolvers.todo import create_todo

        return await create_todo(get_request_context(info), content, task_list_id)

    @strawberry.mutation(name="updateToDo")
    async def update_todo(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        content: str | None = None,
        is_completed: bool | None = None,
    ) -> ToDo:
        """Update a to-do's content and/or completion flag."""
        from ..resolvers.todo import update_todo

        return await update_todo(get_request_context(info), id, content, is_completed)

    @strawberry.mutation(name="deleteToDo")
    async def delete_todo(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a to-do."""
        from ..resolvers.todo import delete_todo

        return await delete_todo(get_request_context(info), id)
