from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ..access_control import require_user

if TYPE_CHECKING:
    from ...auth.context import RequestContext
    from ...dbmodels import ToDos
    from ..types.task_list import TaskList
    from ..types.todo import ToDo

logger = get_logger(__name__)


def to_todo_type(todo: ToDos) -> ToDo:
    from ..types.todo import ToDo as ToDoType

    return ToDoType(
        id=strawberry.ID(str(todo.id)),
        content=todo.content,
        is_completed=todo.is_completed,
        task_list_id=str(todo.task_list_id),
    )


# Field resolvers
async def resolve_todo_task_list(todo: ToDo, ctx: RequestContext) -> TaskList | None:
    """Resolve the parent task list; None once it has been deleted."""
    from .task_list import to_task_list_type

    task_list = await ctx.loaders.task_list_loader.load(todo.task_list_id)
    if task_list is None:
        return None
    return to_task_list_type(task_list)


# Mutation resolvers
async def create_todo(ctx: RequestContext, content: str, task_list_id: str) -> ToDo:
    """Create an open to-do inside an existing task list."""
    user = require_user(ctx)

    if await ctx.store.get_task_list(task_list_id) is None:
        raise NotFoundError("Task list not found")

    todo = await ctx.store.insert_todo(content=content, task_list_id=task_list_id)
    ctx.invalidate()

    logger.info(
        "To-do created",
        todo_id=str(todo.id),
        task_list_id=task_list_id,
        user_id=str(user.id),
    )
    return to_todo_type(todo)


async def update_todo(
    ctx: RequestContext,
    id: str,
    content: str | None = None,
    is_completed: bool | None = None,
) -> ToDo:
    """Merge the supplied fields into a to-do and return it as stored."""
    user = require_user(ctx)

    await ctx.store.update_todo(id, content=content, is_completed=is_completed)
    ctx.invalidate()

    todo = await ctx.store.get_todo(id)
    if todo is None:
        raise NotFoundError("To-do not found")

    logger.info("To-do updated", todo_id=id, user_id=str(user.id))
    return to_todo_type(todo)


async def delete_todo(ctx: RequestContext, id: str) -> bool:
    user = require_user(ctx)

    deleted = await ctx.store.delete_todo(id)
    ctx.invalidate()

    logger.info("To-do deleted", todo_id=id, user_id=str(user.id), deleted=deleted)
    return True
