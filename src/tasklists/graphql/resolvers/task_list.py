from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ..access_control import require_user
from .todo import to_todo_type
from .user import to_user_type

if TYPE_CHECKING:
    from ...auth.context import RequestContext
    from ...dbmodels import TaskLists
    from ..types.task_list import TaskList
    from ..types.todo import ToDo
    from ..types.user import User

logger = get_logger(__name__)


def to_task_list_type(task_list: TaskLists) -> TaskList:
    from ..types.task_list import TaskList as TaskListType

    return TaskListType(
        id=strawberry.ID(str(task_list.id)),
        created_at=task_list.created_at,
        title=task_list.title,
        user_ids=list(task_list.user_ids),
    )


# Query resolvers
async def resolve_my_task_lists(ctx: RequestContext) -> list[TaskList]:
    """
    Resolve the task lists the current user is a member of.

    Anonymous callers get an empty list.
    """
    if ctx.current_user is None:
        logger.info("Unauthenticated access to myTaskList")
        return []

    task_lists = await ctx.store.find_task_lists_for_user(ctx.current_user.id)
    return [to_task_list_type(task_list) for task_list in task_lists]


async def resolve_task_list_by_id(ctx: RequestContext, id: str) -> TaskList | None:
    """Resolve a task list by ID. No membership check is applied."""
    task_list = await ctx.store.get_task_list(id)
    if task_list is None:
        logger.info("Task list not found", task_list_id=id)
        return None
    return to_task_list_type(task_list)


# Field resolvers
async def resolve_task_list_users(task_list: TaskList, ctx: RequestContext) -> list[User]:
    """Resolve member users in ``user_ids`` order, skipping deleted accounts."""
    users = await ctx.loaders.user_loader.load_many(task_list.user_ids)
    return [to_user_type(user) for user in users if user is not None]


async def resolve_task_list_todos(task_list: TaskList, ctx: RequestContext) -> list[ToDo]:
    todos = await ctx.loaders.todos_by_task_list_loader.load(str(task_list.id))
    return [to_todo_type(todo) for todo in todos]


async def resolve_task_list_progress(task_list: TaskList, ctx: RequestContext) -> float:
    """Return ``100 * completed / total``, or 0 for a list without to-dos."""
    todos = await ctx.loaders.todos_by_task_list_loader.load(str(task_list.id))
    if not todos:
        return 0.0

    completed = sum(1 for todo in todos if todo.is_completed)
    return 100 * (completed / len(todos))


# Mutation resolvers
async def create_task_list(ctx: RequestContext, title: str) -> TaskList:
    """Create a task list with the caller as its only member."""
    user = require_user(ctx)

    task_list = await ctx.store.insert_task_list(title=title, owner_id=user.id)
    ctx.invalidate()

    logger.info(
        "Task list created",
        task_list_id=str(task_list.id),
        user_id=str(user.id),
        title=task_list.title,
    )
    return to_task_list_type(task_list)


async def update_task_list(ctx: RequestContext, id: str, title: str) -> TaskList:
    """Set a list's title and return the list as stored after the write."""
    user = require_user(ctx)

    await ctx.store.update_task_list_title(id, title)
    ctx.invalidate()

    task_list = await ctx.store.get_task_list(id)
    if task_list is None:
        raise NotFoundError("Task list not found")

    logger.info("Task list updated", task_list_id=id, user_id=str(user.id))
    return to_task_list_type(task_list)


async def delete_task_list(ctx: RequestContext, id: str) -> bool:
    """
    Delete a task list record.

    Its to-dos are left in place and their ``taskList`` field resolves to null.
    """
    user = require_user(ctx)

    deleted = await ctx.store.delete_task_list(id)
    ctx.invalidate()

    logger.info("Task list deleted", task_list_id=id, user_id=str(user.id), deleted=deleted)
    return True


async def add_user_to_task_list(
    ctx: RequestContext, task_list_id: str, user_id: str
) -> TaskList | None:
    """
    Add ``user_id`` to the list's members.

    Idempotent: an existing member leaves the list unchanged. Returns None when
    the list does not exist, otherwise the list as committed.
    """
    user = require_user(ctx)

    task_list = await ctx.store.add_task_list_member(task_list_id, user_id)
    ctx.invalidate()

    if task_list is None:
        logger.info("Task list not found for membership change", task_list_id=task_list_id)
        return None

    logger.info(
        "User added to task list",
        task_list_id=task_list_id,
        member_id=user_id,
        user_id=str(user.id),
    )
    return to_task_list_type(task_list)
