"""Tests for task list queries and mutations."""

from unittest.mock import patch
from uuid import uuid4

import pytest

from tasklists.errors import NotFoundError, Unauthenticated
from tasklists.graphql.resolvers.task_list import (
    add_user_to_task_list,
    create_task_list,
    delete_task_list,
    resolve_my_task_lists,
    resolve_task_list_by_id,
    update_task_list,
)
from tasklists.graphql.resolvers.todo import create_todo, resolve_todo_task_list


class TestCreateTaskList:
    @pytest.mark.asyncio
    async def test_creator_is_sole_member(self, auth_ctx, user):
        task_list = await create_task_list(auth_ctx, "Groceries")

        assert task_list.title == "Groceries"
        assert task_list.user_ids == [str(user.id)]
        assert task_list.created_at

    @pytest.mark.asyncio
    async def test_requires_authentication(self, anon_ctx, store, user):
        with pytest.raises(Unauthenticated):
            await create_task_list(anon_ctx, "Groceries")

        assert await store.find_task_lists_for_user(user.id) == []


class TestQueries:
    @pytest.mark.asyncio
    async def test_my_task_list_scoped_to_caller(self, auth_ctx, make_context, other_user):
        mine = await create_task_list(auth_ctx, "Mine")
        await create_task_list(make_context(other_user), "Theirs")

        result = await resolve_my_task_lists(auth_ctx)

        assert [t.id for t in result] == [mine.id]

    @pytest.mark.asyncio
    async def test_my_task_list_includes_shared_lists(self, auth_ctx, make_context, user, other_user):
        theirs = await create_task_list(make_context(other_user), "Theirs")
        await add_user_to_task_list(make_context(other_user), theirs.id, str(user.id))

        result = await resolve_my_task_lists(auth_ctx)

        assert [t.id for t in result] == [theirs.id]

    @pytest.mark.asyncio
    async def test_my_task_list_anonymous_is_empty(self, anon_ctx, auth_ctx):
        await create_task_list(auth_ctx, "Mine")
        assert await resolve_my_task_lists(anon_ctx) == []

    @pytest.mark.asyncio
    async def test_get_task_list(self, auth_ctx):
        created = await create_task_list(auth_ctx, "Trip")

        found = await resolve_task_list_by_id(auth_ctx, created.id)

        assert found is not None
        assert found.title == "Trip"
        assert found.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_get_task_list_applies_no_membership_check(self, auth_ctx, anon_ctx):
        created = await create_task_list(auth_ctx, "Private-ish")

        assert await resolve_task_list_by_id(anon_ctx, created.id) is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task_list_id", [str(uuid4()), "not-a-uuid"])
    async def test_get_missing_task_list_is_null(self, auth_ctx, task_list_id):
        assert await resolve_task_list_by_id(auth_ctx, task_list_id) is None


class TestUpdateTaskList:
    @pytest.mark.asyncio
    async def test_update_title(self, auth_ctx):
        created = await create_task_list(auth_ctx, "Old")

        updated = await update_task_list(auth_ctx, created.id, "New")

        assert updated.id == created.id
        assert updated.title == "New"
        assert updated.user_ids == created.user_ids

    @pytest.mark.asyncio
    async def test_update_requires_authentication(self, auth_ctx, anon_ctx):
        created = await create_task_list(auth_ctx, "Old")

        with pytest.raises(Unauthenticated):
            await update_task_list(anon_ctx, created.id, "Hijacked")

        unchanged = await resolve_task_list_by_id(auth_ctx, created.id)
        assert unchanged.title == "Old"

    @pytest.mark.asyncio
    async def test_update_missing_list(self, auth_ctx):
        with pytest.raises(NotFoundError):
            await update_task_list(auth_ctx, str(uuid4()), "Nothing")


class TestDeleteTaskList:
    @pytest.mark.asyncio
    async def test_delete_then_get_is_null(self, auth_ctx):
        created = await create_task_list(auth_ctx, "Doomed")

        assert await delete_task_list(auth_ctx, created.id) is True
        assert await resolve_task_list_by_id(auth_ctx, created.id) is None

    @pytest.mark.asyncio
    async def test_delete_orphans_todos(self, auth_ctx, store):
        created = await create_task_list(auth_ctx, "Doomed")
        todo = await create_todo(auth_ctx, "Left behind", created.id)

        await delete_task_list(auth_ctx, created.id)

        assert await store.get_todo(todo.id) is not None
        assert await resolve_todo_task_list(todo, auth_ctx) is None

    @pytest.mark.asyncio
    async def test_delete_requires_authentication(self, auth_ctx, anon_ctx):
        created = await create_task_list(auth_ctx, "Keep")

        with pytest.raises(Unauthenticated):
            await delete_task_list(anon_ctx, created.id)

        assert await resolve_task_list_by_id(auth_ctx, created.id) is not None


class TestAddUserToTaskList:
    @pytest.mark.asyncio
    async def test_adds_member(self, auth_ctx, user, other_user):
        created = await create_task_list(auth_ctx, "Shared")

        result = await add_user_to_task_list(auth_ctx, created.id, str(other_user.id))

        assert result is not None
        assert result.user_ids == [str(user.id), str(other_user.id)]

    @pytest.mark.asyncio
    async def test_is_idempotent(self, auth_ctx, store, other_user):
        created = await create_task_list(auth_ctx, "Shared")

        first = await add_user_to_task_list(auth_ctx, created.id, str(other_user.id))
        second = await add_user_to_task_list(auth_ctx, created.id, str(other_user.id))

        assert len(second.user_ids) == len(first.user_ids) == 2
        stored = await store.get_task_list(created.id)
        assert len(stored.user_ids) == 2

    @pytest.mark.asyncio
    async def test_adding_existing_member_returns_list_unchanged(self, auth_ctx, user):
        created = await create_task_list(auth_ctx, "Solo")

        result = await add_user_to_task_list(auth_ctx, created.id, str(user.id))

        assert result.user_ids == [str(user.id)]

    @pytest.mark.asyncio
    async def test_single_store_round_trip(self, auth_ctx, user, other_user):
        created = await create_task_list(auth_ctx, "Shared")

        with patch.object(
            auth_ctx.store, "get_task_list", wraps=auth_ctx.store.get_task_list
        ) as get_task_list:
            result = await add_user_to_task_list(auth_ctx, created.id, str(other_user.id))

        get_task_list.assert_not_called()
        assert result.user_ids == [str(user.id), str(other_user.id)]

    @pytest.mark.asyncio
    async def test_missing_list_is_null(self, auth_ctx, other_user):
        assert await add_user_to_task_list(auth_ctx, str(uuid4()), str(other_user.id)) is None

    @pytest.mark.asyncio
    async def test_requires_authentication(self, auth_ctx, anon_ctx, store, other_user):
        created = await create_task_list(auth_ctx, "Shared")

        with pytest.raises(Unauthenticated):
            await add_user_to_task_list(anon_ctx, created.id, str(other_user.id))

        stored = await store.get_task_list(created.id)
        assert str(other_user.id) not in stored.user_ids
