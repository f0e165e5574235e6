from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...auth.context import RequestContext
    from ...dbmodels import Users
    from ..types.user import User


def to_user_type(user: Users) -> User:
    from ..types.user import User as UserType

    return UserType(
        id=strawberry.ID(str(user.id)),
        name=user.name,
        email=user.email,
        avatar=user.avatar,
    )


async def resolve_current_user(ctx: RequestContext) -> User | None:
    if ctx.current_user is None:
        return None
    return to_user_type(ctx.current_user)
