from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from ...errors import InvalidCredential
from ...logging import get_logger
from .user import to_user_type

if TYPE_CHECKING:
    from ...auth.context import RequestContext
    from ..mutations.root import SignInInput, SignUpInput
    from ..types.user import AuthUser

logger = get_logger(__name__)


async def sign_up(ctx: RequestContext, input: SignUpInput) -> AuthUser:
    """
    Register a new user and return it with a bearer token.

    Email uniqueness is not enforced here.
    """
    hashed_password = await asyncio.to_thread(ctx.credentials.hash_password, input.password)

    user = await ctx.store.insert_user(
        name=input.name,
        email=input.email,
        password=hashed_password,
        avatar=input.avatar,
    )

    logger.info("User signed up", user_id=str(user.id))

    from ..types.user import AuthUser as AuthUserType

    return AuthUserType(user=to_user_type(user), token=ctx.credentials.issue_token(user.id))


async def sign_in(ctx: RequestContext, input: SignInInput) -> AuthUser:
    """
    Exchange an email and password for a bearer token.

    Unknown emails and wrong passwords raise the same ``InvalidCredential``.
    """
    user = await ctx.store.find_user_by_email(input.email)
    if user is None:
        logger.info("Sign-in failed", reason="unknown_email")
        raise InvalidCredential()

    is_password_correct = await asyncio.to_thread(
        ctx.credentials.verify_password, input.password, user.password
    )
    if not is_password_correct:
        logger.info("Sign-in failed", reason="wrong_password", user_id=str(user.id))
        raise InvalidCredential()

    logger.info("User signed in", user_id=str(user.id))

    from ..types.user import AuthUser as AuthUserType

    return AuthUserType(user=to_user_type(user), token=ctx.credentials.issue_token(user.id))
