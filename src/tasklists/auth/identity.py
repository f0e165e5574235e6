"""Resolve the caller's identity from an inbound credential."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import bind_user, get_logger
from .context import RequestContext

if TYPE_CHECKING:
    from ..dbmodels import Users
    from ..store import DataStore
    from .credentials import CredentialService

logger = get_logger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization`` header value.

    Accepts ``Bearer <token>`` as well as the bare token. Blank values mean
    no credential was sent.
    """
    if not authorization:
        return None

    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if rest and scheme.lower() == "bearer":
        value = rest.strip()

    return value or None


async def resolve_current_user(
    token: str | None, store: DataStore, credentials: CredentialService
) -> Users | None:
    """
    Turn a token into a user record, or None for an anonymous caller.

    A missing token, an invalid or expired token, and a token whose subject
    no longer exists all resolve to None rather than raising.
    """
    if not token:
        return None

    subject = credentials.verify_token(token)
    if subject is None:
        logger.info("Ignoring unusable token, treating request as anonymous")
        return None

    user = await store.get_user(subject)
    if user is None:
        logger.info("Token subject not found, treating request as anonymous", subject=subject)
        return None

    return user


async def build_request_context(
    authorization: str | None, store: DataStore, credentials: CredentialService
) -> RequestContext:
    """Build the per-request context, resolving identity exactly once."""
    token = extract_bearer_token(authorization)
    user = await resolve_current_user(token, store, credentials)

    if user is not None:
        bind_user(str(user.id))

    return RequestContext(
        store=store,
        credentials=credentials,
        current_user=user,
        token=token if user is not None else None,
    )
