"""
Shared access control logic for GraphQL resolvers

Every state-changing operation calls ``require_user`` before touching the
store. Read paths are weaker: ``myTaskList`` scopes to the caller and
``getTaskList`` performs no membership check at all, so any caller can read
any list by id, and any authenticated caller can change any list or to-do.
"""

from typing import TYPE_CHECKING

import strawberry

from ..errors import Unauthenticated
from ..logging import get_logger

if TYPE_CHECKING:
    from ..auth.context import RequestContext
    from ..dbmodels import Users

logger = get_logger(__name__)

REQUEST_CONTEXT_KEY = "request_context"


def get_request_context(info: strawberry.Info) -> "RequestContext":
    """Extract the request context from the GraphQL info object."""
    ctx = info.context.get(REQUEST_CONTEXT_KEY)
    if ctx is None:
        logger.error("Request context not found in GraphQL context")
        raise RuntimeError("Request context not found in GraphQL context")
    return ctx


def require_user(ctx: "RequestContext") -> "Users":
    """Return the authenticated user or raise ``Unauthenticated``."""
    if ctx.current_user is None:
        logger.info("Rejected unauthenticated mutation")
        raise Unauthenticated()
    return ctx.current_user
