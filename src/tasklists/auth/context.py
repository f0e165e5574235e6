"""Request context threaded explicitly through every resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..dbmodels import Users
    from ..graphql.loaders import Loaders
    from ..store import DataStore
    from .credentials import CredentialService


@dataclass
class RequestContext:
    """Runtime context for one request: identity, store handle and loaders.

    ``current_user`` is resolved once when the context is built and is not
    re-read for the rest of the request.
    """

    store: DataStore
    credentials: CredentialService
    current_user: Users | None = None
    token: str | None = None
    loaders: Loaders = field(init=False)

    def __post_init__(self) -> None:
        from ..graphql.loaders import Loaders

        self.loaders = Loaders(self.store)

    @property
    def is_authenticated(self) -> bool:
        """Check if the request is authenticated."""
        return self.current_user is not None

    @property
    def user_id(self) -> str | None:
        return str(self.current_user.id) if self.current_user else None

    def invalidate(self) -> None:
        """Drop cached loader results so later reads observe a write."""
        self.loaders.clear_all()
