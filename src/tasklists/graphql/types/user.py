"""
User GraphQL type definitions
"""

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID
    name: str
    email: str
    avatar: str | None


@strawberry.type
class AuthUser:
    """A user together with a freshly issued bearer token."""

    user: User
    token: str
