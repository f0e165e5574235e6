"""Password hashing and self-issued identity tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID

import bcrypt
import jwt
from jwt.exceptions import InvalidTokenError

from ..logging import get_logger

logger = get_logger(__name__)

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class CredentialService:
    """Hashes/verifies passwords and issues/verifies signed identity tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "tasklists",
        audience: str = "tasklists-api",
        token_expiry_days: int = 30,
        bcrypt_rounds: int = 12,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_expiry_days = token_expiry_days
        self.bcrypt_rounds = bcrypt_rounds

    def hash_password(self, password: str) -> str:
        """Return a salted bcrypt hash of ``password``.

        Input past 72 UTF-8 bytes is ignored, as bcrypt has always done.
        """
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def verify_password(self, password: str, credential: str) -> bool:
        """Check ``password`` against a stored hash. Never raises on mismatch."""
        try:
            return bcrypt.checkpw(_password_bytes(password), credential.encode("utf-8"))
        except (ValueError, TypeError):
            logger.warning("Stored credential is not a valid bcrypt hash")
            return False

    def issue_token(self, user_id: UUID | str) -> str:
        """Issue a signed token whose subject is ``user_id``."""
        now = datetime.now(UTC)

        payload = {
            "sub": str(user_id),
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(days=self.token_expiry_days),
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> str | None:
        """Return the token's subject, or None if the token is unusable.

        Bad signatures, malformed payloads, a missing subject and expiry all
        yield None.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                    "require": ["exp", "sub"],
                },
            )
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            return None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            logger.warning("Token carries no usable subject")
            return None

        return subject
