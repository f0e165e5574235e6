"""Factory for the credential service based on configuration."""

from __future__ import annotations

import os

from ..config import settings
from .credentials import CredentialService


def get_credential_service() -> CredentialService:
    """Create the credential service from settings."""
    secret_key = os.getenv("TASKLISTS_JWT_SECRET") or settings.jwt_secret
    if not secret_key:
        raise ValueError("JWT secret key is required. Set TASKLISTS_JWT_SECRET.")

    return CredentialService(
        secret_key=secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        token_expiry_days=settings.token_expiry_days,
        bcrypt_rounds=settings.bcrypt_rounds,
    )
