"""Authentication and authorization for the Task Lists backend."""

from .context import RequestContext
from .credentials import CredentialService
from .factory import get_credential_service
from .identity import build_request_context, extract_bearer_token, resolve_current_user

__all__ = [
    "CredentialService",
    "RequestContext",
    "build_request_context",
    "extract_bearer_token",
    "get_credential_service",
    "resolve_current_user",
]
