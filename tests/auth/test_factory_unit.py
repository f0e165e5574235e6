"""Unit tests for the credential service factory."""

import os
from unittest.mock import patch

import pytest

from tasklists.auth.credentials import CredentialService
from tasklists.auth.factory import get_credential_service
from tasklists.config import settings


class TestCredentialFactory:
    @patch.dict(os.environ, {"TASKLISTS_JWT_SECRET": "test-secret"})
    def test_service_with_env_secret(self):
        service = get_credential_service()

        assert isinstance(service, CredentialService)
        assert service.secret_key == "test-secret"
        assert service.token_expiry_days == settings.token_expiry_days

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_secret(self, monkeypatch):
        monkeypatch.setattr(settings, "jwt_secret", None)

        with pytest.raises(ValueError, match="JWT secret key is required"):
            get_credential_service()

    @patch.dict(os.environ, {}, clear=True)
    def test_secret_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "jwt_secret", "from-settings")

        assert get_credential_service().secret_key == "from-settings"
