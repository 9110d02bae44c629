"""Tests for API key lookup."""

from unittest.mock import patch

import pytest
from keyring.errors import KeyringError

from org_manager.core.exceptions import AuthenticationError
from org_manager.security.credentials import CredentialManager


@pytest.fixture
def netrc_file(tmp_path):
    path = tmp_path / "netrc"
    path.write_text("machine api.example.test\n  login me@example.com\n  password netrc-key\n")
    return str(path)


class TestCredentialManager:

    def test_environment_first(self, netrc_file):
        manager = CredentialManager("api.example.test", netrc_path=netrc_file,
                                    environ={"HEROKU_API_KEY": "env-key"})
        with patch("org_manager.security.credentials.keyring.get_password") as get_password:
            assert manager.get_api_key() == "env-key"
        get_password.assert_not_called()

    def test_keyring(self, netrc_file):
        manager = CredentialManager("api.example.test", netrc_path=netrc_file, environ={})
        with patch("org_manager.security.credentials.keyring.get_password", return_value="ring-key") as get_password:
            assert manager.get_api_key() == "ring-key"
        get_password.assert_called_once_with("heroku", "api.example.test")

    def test_netrc(self, netrc_file):
        manager = CredentialManager("api.example.test", netrc_path=netrc_file, environ={})
        with patch("org_manager.security.credentials.keyring.get_password", return_value=None):
            assert manager.get_api_key() == "netrc-key"

    def test_keyring_error_falls_through(self, netrc_file):
        manager = CredentialManager("api.example.test", netrc_path=netrc_file, environ={})
        with patch("org_manager.security.credentials.keyring.get_password",
                   side_effect=KeyringError("locked")):
            assert manager.get_api_key() == "netrc-key"

    def test_not_logged_in(self, tmp_path):
        manager = CredentialManager("api.example.test", netrc_path=str(tmp_path / "missing"), environ={})
        with patch("org_manager.security.credentials.keyring.get_password", return_value=None):
            with pytest.raises(AuthenticationError) as exc_info:
                manager.get_api_key()
        assert "Not logged in" in exc_info.value.message

    def test_netrc_other_machine(self, netrc_file):
        manager = CredentialManager("api.other.test", netrc_path=netrc_file, environ={})
        with patch("org_manager.security.credentials.keyring.get_password", return_value=None):
            with pytest.raises(AuthenticationError):
                manager.get_api_key()
