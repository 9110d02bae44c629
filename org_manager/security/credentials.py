"""API key lookup from the environment, the system keyring, or ~/.netrc."""

import logging
import netrc
import os
from typing import Mapping, Optional

import keyring
from keyring.errors import KeyringError

from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

API_KEY_ENV = "HEROKU_API_KEY"


class CredentialManager:
    """Reads the caller's API key. Never writes to any store."""

    def __init__(
        self,
        api_host: str,
        service: str = "heroku",
        netrc_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize credential manager.

        Args:
            api_host: Platform API host, used as the keyring user and netrc machine
            service: Keyring service name
            netrc_path: Alternate netrc file; defaults to ~/.netrc
            environ: Environment mapping; defaults to os.environ
        """
        self.api_host = api_host
        self.service = service
        self.netrc_path = netrc_path
        self.environ = os.environ if environ is None else environ

    def get_api_key(self) -> str:
        """Return the API key from the first source that has one.

        Raises:
            AuthenticationError: if no source holds a key
        """
        for source, lookup in (
            ("environment", self._from_env),
            ("keyring", self._from_keyring),
            ("netrc", self._from_netrc),
        ):
            key = lookup()
            if key:
                logger.debug(f"Using API key from {source}")
                return key

        raise AuthenticationError(
            "Not logged in. Set HEROKU_API_KEY or log in with the platform CLI first.",
            details={"api_host": self.api_host},
        )

    def _from_env(self) -> Optional[str]:
        return self.environ.get(API_KEY_ENV) or None

    def _from_keyring(self) -> Optional[str]:
        try:
            return keyring.get_password(self.service, self.api_host)
        except KeyringError as e:
            logger.warning(f"Failed to read keyring for {self.service}: {e}")
            return None

    def _from_netrc(self) -> Optional[str]:
        try:
            auth = netrc.netrc(self.netrc_path).authenticators(self.api_host)
        except FileNotFoundError:
            return None
        except (netrc.NetrcParseError, OSError) as e:
            logger.warning(f"Failed to parse netrc: {e}")
            return None
        if auth is None:
            return None
        # (login, account, password)
        return auth[2] or None
