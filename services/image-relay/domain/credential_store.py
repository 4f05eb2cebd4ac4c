"""Admin password and session cookie persistence."""

import hmac

from relay_common import setup_logging

from config import UploadConfig
from domain.models import CredentialsOutcome
from exceptions import CookieNotConfiguredError, InvalidPasswordError
from interfaces import KeyValueStore

logger = setup_logging()


class CredentialStore:
    """
    Keeps the admin password and the image host session cookie.

    The first password ever written becomes permanent; afterwards only the
    cookie can change, and only when the same password is presented.
    """

    def __init__(self, store: KeyValueStore, config: UploadConfig):
        self._store = store
        self._password_key = config.password_key
        self._cookie_key = config.cookie_key

    def set_credentials(self, password: str, cookie: str) -> CredentialsOutcome:
        """
        Stores the session cookie, setting the admin password on first use.

        Raises:
            InvalidPasswordError: If a different password is already stored.
            KeyValueStoreError: If the backing store fails.
        """
        stored_password = self._store.get(self._password_key)

        if not stored_password:
            self._store.set(self._password_key, password)
            self._store.set(self._cookie_key, cookie)
            logger.info("Admin password set and cookie stored")
            return CredentialsOutcome.CREATED

        if not hmac.compare_digest(stored_password.encode(), password.encode()):
            logger.warning("Cookie update rejected: wrong password")
            raise InvalidPasswordError()

        self._store.set(self._cookie_key, cookie)
        logger.info("Cookie updated")
        return CredentialsOutcome.UPDATED

    def get_cookie(self) -> str:
        """
        Returns the stored session cookie.

        Raises:
            CookieNotConfiguredError: If no cookie was ever stored.
        """
        cookie = self._store.get(self._cookie_key)
        if not cookie:
            raise CookieNotConfiguredError()
        return cookie
