import pytest

from domain import CredentialsOutcome, CredentialStore
from exceptions import CookieNotConfiguredError, InvalidPasswordError


@pytest.fixture
def credentials(store, upload_config):
    return CredentialStore(store, upload_config)


def test_first_call_creates_password_and_cookie(credentials, store):
    outcome = credentials.set_credentials("secret", "uin=1")

    assert outcome is CredentialsOutcome.CREATED
    assert store.values == {"om_qq_password": "secret", "om_qq_cookies": "uin=1"}
    assert credentials.get_cookie() == "uin=1"


def test_matching_password_updates_cookie_only(credentials, store):
    credentials.set_credentials("secret", "uin=1")

    outcome = credentials.set_credentials("secret", "uin=2")

    assert outcome is CredentialsOutcome.UPDATED
    assert store.values["om_qq_password"] == "secret"
    assert credentials.get_cookie() == "uin=2"


def test_wrong_password_changes_nothing(credentials, store):
    credentials.set_credentials("secret", "uin=1")

    with pytest.raises(InvalidPasswordError):
        credentials.set_credentials("guess", "uin=evil")

    assert store.values == {"om_qq_password": "secret", "om_qq_cookies": "uin=1"}


def test_get_cookie_without_configuration_raises(credentials):
    with pytest.raises(CookieNotConfiguredError):
        credentials.get_cookie()
