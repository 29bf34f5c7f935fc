"""Keep the records endpoint token in the OS keychain."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "TreeLists"
TOKEN_KEY = "records_token"
_AVAILABLE = False

try:
    import keyring
    import keyring.errors

    _AVAILABLE = True
except Exception:
    logger.warning("keyring not available; the records token will not be remembered")


def is_available() -> bool:
    return _AVAILABLE


def load_token(key: str = TOKEN_KEY) -> str | None:
    """Return the stored token, or None if absent or the keychain fails."""
    if not _AVAILABLE:
        return None
    try:
        return keyring.get_password(SERVICE_NAME, key)
    except keyring.errors.KeyringError:
        logger.warning("Could not read %s from keychain", key)
        return None


def remember_token(token: str, key: str = TOKEN_KEY) -> bool:
    """Store ``token``; an empty token forgets the stored one instead."""
    if not _AVAILABLE:
        return False
    token = token.strip()
    if not token:
        return forget_token(key)
    try:
        keyring.set_password(SERVICE_NAME, key, token)
    except keyring.errors.KeyringError:
        logger.warning("Could not save %s to keychain", key)
        return False
    return True


def forget_token(key: str = TOKEN_KEY) -> bool:
    if not _AVAILABLE:
        return False
    try:
        keyring.delete_password(SERVICE_NAME, key)
    except keyring.errors.PasswordDeleteError:
        # nothing stored
        return False
    except keyring.errors.KeyringError:
        logger.warning("Could not delete %s from keychain", key)
        return False
    return True
