# sweet_alert/session_store.py

"""
Session Store

Flash storage used by the notifier and the alert renderer. A flashed key can be
read for the rest of the current request and during the next one; it is
dropped when the request after that starts.
"""

import logging
from abc import ABC, abstractmethod

from flask import session as flask_session

logger = logging.getLogger(__name__)

FLASH_NEW = '_flash.new'
FLASH_OLD = '_flash.old'


class SessionStore(ABC):
    """Key-value store with single-request flash semantics."""

    @abstractmethod
    def flash(self, key, value):
        """Store value under key for the next request."""

    @abstractmethod
    def has(self, key):
        """Check whether key is present."""

    @abstractmethod
    def pull(self, key, default=None):
        """Read key and remove it."""


class FlaskSessionStore(SessionStore):
    """
    Flash store on top of the Flask session.

    Args:
        session: Session mapping to use. Defaults to flask.session, which must
            then be used inside a request context.
    """

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return flask_session if self._session is None else self._session

    def flash(self, key, value):
        self.session[key] = value

        new_keys = [k for k in self.session.get(FLASH_NEW, []) if k != key]
        new_keys.append(key)
        self.session[FLASH_NEW] = new_keys
        self.session[FLASH_OLD] = [k for k in self.session.get(FLASH_OLD, []) if k != key]

    def has(self, key):
        return key in self.session

    def pull(self, key, default=None):
        value = self.session.pop(key, default)
        self._forget(key)
        return value

    def keys(self, prefix=''):
        """Return the session keys starting with prefix."""
        return [k for k in list(self.session.keys()) if k.startswith(prefix)]

    def age_flash_data(self):
        """
        Drop keys flashed two requests ago and mark current ones as old.

        Runs once at the start of every request.
        """
        if FLASH_OLD not in self.session and FLASH_NEW not in self.session:
            return

        old_keys = self.session.pop(FLASH_OLD, [])
        new_keys = self.session.pop(FLASH_NEW, [])

        for key in old_keys:
            self.session.pop(key, None)

        if old_keys:
            logger.debug(f"Expired {len(old_keys)} flashed session keys")

        if new_keys:
            self.session[FLASH_OLD] = new_keys

    def _forget(self, key):
        for bucket in (FLASH_NEW, FLASH_OLD):
            keys = self.session.get(bucket)
            if keys and key in keys:
                self.session[bucket] = [k for k in keys if k != key]
