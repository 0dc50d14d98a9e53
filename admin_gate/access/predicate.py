"""
Access Predicates

A predicate answers one question for an incoming request: may it see a
restricted administrative surface? Every ambiguous case is a denial.
"""

import logging
from collections.abc import Mapping

from flask import current_app, has_app_context, has_request_context
from flask import session as flask_session

from admin_gate.access.exceptions import DirectoryUnavailable

logger = logging.getLogger(__name__)

DIRECTORY_EXTENSION_KEY = 'admin_gate.directory'
DEFAULT_SESSION_KEY = 'user_id'


def session_of(request):
    """Return the session mapping associated with `request`.

    Objects carrying their own `.session` mapping are used as-is; otherwise
    the Flask session of the active request context is used.
    """
    session = getattr(request, 'session', None)
    if session is None and has_request_context():
        session = flask_session
    return session


def resolve_directory():
    """Return the user directory registered on the current application."""
    if not has_app_context():
        raise DirectoryUnavailable('no application context to resolve the user directory')
    directory = current_app.extensions.get(DIRECTORY_EXTENSION_KEY)
    if directory is None:
        raise DirectoryUnavailable('no user directory registered on the application')
    return directory


class AccessPredicate:
    """A named capability the routing layer can call to gate a request.

    Subclasses implement `is_authorized(request) -> bool`. Instances are
    callable, so `predicate(request)` is equivalent.
    """

    def is_authorized(self, request):
        raise NotImplementedError

    def __call__(self, request=None):
        return self.is_authorized(request)


class AdminConstraint(AccessPredicate):
    """Authorize requests whose session user is an administrator.

    Reads `user_id` from the session, looks the user up in the directory
    and checks the user's `is_admin` flag. Only a boolean True grants
    access; a missing session key, unknown user, absent flag or directory
    failure all deny. The session is never written.
    """

    # Any one of these flags being True authorizes the user
    flags = ('is_admin',)

    def __init__(self, directory=None, session_key=None, flags=None):
        self.directory = directory
        self.session_key = session_key
        if flags is not None:
            self.flags = tuple(flags)

    def _session_key(self):
        if self.session_key is not None:
            return self.session_key
        if has_app_context():
            return current_app.config.get('ADMIN_SESSION_KEY', DEFAULT_SESSION_KEY)
        return DEFAULT_SESSION_KEY

    def _has_flag(self, user, flag):
        if isinstance(user, Mapping):
            value = user.get(flag, False)
        else:
            value = getattr(user, flag, False)
        return value is True

    def is_authorized(self, request=None):
        session = session_of(request)
        key = self._session_key()
        user_id = session.get(key) if session is not None else None
        if user_id is None or user_id == '':
            logger.debug('Denied: no %s in session', key)
            return False

        try:
            directory = self.directory if self.directory is not None else resolve_directory()
            user = directory.find_by_id(user_id)
        except DirectoryUnavailable as e:
            logger.warning('Denied: user directory unavailable (%s)', e)
            return False

        if user is None:
            logger.debug('Denied: no user with id %s', user_id)
            return False

        allowed = any(self._has_flag(user, flag) for flag in self.flags)
        if not allowed:
            logger.debug('Denied: user %s lacks %s', user_id, ' or '.join(self.flags))
        return allowed

    def __repr__(self):
        return f'<{self.__class__.__name__} flags={self.flags!r}>'


class SuperAdminConstraint(AdminConstraint):
    """Same check as AdminConstraint, against the `is_super_admin` flag."""

    flags = ('is_super_admin',)


class AdminAreaConstraint(AdminConstraint):
    """Admit administrators and super administrators alike."""

    flags = ('is_admin', 'is_super_admin')
