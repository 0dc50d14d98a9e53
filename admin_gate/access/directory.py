"""
User Directory

Lookup-by-id collaborator consulted by access predicates. The directory
only reads; it never creates, updates or deletes users.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from admin_gate.access.exceptions import DirectoryUnavailable
from admin_gate.extensions import db
from admin_gate.models import User

logger = logging.getLogger(__name__)


class UserDirectory:
    """Interface for user directories.

    Implementations return the user with the given id, or None when no such
    user exists. Backend failures are reported as DirectoryUnavailable.
    """

    def find_by_id(self, user_id):
        raise NotImplementedError


def coerce_user_id(user_id):
    """Return `user_id` as an int primary key, or None if it is not one.

    Only ints and strings of ASCII digits qualify; floats are never
    truncated onto a neighbouring id.
    """
    if isinstance(user_id, bool):
        return None
    if isinstance(user_id, int):
        return user_id
    if isinstance(user_id, str) and user_id.isascii() and user_id.isdigit():
        return int(user_id)
    return None


class SQLAlchemyUserDirectory(UserDirectory):
    """User directory backed by the Flask-SQLAlchemy `users` table."""

    def __init__(self, session=None):
        # None means "use db.session of the active app context"
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def find_by_id(self, user_id):
        pk = coerce_user_id(user_id)
        if pk is None:
            logger.debug('Ignoring non-integer user id %r', user_id)
            return None

        session = self.session
        try:
            return session.get(User, pk)
        except SQLAlchemyError as e:
            session.rollback()
            logger.debug('User lookup failed for id %s: %s', pk, e)
            raise DirectoryUnavailable(f'user lookup failed for id {pk}') from e

    def __repr__(self):
        return f'<{self.__class__.__name__}>'
