"""
Access control exceptions
"""


class AccessError(Exception):
    """Base class for admin gate errors."""


class DirectoryUnavailable(AccessError):
    """The user directory could not answer a lookup.

    Raised by directories when the backing store fails. Predicates treat it
    as a denial, never as a reason to retry.
    """
