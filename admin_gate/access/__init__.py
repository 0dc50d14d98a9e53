"""
Access Control Package

Session-based admin gate: predicates, the user directory they consult,
and the route guards that invoke them.
"""

from admin_gate.access.exceptions import AccessError, DirectoryUnavailable
from admin_gate.access.directory import UserDirectory, SQLAlchemyUserDirectory
from admin_gate.access.predicate import AccessPredicate, AdminConstraint, AdminAreaConstraint, SuperAdminConstraint
from admin_gate.access.decorators import admin_required, admin_required_by, guard_blueprint, check_access, deny

__all__ = [
    'AccessError',
    'DirectoryUnavailable',
    'UserDirectory',
    'SQLAlchemyUserDirectory',
    'AccessPredicate',
    'AdminConstraint',
    'AdminAreaConstraint',
    'SuperAdminConstraint',
    'admin_required',
    'admin_required_by',
    'guard_blueprint',
    'check_access',
    'deny',
]
