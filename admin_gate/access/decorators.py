"""
Route Guards

Invoke an access predicate before a view runs and render the denial.
Anything that goes wrong inside the predicate is a denial.
"""

import logging
from functools import wraps

from flask import abort, current_app, flash, jsonify, redirect, request

from admin_gate.access.predicate import AccessPredicate, AdminConstraint

logger = logging.getLogger(__name__)


def wants_json():
    """True when the caller is a script/XHR rather than a browser page."""
    if request.headers.get('X-Requested-With') == 'XMLHttpRequest':
        return True
    if request.is_json:
        return True
    accept = request.accept_mimetypes
    return accept.accept_json and not accept.accept_html


def check_access(predicate=None):
    """Evaluate `predicate` for the current request, failing closed."""
    if predicate is None:
        predicate = AdminConstraint()
    evaluate = getattr(predicate, 'is_authorized', predicate)
    try:
        allowed = evaluate(request)
    except Exception:
        logger.exception('Access predicate %r raised; denying %s', predicate, request.path)
        return False
    return allowed is True


def deny():
    """Build the response for a denied request."""
    if wants_json():
        return jsonify(error='Unauthorized'), 401

    target = current_app.config.get('ADMIN_DENIED_REDIRECT')
    if target:
        flash('Administrator access is required.', 'danger')
        return redirect(target)
    abort(403)


def is_predicate(obj):
    """True for AccessPredicate instances and duck-typed equivalents."""
    return isinstance(obj, AccessPredicate) or callable(getattr(obj, 'is_authorized', None))


def admin_required_by(predicate):
    """Decorator factory gating a view behind any predicate.

    `predicate` may be an AccessPredicate, an object exposing
    `is_authorized(request)`, or a plain callable taking the request.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if not check_access(predicate):
                logger.debug('Denied %s %s', request.method, request.path)
                return deny()
            return f(*args, **kwargs)
        return wrapper
    return decorator


def admin_required(predicate=None):
    """Decorator to ensure the request passes an access predicate.

    Usable bare (`@admin_required`, which checks AdminConstraint) or with
    a predicate object (`@admin_required(SuperAdminConstraint())`). Plain
    functions are taken as the view being decorated; gate on a plain
    callable with `admin_required_by`.
    """
    if predicate is None:
        return admin_required_by(AdminConstraint())
    if is_predicate(predicate):
        return admin_required_by(predicate)
    if callable(predicate):
        # Used bare: `predicate` is the view function
        return admin_required_by(AdminConstraint())(predicate)
    raise TypeError(f'admin_required expects an access predicate, got {predicate!r}')


def guard_blueprint(blueprint, predicate=None):
    """Gate every route of `blueprint` behind `predicate`."""
    gate = predicate if predicate is not None else AdminConstraint()

    @blueprint.before_request
    def require_access():
        if not check_access(gate):
            logger.debug('Denied %s %s', request.method, request.path)
            return deny()

    return blueprint
