"""
Admin Blueprint

Each route is gated individually with `admin_required`; admin status is
resolved from the user directory on every request.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from admin_gate.admin import routes  # noqa: E402, F401
