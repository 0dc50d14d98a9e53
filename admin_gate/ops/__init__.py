"""
Ops Blueprint

Operations console. The whole blueprint sits behind the admin gate, so
every route it registers is restricted without per-view decorators.
"""

from flask import Blueprint

from admin_gate.access import guard_blueprint

ops_bp = Blueprint('ops', __name__)
guard_blueprint(ops_bp)

from admin_gate.ops import routes  # noqa: E402, F401
