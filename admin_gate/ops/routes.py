"""
Ops Routes
"""

from flask import current_app, jsonify

from admin_gate.extensions import db
from admin_gate.models import User
from admin_gate.ops import ops_bp


@ops_bp.route('/')
def ops_status():
    """Runtime status for operators."""
    return jsonify(
        app=current_app.name,
        database=db.engine.dialect.name,
        users=User.query.count(),
        session_lifetime_seconds=int(current_app.permanent_session_lifetime.total_seconds()),
    )
