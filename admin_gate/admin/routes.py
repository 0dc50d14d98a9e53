"""
Admin Routes
"""

from flask import jsonify
from flask_login import current_user
from sqlalchemy import func

from admin_gate.access import admin_required, AdminAreaConstraint, SuperAdminConstraint
from admin_gate.admin import admin_bp
from admin_gate.extensions import db
from admin_gate.models import User, ROLES


@admin_bp.route('/')
@admin_required(AdminAreaConstraint())
def admin_overview():
    """Admin overview: user counts per role and who is looking."""
    rows = db.session.query(User.role, func.count(User.id)).group_by(User.role).all()
    counts = dict(rows)
    by_role = {role: counts.get(role, 0) for role in ROLES}

    viewer = None
    if current_user.is_authenticated:
        viewer = {'id': current_user.id, 'email': current_user.email}

    return jsonify(users=by_role, total_users=sum(counts.values()), current_user=viewer)


@admin_bp.route('/users')
@admin_required(AdminAreaConstraint())
def list_users():
    """List users in the directory."""
    users = User.query.order_by(User.id).all()
    return jsonify([u.to_dict() for u in users])


@admin_bp.route('/super')
@admin_required(SuperAdminConstraint())
def super_admin_only():
    return jsonify(ok=True)
