"""
User Model
"""

from datetime import datetime

from flask_login import UserMixin

from admin_gate.extensions import db

ROLES = ('user', 'admin', 'super_admin')


class User(UserMixin, db.Model):
    """User record as stored in the user directory"""
    __tablename__ = 'users'
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    # Role-based access control; only 'admin' passes the admin gate
    role = db.Column(db.String(20), default='user', nullable=False, index=True)
    last_login_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    @property
    def is_admin(self):
        return self.role == 'admin'
    
    @property
    def is_super_admin(self):
        return self.role == 'super_admin'
    
    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role,
        }
    
    def __repr__(self):
        return f'<User {self.email} ({self.role})>'
