"""
Models Package

Exports all models for easy importing.
"""

from admin_gate.models.user import User, ROLES

__all__ = ['User', 'ROLES']
