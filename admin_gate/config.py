"""
Configuration settings for the admin gate application
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""
    
    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration (user directory)
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'admin_gate.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Session cookie (signed, client-side)
    SESSION_COOKIE_NAME = '_admin_gate_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', '').lower() in ('1', 'true', 'yes')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=4)
    
    # Admin gate settings
    ADMIN_SESSION_KEY = 'user_id'
    ADMIN_DENIED_REDIRECT = os.environ.get('ADMIN_DENIED_REDIRECT') or None
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_DENIED_REDIRECT = None
    LOG_LEVEL = 'DEBUG'
