"""
Flask Extensions

The session only carries a `user_id`; admin status is always resolved
from the user directory, never cached in the session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance (backs the user directory)
db = SQLAlchemy()

# Login manager, used only to expose `current_user` to views
login_manager = LoginManager()
