import pytest

from admin_gate import create_app
from admin_gate.config import TestConfig
from admin_gate.extensions import db
from admin_gate.models import User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _make(email='user@example.com', name='Test User', role='user'):
        user = User(email=email, name=name, role=role)
        db.session.add(user)
        db.session.commit()
        return user
    return _make


@pytest.fixture()
def login_as(client):
    """Put a user id into the client's session, the way a login would."""
    def _login(user_id):
        with client.session_transaction() as sess:
            sess['user_id'] = user_id
    return _login
