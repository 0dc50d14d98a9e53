import logging
from types import SimpleNamespace

import pytest

from admin_gate.access import (
    AccessPredicate,
    AdminAreaConstraint,
    AdminConstraint,
    DirectoryUnavailable,
    SuperAdminConstraint,
)


class FakeDirectory:
    def __init__(self, users=None, error=None):
        self.users = users or {}
        self.error = error
        self.calls = []

    def find_by_id(self, user_id):
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return self.users.get(user_id)


class FakeRequest:
    def __init__(self, session):
        self.session = session


def test_empty_session_denied_without_lookup():
    directory = FakeDirectory({7: SimpleNamespace(is_admin=True)})
    gate = AdminConstraint(directory=directory)

    assert gate.is_authorized(FakeRequest({})) is False
    assert directory.calls == []


@pytest.mark.parametrize('user_id', [None, ''])
def test_blank_user_id_denied_without_lookup(user_id):
    directory = FakeDirectory()
    gate = AdminConstraint(directory=directory)

    assert gate.is_authorized(FakeRequest({'user_id': user_id})) is False
    assert directory.calls == []


def test_unknown_user_denied():
    directory = FakeDirectory()
    gate = AdminConstraint(directory=directory)

    assert gate.is_authorized(FakeRequest({'user_id': 42})) is False
    assert directory.calls == [42]


def test_non_admin_denied():
    directory = FakeDirectory({7: SimpleNamespace(is_admin=False)})
    assert AdminConstraint(directory=directory).is_authorized(FakeRequest({'user_id': 7})) is False


def test_admin_authorized():
    directory = FakeDirectory({7: SimpleNamespace(is_admin=True)})
    assert AdminConstraint(directory=directory).is_authorized(FakeRequest({'user_id': 7})) is True


def test_missing_admin_flag_denied():
    directory = FakeDirectory({7: SimpleNamespace(name='no flag')})
    assert AdminConstraint(directory=directory).is_authorized(FakeRequest({'user_id': 7})) is False


@pytest.mark.parametrize('value', [1, 'yes', 'true', object()])
def test_truthy_non_boolean_flag_denied(value):
    directory = FakeDirectory({7: SimpleNamespace(is_admin=value)})
    assert AdminConstraint(directory=directory).is_authorized(FakeRequest({'user_id': 7})) is False


def test_mapping_users_are_read_by_key():
    directory = FakeDirectory({7: {'is_admin': True}, 8: {'email': 'x@example.com'}})
    gate = AdminConstraint(directory=directory)

    assert gate.is_authorized(FakeRequest({'user_id': 7})) is True
    assert gate.is_authorized(FakeRequest({'user_id': 8})) is False


def test_directory_failure_denied(caplog):
    directory = FakeDirectory(error=DirectoryUnavailable('database is down'))
    gate = AdminConstraint(directory=directory)

    with caplog.at_level(logging.WARNING, logger='admin_gate.access.predicate'):
        assert gate.is_authorized(FakeRequest({'user_id': 7})) is False

    assert directory.calls == [7]
    assert 'database is down' in caplog.text


def test_no_directory_outside_app_context_denied():
    assert AdminConstraint().is_authorized(FakeRequest({'user_id': 7})) is False


def test_repeated_evaluation_is_stable():
    directory = FakeDirectory({7: SimpleNamespace(is_admin=True), 8: SimpleNamespace(is_admin=False)})
    gate = AdminConstraint(directory=directory)

    assert [gate(FakeRequest({'user_id': 7})) for _ in range(3)] == [True, True, True]
    assert [gate(FakeRequest({'user_id': 8})) for _ in range(3)] == [False, False, False]


def test_session_is_not_modified():
    session = {'user_id': 7, 'other': 'value'}
    directory = FakeDirectory({7: SimpleNamespace(is_admin=True)})

    AdminConstraint(directory=directory).is_authorized(FakeRequest(session))

    assert session == {'user_id': 7, 'other': 'value'}


def test_call_is_is_authorized():
    directory = FakeDirectory({7: SimpleNamespace(is_admin=True)})
    gate = AdminConstraint(directory=directory)
    request = FakeRequest({'user_id': 7})

    assert isinstance(gate, AccessPredicate)
    assert gate(request) == gate.is_authorized(request)


def test_custom_session_key():
    directory = FakeDirectory({7: SimpleNamespace(is_admin=True)})
    gate = AdminConstraint(directory=directory, session_key='uid')

    assert gate.is_authorized(FakeRequest({'uid': 7})) is True
    assert gate.is_authorized(FakeRequest({'user_id': 7})) is False


def test_super_admin_constraint_reads_super_admin_flag():
    directory = FakeDirectory({
        1: SimpleNamespace(is_admin=True, is_super_admin=False),
        2: SimpleNamespace(is_admin=False, is_super_admin=True),
    })
    gate = SuperAdminConstraint(directory=directory)

    assert gate.is_authorized(FakeRequest({'user_id': 1})) is False
    assert gate.is_authorized(FakeRequest({'user_id': 2})) is True


def test_uses_flask_session_and_app_directory(app, make_user):
    admin = make_user(email='admin@example.com', role='admin')
    user = make_user(email='plain@example.com')
    gate = AdminConstraint()

    with app.test_request_context('/admin/'):
        from flask import request, session
        session['user_id'] = admin.id
        assert gate(request) is True
        session['user_id'] = user.id
        assert gate(request) is False


def test_admin_area_constraint_admits_both_admin_roles():
    directory = FakeDirectory({
        1: SimpleNamespace(is_admin=True, is_super_admin=False),
        2: SimpleNamespace(is_admin=False, is_super_admin=True),
        3: SimpleNamespace(is_admin=False, is_super_admin=False),
        4: {'is_super_admin': 1},
    })
    gate = AdminAreaConstraint(directory=directory)

    assert [gate(FakeRequest({'user_id': uid})) for uid in (1, 2, 3, 4)] == [True, True, False, False]
