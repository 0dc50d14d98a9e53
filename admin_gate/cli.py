"""
CLI Commands

Development helpers for provisioning user directory rows, registered on
the Flask CLI (`flask create-user ...`).
"""

import logging

import click
from flask.cli import with_appcontext

from admin_gate.extensions import db
from admin_gate.models import User, ROLES

logger = logging.getLogger(__name__)


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create database tables."""
    db.create_all()
    click.echo('Initialized the database.')


@click.command('create-user')
@click.argument('email')
@click.argument('name')
@click.option('--role', type=click.Choice(ROLES), default='user', show_default=True)
@with_appcontext
def create_user_command(email, name, role):
    """Create a user with the given role."""
    email = email.strip().lower()
    if User.query.filter_by(email=email).first():
        raise click.ClickException(f'User {email} already exists.')

    user = User(email=email, name=name, role=role)
    db.session.add(user)
    db.session.commit()
    logger.info('Created user %s with role %s', user.id, role)
    click.echo(f'Created user {user.id} <{email}> ({role})')


@click.command('set-role')
@click.argument('email')
@click.argument('role', type=click.Choice(ROLES))
@with_appcontext
def set_role_command(email, role):
    """Change the role of an existing user."""
    user = User.query.filter_by(email=email.strip().lower()).first()
    if user is None:
        raise click.ClickException(f'No user with email {email}.')

    previous = user.role
    user.role = role
    db.session.commit()
    logger.info('Changed role of user %s from %s to %s', user.id, previous, role)
    click.echo(f'{user.email}: {previous} -> {role}')


def register_commands(app):
    for command in (init_db_command, create_user_command, set_role_command):
        app.cli.add_command(command)
