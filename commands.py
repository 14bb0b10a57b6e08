"""
Trip setup commands.

    flask --app app:create_app trip init-db
    flask --app app:create_app trip add-user anna --password secret
    flask --app app:create_app trip add-meal "Breakfast" --at 2025-05-30T08:00
"""

import click
from flask import current_app
from flask.cli import AppGroup

from constants import MAX_LENGTHS
from services import TripError
from utils.sanitizer import sanitize_name, sanitize_url

trip_group = AppGroup('trip', help='Trip setup commands (database, users, meals)')


@trip_group.command('init-db')
def init_db_command():
    """Create all tables that do not exist yet."""
    from app import init_db
    init_db(current_app)
    click.secho('Database tables created', fg='green')


@trip_group.command('add-user')
@click.argument('username')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--admin', is_flag=True, default=False, help='Allow this user to add other users')
def add_user_command(username, password, admin):
    """Create a participant account."""
    try:
        row = current_app.extensions['trip'].identity.add_user(username, password, is_admin=admin)
    except TripError as e:
        raise click.ClickException(e.message)
    click.secho(f'Added user {row["username"]} (id {row["id"]})', fg='green')


@trip_group.command('add-meal')
@click.argument('name')
@click.option('--at', 'scheduled', default=None, type=click.DateTime(formats=['%Y-%m-%dT%H:%M', '%Y-%m-%d %H:%M']),
              help='Scheduled time, e.g. 2025-05-30T08:00')
@click.option('--link', default=None, help='External menu URL (ingredients are then not tracked)')
def add_meal_command(name, scheduled, link):
    """Add a meal to the trip's catalog."""
    name = sanitize_name(name, max_length=MAX_LENGTHS['meal_name'])
    if not name:
        raise click.ClickException('Meal name is required')

    external_link = None
    if link:
        external_link = sanitize_url(link)
        if not external_link:
            raise click.ClickException(f'Not a valid http(s) link: {link}')

    try:
        row = current_app.extensions['trip'].store.insert('meals', {
            'name': name,
            'scheduled_time': scheduled,
            'external_link': external_link,
        })
    except TripError as e:
        raise click.ClickException(e.message)

    kind = 'external menu' if external_link else 'tracked'
    click.secho(f'Added meal {row["name"]} (id {row["id"]}, {kind})', fg='green')
