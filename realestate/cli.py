"""
Maintenance commands, available as ``flask <command>``.
"""

import click

from realestate.extensions import db
from realestate.models import Property


def register_commands(app):

    @app.cli.command('purge-sessions')
    def purge_sessions():
        """Delete expired admin sessions."""
        from realestate.services.auth import purge_expired_sessions
        count = purge_expired_sessions()
        click.echo(f'Removed {count} expired session(s)')

    @app.cli.command('prune-orphans')
    @click.option('--dry-run', is_flag=True, help='List orphaned images without deleting them.')
    def prune_orphans(dry_run):
        """Delete stored images that no listing refers to."""
        from realestate.errors import FileNotFound
        files = app.extensions['file_store']
        referenced = {path for (path,) in db.session.query(Property.image_path)}
        orphans = [key for key in files.keys() if key not in referenced]

        for key in orphans:
            if not dry_run:
                try:
                    files.delete(key)
                except FileNotFound:
                    continue
            click.echo(key)

        verb = 'Found' if dry_run else 'Removed'
        click.echo(f'{verb} {len(orphans)} orphaned image(s)')
