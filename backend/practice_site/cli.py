import click
from flask import current_app
from practice_site.extensions import db
from practice_site.models.admin_user import AdminUser
from practice_site.utils.transaction import transactional


def register_cli(app):
    @app.cli.command("create-admin")
    @click.option("--username", default=None, help="Defaults to ADMIN_USERNAME.")
    @click.option("--password", default=None, help="Defaults to ADMIN_PASSWORD.")
    def create_admin(username, password):
        """Create the admin user, or reset its password if it exists."""
        username = username or current_app.config["ADMIN_USERNAME"]
        password = password or current_app.config["ADMIN_PASSWORD"]

        if not password:
            raise click.UsageError("Provide --password or set ADMIN_PASSWORD")

        with transactional():
            admin = AdminUser.query.filter_by(username=username).first()
            created = admin is None
            if created:
                admin = AdminUser(username=username)
                db.session.add(admin)
            admin.set_password(password)

        click.echo(f"Admin '{username}' {'created' if created else 'updated'}.")

    @app.cli.command("init-db")
    def init_db():
        """Create tables directly (use `flask db upgrade` when migrations exist)."""
        db.create_all()
        click.echo("Database tables created.")
