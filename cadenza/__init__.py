"""
Cadenza directory backend - Application Factory
"""
import os

import click
from flask import Flask, current_app, request
from dotenv import load_dotenv

from cadenza.auth.oauth import register_providers
from cadenza.errors import register_error_handlers
from cadenza.extensions import db, babel, cors
from cadenza.logging_config import configure_logging
from cadenza.routes import register_blueprints
from cadenza.settings import config


def get_locale():
    """Determine the best locale for the user."""
    return request.accept_languages.best_match(current_app.config['LANGUAGES'])


def create_app(config_name=None):
    """Application Factory."""
    load_dotenv()

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    if not app.testing:
        configure_logging(app.config['LOG_LEVEL'], app.config['LOG_FORMAT'])

    # Initialize extensions
    db.init_app(app)
    babel.init_app(app, locale_selector=get_locale)
    cors.init_app(
        app,
        resources={r'/api/*': {}, r'/images/*': {}},
        origins=[app.config['FRONTEND_URL']],
        supports_credentials=True,
    )
    register_providers(app)

    register_blueprints(app)
    register_error_handlers(app)

    # CLI Commands
    register_cli_commands(app)

    if app.config['AUTO_INIT_DB']:
        from cadenza.services.seed import init_database
        with app.app_context():
            init_database(seed=True)
        app.logger.info("Database tables ensured and seeded")

    return app


def register_cli_commands(app):
    """Register CLI commands."""

    @app.cli.command("init-db")
    def init_db_command():
        """Creates database tables."""
        from cadenza.services.seed import init_database
        init_database(seed=False)
        print("Initialized the database.")

    @app.cli.command("seed-db")
    def seed_db_command():
        """Creates the admin account and loads demo data into empty tables."""
        from cadenza.services.seed import init_database
        counts = init_database(seed=True)
        for table, count in counts.items():
            print(f"{table}: {count} rows added")

    @app.cli.command("reset-db")
    @click.confirmation_option(prompt="This drops every table. Continue?")
    def reset_db_command():
        """Drops and recreates all tables, then reseeds them."""
        from cadenza.services.seed import reset_database
        reset_database()
        print("Database reset.")

    @app.cli.command("create-admin")
    def create_admin_command():
        """Creates or promotes the configured admin account."""
        from cadenza.services.seed import ensure_admin_user
        admin = ensure_admin_user()
        print(f"Admin account ready: {admin.email}")
