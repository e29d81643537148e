"""Seed service - bootstrap admin account and demo directory data."""
import logging

from flask import current_app

from cadenza.models import db, User, Company, Person, Blog
from cadenza.services import sample_data

logger = logging.getLogger(__name__)


def ensure_admin_user():
    """Create the configured admin account, or promote it if it already exists."""
    config = current_app.config
    email = config['ADMIN_EMAIL'].strip().lower()

    admin = User.query.filter_by(email=email).first()
    if admin is None:
        admin = User(
            full_name=config['ADMIN_FULL_NAME'],
            email=email,
            auth_provider='local',
            is_admin=True,
            is_cadenza=True,
        )
        admin.set_password(config['ADMIN_PASSWORD'])
        db.session.add(admin)
        logger.info("Created admin user %s", email)
    elif not admin.is_admin or not admin.is_cadenza:
        admin.is_admin = True
        admin.is_cadenza = True
        logger.info("Promoted %s to admin", email)

    db.session.commit()
    return admin


def _seed_table(model, rows, **extra):
    if model.query.count() > 0:
        logger.info("%s already has data, skipping", model.__tablename__)
        return 0
    for row in rows:
        db.session.add(model(**dict(row, **extra)))
    db.session.commit()
    logger.info("Seeded %d rows into %s", len(rows), model.__tablename__)
    return len(rows)


def seed_database():
    """
    Load the demo records.

    Each table is filled only while it is empty, so running this
    again never duplicates rows. Blog posts are authored by the admin.
    Returns the number of rows inserted per table.
    """
    admin = ensure_admin_user()
    return {
        'companies': _seed_table(Company, sample_data.COMPANIES),
        'people': _seed_table(Person, sample_data.PEOPLE),
        'blogs': _seed_table(Blog, sample_data.BLOGS, author_id=admin.id),
    }


def init_database(seed=True):
    """Create missing tables, never dropping existing ones."""
    db.create_all()
    if seed:
        return seed_database()
    return {}


def reset_database():
    """Drop and recreate every table, then reseed."""
    db.drop_all()
    return init_database(seed=True)
