"""Shared fixtures: an app on TestingConfig with a fresh in-memory database per test."""
import pytest

from cadenza import create_app
from cadenza.auth import create_access_token
from cadenza.models import db, User, Company, Person
from cadenza.services import sample_data


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Factory for persisted users; a password makes it a local account."""
    def _make_user(email='member@gmail.com', password='secret123', full_name='Member User',
                   is_admin=False, is_cadenza=False, auth_provider='local'):
        user = User(
            full_name=full_name,
            email=email,
            is_admin=is_admin,
            is_cadenza=is_cadenza,
            auth_provider=auth_provider,
        )
        if password:
            user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


def _bearer(user_or_id):
    user_id = getattr(user_or_id, 'id', user_or_id)
    return {'Authorization': f'Bearer {create_access_token(user_id)}'}


@pytest.fixture
def bearer(app):
    """Authorization header for a user, or for a bare user id."""
    return _bearer


@pytest.fixture
def member(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(email='boss@gmail.com', full_name='Boss Admin', is_admin=True, is_cadenza=True)


@pytest.fixture
def member_headers(member):
    return _bearer(member)


@pytest.fixture
def admin_headers(admin):
    return _bearer(admin)


@pytest.fixture
def companies(app):
    rows = [Company(**row) for row in sample_data.COMPANIES]
    db.session.add_all(rows)
    db.session.commit()
    return rows


@pytest.fixture
def people(app):
    rows = [Person(**row) for row in sample_data.PEOPLE]
    db.session.add_all(rows)
    db.session.commit()
    return rows
