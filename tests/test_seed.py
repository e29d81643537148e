"""
Tests for the bootstrap admin, demo data and the database CLI commands.
"""
from cadenza.models import db, Blog, Company, Person, User
from cadenza.services.seed import ensure_admin_user, reset_database, seed_database


class TestSeed:

    def test_seed_fills_empty_tables(self, app):
        counts = seed_database()
        assert counts == {'companies': 5, 'people': 5, 'blogs': 5}
        assert Company.query.filter_by(name='Quantum Leader').one().traction_score == 85
        assert Person.query.filter_by(name='David Kim').one().company == 'NextGen Robotics'

    def test_seed_is_idempotent(self, app):
        seed_database()
        assert seed_database() == {'companies': 0, 'people': 0, 'blogs': 0}
        assert Company.query.count() == 5
        assert User.query.count() == 1

    def test_seed_skips_tables_with_data(self, app, companies):
        counts = seed_database()
        assert counts['companies'] == 0
        assert counts['people'] == 5

    def test_blogs_belong_to_admin(self, app):
        seed_database()
        admin = User.query.filter_by(email='admin@gmail.com').one()
        assert {blog.author_id for blog in Blog.query.all()} == {admin.id}
        assert Blog.query.filter_by(published=True).count() == 4
        first = Blog.query.filter_by(title='The Future of AI in Startup Ecosystems').one()
        assert first.category == 'Technology'
        assert first.publish_date.date().isoformat() == '2023-10-15'

    def test_admin_can_log_in(self, app, client):
        seed_database()
        resp = client.post('/api/auth/login', json={'email': 'admin@gmail.com', 'password': 'admin123'})
        assert resp.status_code == 200
        assert resp.get_json()['user']['is_admin'] is True
        assert resp.get_json()['user']['is_cadenza'] is True

    def test_ensure_admin_promotes_existing_account(self, app, make_user):
        existing = make_user(email='admin@gmail.com', password='keep-me')
        admin = ensure_admin_user()
        assert admin.id == existing.id
        assert admin.is_admin and admin.is_cadenza
        assert admin.check_password('keep-me')

    def test_reset_database(self, app, make_user):
        make_user(email='temp@gmail.com')
        reset_database()
        assert User.query.filter_by(email='temp@gmail.com').first() is None
        assert Company.query.count() == 5


class TestCommands:

    def test_init_db(self, app):
        result = app.test_cli_runner().invoke(args=['init-db'])
        assert result.exit_code == 0
        assert 'Initialized' in result.output
        assert User.query.count() == 0

    def test_seed_db(self, app):
        result = app.test_cli_runner().invoke(args=['seed-db'])
        assert result.exit_code == 0
        assert 'companies: 5 rows added' in result.output

    def test_reset_db_needs_confirmation(self, app, make_user):
        make_user(email='temp@gmail.com')
        result = app.test_cli_runner().invoke(args=['reset-db'], input='n\n')
        assert result.exit_code != 0
        db.session.rollback()
        assert User.query.filter_by(email='temp@gmail.com').count() == 1

    def test_reset_db_with_yes(self, app):
        result = app.test_cli_runner().invoke(args=['reset-db', '--yes'])
        assert result.exit_code == 0
        assert Company.query.count() == 5

    def test_create_admin(self, app):
        result = app.test_cli_runner().invoke(args=['create-admin'])
        assert result.exit_code == 0
        assert 'admin@gmail.com' in result.output
