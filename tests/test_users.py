"""
Tests for /api/users: own profile, role flags and admin user management.
"""
from cadenza.models import db, Blog, User


class TestProfile:

    def test_me(self, client, member, member_headers):
        body = client.get('/api/users/me', headers=member_headers).get_json()
        assert body == {
            'id': member.id,
            'full_name': 'Member User',
            'email': 'member@gmail.com',
            'is_cadenza': False,
            'is_admin': False,
            'profile_picture': None,
        }

    def test_all_is_a_plain_list_without_hashes(self, client, member, admin_headers):
        body = client.get('/api/users/all', headers=admin_headers).get_json()
        assert isinstance(body, list)
        assert {user['email'] for user in body} == {'member@gmail.com', 'boss@gmail.com'}
        assert all('password_hash' not in user for user in body)


class TestRoleFlags:

    def test_grant_cadenza(self, client, member, admin_headers):
        resp = client.put(f'/api/users/{member.id}/cadenza-status', headers=admin_headers,
                          json={'is_cadenza': True})
        assert resp.status_code == 200
        assert resp.get_json()['is_cadenza'] is True
        assert db.session.get(User, member.id).is_cadenza is True

    def test_grant_admin(self, client, member, admin_headers):
        resp = client.put(f'/api/users/{member.id}/admin-status', headers=admin_headers,
                          json={'is_admin': True})
        assert resp.get_json()['is_admin'] is True

    def test_flags_must_be_boolean(self, client, member, admin_headers):
        for path, field in (('admin-status', 'is_admin'), ('cadenza-status', 'is_cadenza')):
            for value in ('true', 1, None):
                resp = client.put(f'/api/users/{member.id}/{path}', headers=admin_headers,
                                  json={field: value})
                assert resp.status_code == 400
            resp = client.put(f'/api/users/{member.id}/{path}', headers=admin_headers, json={})
            assert resp.status_code == 400

    def test_flags_on_missing_user(self, client, admin_headers):
        resp = client.put('/api/users/999/admin-status', headers=admin_headers, json={'is_admin': True})
        assert resp.status_code == 404
        resp = client.put('/api/users/999/cadenza-status', headers=admin_headers, json={'is_cadenza': True})
        assert resp.status_code == 404

    def test_admin_cannot_demote_self(self, client, admin, admin_headers):
        resp = client.put(f'/api/users/{admin.id}/admin-status', headers=admin_headers,
                          json={'is_admin': False})
        assert resp.status_code == 400
        assert db.session.get(User, admin.id).is_admin is True

    def test_flags_require_admin(self, client, member, member_headers):
        resp = client.put(f'/api/users/{member.id}/cadenza-status', headers=member_headers,
                          json={'is_cadenza': True})
        assert resp.status_code == 403


class TestUserAdmin:

    def test_list_and_search(self, client, member, admin_headers):
        body = client.get('/api/users?search=MEMBER', headers=admin_headers).get_json()
        assert [user['email'] for user in body['data']] == ['member@gmail.com']
        assert body['pagination']['total'] == 1

    def test_get(self, client, member, admin_headers):
        resp = client.get(f'/api/users/{member.id}', headers=admin_headers)
        assert resp.get_json()['data']['email'] == member.email
        assert client.get('/api/users/999', headers=admin_headers).status_code == 404

    def test_create_without_password(self, client, admin_headers):
        resp = client.post('/api/users', headers=admin_headers,
                           json={'full_name': 'New Hire', 'email': 'NewHire@gmail.com'})
        assert resp.status_code == 201
        data = resp.get_json()['data']
        assert data['email'] == 'newhire@gmail.com'
        assert data['auth_provider'] == 'local'
        assert 'password_hash' not in data
        resp = client.post('/api/auth/login', json={'email': 'newhire@gmail.com', 'password': 'anything'})
        assert resp.status_code == 401

    def test_create_with_password_can_log_in(self, client, admin_headers):
        client.post('/api/users', headers=admin_headers, json={
            'full_name': 'New Hire', 'email': 'newhire@gmail.com', 'password': 'welcome1', 'is_cadenza': True,
        })
        resp = client.post('/api/auth/login', json={'email': 'newhire@gmail.com', 'password': 'welcome1'})
        assert resp.status_code == 200
        assert resp.get_json()['user']['is_cadenza'] is True

    def test_create_rejects_other_domain(self, client, admin_headers):
        resp = client.post('/api/users', headers=admin_headers,
                           json={'full_name': 'Outsider', 'email': 'outsider@example.com'})
        assert resp.status_code == 400

    def test_create_rejects_duplicate(self, client, member, admin_headers):
        resp = client.post('/api/users', headers=admin_headers,
                           json={'full_name': 'Copy', 'email': member.email})
        assert resp.status_code == 400

    def test_create_requires_name_and_email(self, client, admin_headers):
        assert client.post('/api/users', headers=admin_headers, json={'email': 'a@gmail.com'}).status_code == 400

    def test_update_rehashes_password(self, client, member, admin_headers):
        resp = client.put(f'/api/users/{member.id}', headers=admin_headers,
                          json={'password': 'rotated!', 'full_name': 'Renamed Member'})
        assert resp.status_code == 200
        assert resp.get_json()['data']['full_name'] == 'Renamed Member'
        assert resp.get_json()['data']['email'] == member.email
        old = client.post('/api/auth/login', json={'email': member.email, 'password': 'secret123'})
        new = client.post('/api/auth/login', json={'email': member.email, 'password': 'rotated!'})
        assert old.status_code == 401
        assert new.status_code == 200

    def test_update_with_non_boolean_flag(self, client, member, admin_headers):
        resp = client.put(f'/api/users/{member.id}', headers=admin_headers,
                          json={'is_admin': 'yes', 'full_name': 'Changed'})
        assert resp.status_code == 400
        stored = db.session.get(User, member.id)
        assert stored.is_admin is False
        assert stored.full_name == 'Member User'

    def test_update_with_non_string_password(self, client, member, admin_headers):
        resp = client.put(f'/api/users/{member.id}', headers=admin_headers,
                          json={'password': 12345, 'full_name': 'Changed'})
        assert resp.status_code == 400
        assert db.session.get(User, member.id).full_name == 'Member User'
        resp = client.post('/api/auth/login', json={'email': member.email, 'password': 'secret123'})
        assert resp.status_code == 200

    def test_create_with_non_string_email(self, client, admin_headers):
        resp = client.post('/api/users', headers=admin_headers, json={'full_name': 'Num', 'email': 5})
        assert resp.status_code == 400
        assert User.query.count() == 1

    def test_update_to_taken_email(self, client, member, admin, admin_headers):
        resp = client.put(f'/api/users/{member.id}', headers=admin_headers, json={'email': admin.email})
        assert resp.status_code == 400

    def test_delete(self, client, member, admin_headers):
        member_id = member.id
        assert client.delete(f'/api/users/{member_id}', headers=admin_headers).status_code == 200
        assert client.get(f'/api/users/{member_id}', headers=admin_headers).status_code == 404

    def test_cannot_delete_self(self, client, admin, admin_headers):
        resp = client.delete(f'/api/users/{admin.id}', headers=admin_headers)
        assert resp.status_code == 400
        assert db.session.get(User, admin.id) is not None

    def test_cannot_delete_blog_author(self, client, make_user, admin_headers):
        author = make_user(email='writer@gmail.com')
        db.session.add(Blog(title='t', content='c', summary='s', author_id=author.id))
        db.session.commit()
        resp = client.delete(f'/api/users/{author.id}', headers=admin_headers)
        assert resp.status_code == 400

    def test_management_requires_admin(self, client, member, member_headers):
        assert client.get('/api/users', headers=member_headers).status_code == 403
        assert client.post('/api/users', headers=member_headers, json={}).status_code == 403
        assert client.delete(f'/api/users/{member.id}', headers=member_headers).status_code == 403
