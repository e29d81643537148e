"""
Tests for the people directory.
"""


class TestListPeople:

    def test_list(self, client, people):
        body = client.get('/api/people').get_json()
        assert body['pagination']['total'] == 5
        names = [p['name'] for p in body['data']]
        assert names == sorted(names)

    def test_search_matches_company(self, client, people):
        body = client.get('/api/people?search=nextgen').get_json()
        assert [p['name'] for p in body['data']] == ['David Kim']

    def test_search_matches_position(self, client, people):
        body = client.get('/api/people?search=managing partner').get_json()
        assert [p['name'] for p in body['data']] == ['Elena Rodriguez']

    def test_search_does_not_touch_other_columns(self, client, people):
        # `skills` is not a search column
        body = client.get('/api/people?search=Autonomous Navigation').get_json()
        assert body['data'] == []

    def test_pagination(self, client, people):
        body = client.get('/api/people?limit=2&page=3').get_json()
        assert len(body['data']) == 1
        assert body['pagination']['totalPages'] == 3


class TestPersonCrud:

    def test_create_and_get(self, client):
        resp = client.post('/api/people', json={
            'name': 'Grace Hopper',
            'category': 'Engineering',
            'location': 'Arlington, USA',
            'description': 'Compiler pioneer.',
            'company': 'US Navy',
            'position': 'Rear Admiral',
        })
        assert resp.status_code == 201
        person_id = resp.get_json()['data']['id']
        data = client.get(f'/api/people/{person_id}').get_json()['data']
        assert data['company'] == 'US Navy'

    def test_create_missing_required_field(self, client):
        assert client.post('/api/people', json={'name': 'Nobody'}).status_code == 400

    def test_update_is_partial(self, client, people):
        person = people[4]
        resp = client.put(f'/api/people/{person.id}', json={'position': 'CEO'})
        data = resp.get_json()['data']
        assert data['position'] == 'CEO'
        assert data['company'] == 'NextGen Robotics'
        assert data['name'] == 'David Kim'

    def test_delete(self, client, people):
        person_id = people[0].id
        assert client.delete(f'/api/people/{person_id}').status_code == 200
        assert client.get(f'/api/people/{person_id}').status_code == 404

    def test_missing(self, client):
        assert client.get('/api/people/404').status_code == 404
        assert client.put('/api/people/404', json={}).status_code == 404
        assert client.delete('/api/people/404').status_code == 404
