from conftest import make_experience


def test_create_intern_experience(auth_client):
    resp = auth_client.post('/api/experiences', json=make_experience())

    assert resp.status_code == 201
    body = resp.get_json()
    assert isinstance(body['id'], int)
    assert body['title'] == 'Intern'
    assert body['company'] == 'Acme'
    assert body['startDate'] == 'Jan 2023'
    assert body['tools'] == ['Go']
    assert body['isActive'] is True
    assert body['order'] == 1
    assert body['createdAt'] and body['updatedAt']

    listed = auth_client.get('/api/experiences').get_json()
    assert listed == [body]


def test_list_sorted_by_order_ascending_with_unordered_last(auth_client):
    auth_client.post('/api/experiences', json=make_experience(title='Third', order=3))
    auth_client.post('/api/experiences', json=make_experience(title='Unordered', order=None))
    auth_client.post('/api/experiences', json=make_experience(title='First', order=1))

    titles = [e['title'] for e in auth_client.get('/api/experiences').get_json()]

    assert titles == ['First', 'Third', 'Unordered']


def test_create_defaults(auth_client):
    payload = make_experience()
    del payload['tools'], payload['isActive'], payload['order']

    body = auth_client.post('/api/experiences', json=payload).get_json()

    assert body['tools'] == []
    assert body['isActive'] is False
    assert body['order'] is None


def test_create_missing_required_field(auth_client):
    payload = make_experience()
    del payload['company']

    resp = auth_client.post('/api/experiences', json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing required fields'}
    assert auth_client.get('/api/experiences').get_json() == []


def test_create_rejects_non_integer_order(auth_client):
    resp = auth_client.post('/api/experiences', json=make_experience(order='first'))

    assert resp.status_code == 400


def test_create_rejects_non_list_tools(auth_client):
    resp = auth_client.post('/api/experiences', json=make_experience(tools='Go, Python'))

    assert resp.status_code == 400


def test_put_is_full_replace(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience()).get_json()

    resp = auth_client.put(f"/api/experiences/{created['id']}", json={
        'title': 'Engineer',
        'company': 'Acme',
        'startDate': 'Jun 2024',
        'description': 'Full time.',
    })

    assert resp.status_code == 200
    body = resp.get_json()
    assert body['title'] == 'Engineer'
    assert body['startDate'] == 'Jun 2024'
    assert body['tools'] == []
    assert body['isActive'] is False
    assert body['order'] is None
    assert body['createdAt'] == created['createdAt']


def test_put_missing_field_is_rejected(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience()).get_json()

    resp = auth_client.put(f"/api/experiences/{created['id']}", json={'title': 'Engineer'})

    assert resp.status_code == 400
    assert auth_client.get('/api/experiences').get_json() == [created]


def test_patch_toggles_only_status(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience(isActive=False)).get_json()

    resp = auth_client.patch(f"/api/experiences/{created['id']}",
                             json={'isActive': True, 'title': 'Ignored'})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body['isActive'] is True
    assert body['title'] == created['title']
    assert body['tools'] == created['tools']
    assert body['order'] == created['order']


def test_patch_is_idempotent(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience(isActive=False)).get_json()
    url = f"/api/experiences/{created['id']}"

    first = auth_client.patch(url, json={'isActive': True})
    second = auth_client.patch(url, json={'isActive': True})

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.get_json()['isActive'] is True
    assert auth_client.get('/api/experiences').get_json()[0]['isActive'] is True


def test_patch_requires_boolean(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience()).get_json()

    resp = auth_client.patch(f"/api/experiences/{created['id']}", json={'isActive': 'yes'})

    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'isActive must be a boolean'}


def test_malformed_id(auth_client):
    resp = auth_client.delete('/api/experiences/not-a-number')

    assert resp.status_code == 400


def test_delete_then_list_excludes_row(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience()).get_json()

    resp = auth_client.delete(f"/api/experiences/{created['id']}")

    assert resp.status_code == 200
    assert resp.get_json() == {'success': True, 'message': 'Experience deleted successfully'}
    assert auth_client.get('/api/experiences').get_json() == []


def test_missing_row_answers_server_error_by_default(auth_client):
    # Legacy behaviour: a missing experience surfaces as a 500, not a 404.
    kept = auth_client.post('/api/experiences', json=make_experience()).get_json()

    delete = auth_client.delete('/api/experiences/999')
    put = auth_client.put('/api/experiences/999', json=make_experience())
    patch = auth_client.patch('/api/experiences/999', json={'isActive': True})

    assert delete.status_code == 500
    assert put.status_code == 500
    assert patch.status_code == 500
    assert delete.get_json() == {'error': 'Failed to modify experience'}
    assert auth_client.get('/api/experiences').get_json() == [kept]


def test_missing_row_answers_not_found_when_strict(app, auth_client):
    app.config['STRICT_NOT_FOUND'] = True

    resp = auth_client.delete('/api/experiences/999')

    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Experience not found'}


def test_mutations_require_login(client):
    assert client.post('/api/experiences', json=make_experience()).status_code == 401
    assert client.put('/api/experiences/1', json=make_experience()).status_code == 401
    assert client.patch('/api/experiences/1', json={'isActive': True}).status_code == 401
    assert client.delete('/api/experiences/1').status_code == 401


def test_create_rejects_non_boolean_active_flag(auth_client):
    for value in ('false', '0', 1, [0]):
        resp = auth_client.post('/api/experiences', json=make_experience(isActive=value))
        assert resp.status_code == 400

    assert auth_client.get('/api/experiences').get_json() == []


def test_put_rejects_string_active_flag(auth_client):
    created = auth_client.post('/api/experiences', json=make_experience(isActive=False)).get_json()

    resp = auth_client.put(f"/api/experiences/{created['id']}", json=make_experience(isActive='true'))

    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'isActive must be a boolean'}
    assert auth_client.get('/api/experiences').get_json() == [created]


def test_create_rejects_non_string_required_field(auth_client):
    resp = auth_client.post('/api/experiences', json=make_experience(company={'name': 'Acme'}))

    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing required fields'}


def test_oversized_id_when_strict(app, auth_client):
    app.config['STRICT_NOT_FOUND'] = True

    resp = auth_client.put('/api/experiences/-99999999999999999999', json=make_experience())

    assert resp.status_code == 404
