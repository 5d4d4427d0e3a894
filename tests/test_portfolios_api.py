from conftest import make_portfolio


def test_create_and_list(auth_client):
    resp = auth_client.post('/api/portofolios', json=make_portfolio())

    assert resp.status_code == 201
    body = resp.get_json()
    assert isinstance(body['id'], int)
    assert body['technologies'] == ['Flask', 'PostgreSQL']
    assert body['imageUrls'] == ['https://example.com/shop.png']
    assert body['category'] == 'Web Development'
    assert body['isActive'] is True

    assert auth_client.get('/api/portofolios').get_json() == [body]


def test_create_defaults_to_inactive(auth_client):
    body = auth_client.post('/api/portofolios', json={
        'title': 'Bare',
        'description': 'Only required fields.',
        'category': 'DevOps',
    }).get_json()

    assert body['isActive'] is False
    assert body['technologies'] == []
    assert body['imageUrls'] == []
    assert body['projectUrl'] is None
    assert body['githubUrl'] is None


def test_create_missing_category(auth_client):
    payload = make_portfolio()
    del payload['category']

    resp = auth_client.post('/api/portofolios', json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing required fields'}


def test_category_outside_suggestions_is_accepted(auth_client):
    resp = auth_client.post('/api/portofolios', json=make_portfolio(category='Robotics'))

    assert resp.status_code == 201


def test_suggested_categories(client):
    resp = client.get('/api/portofolios/categories')

    assert resp.status_code == 200
    assert 'Web Development' in resp.get_json()


def test_list_most_recently_updated_first(auth_client):
    first = auth_client.post('/api/portofolios', json=make_portfolio(title='First')).get_json()
    auth_client.post('/api/portofolios', json=make_portfolio(title='Second'))

    titles = [p['title'] for p in auth_client.get('/api/portofolios').get_json()]
    assert titles == ['Second', 'First']

    auth_client.patch(f"/api/portofolios/{first['id']}", json={'isActive': False})

    titles = [p['title'] for p in auth_client.get('/api/portofolios').get_json()]
    assert titles == ['First', 'Second']


def test_put_is_full_replace(auth_client):
    created = auth_client.post('/api/portofolios', json=make_portfolio()).get_json()

    resp = auth_client.put(f"/api/portofolios/{created['id']}", json={
        'title': 'Shop v2',
        'description': 'Rewritten.',
        'category': 'Web Development',
        'technologies': ['Django'],
    })

    assert resp.status_code == 200
    body = resp.get_json()
    assert body['title'] == 'Shop v2'
    assert body['technologies'] == ['Django']
    assert body['imageUrls'] == []
    assert body['projectUrl'] is None
    assert body['isActive'] is False


def test_patch_twice_gives_same_state(auth_client):
    created = auth_client.post('/api/portofolios', json=make_portfolio(isActive=False)).get_json()
    url = f"/api/portofolios/{created['id']}"

    first = auth_client.patch(url, json={'isActive': True}).get_json()
    second = auth_client.patch(url, json={'isActive': True}).get_json()

    assert first['isActive'] is True
    assert second['isActive'] is True
    assert second['title'] == created['title']


def test_patch_without_flag_is_rejected(auth_client):
    created = auth_client.post('/api/portofolios', json=make_portfolio()).get_json()

    resp = auth_client.patch(f"/api/portofolios/{created['id']}", json={'title': 'x'})

    assert resp.status_code == 400


def test_delete_then_list_excludes_row(auth_client):
    created = auth_client.post('/api/portofolios', json=make_portfolio()).get_json()

    resp = auth_client.delete(f"/api/portofolios/{created['id']}")

    assert resp.status_code == 200
    assert auth_client.get('/api/portofolios').get_json() == []


def test_delete_missing_row_keeps_store_intact(auth_client):
    kept = auth_client.post('/api/portofolios', json=make_portfolio()).get_json()

    resp = auth_client.delete('/api/portofolios/12345')

    assert resp.status_code == 500
    assert resp.get_json() == {'error': 'Failed to modify portfolio'}
    assert auth_client.get('/api/portofolios').get_json() == [kept]


def test_update_missing_row_when_strict(app, auth_client):
    app.config['STRICT_NOT_FOUND'] = True

    resp = auth_client.put('/api/portofolios/12345', json=make_portfolio())

    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Portfolio not found'}


def test_mutations_require_login(client):
    assert client.post('/api/portofolios', json=make_portfolio()).status_code == 401
    assert client.delete('/api/portofolios/1').status_code == 401


def test_create_rejects_string_active_flag(auth_client):
    resp = auth_client.post('/api/portofolios', json=make_portfolio(title='Draft', isActive='false'))

    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'isActive must be a boolean'}
    assert auth_client.get('/api/portofolios').get_json() == []
    assert 'Draft' not in auth_client.get('/portofolio').get_data(as_text=True)


def test_put_rejects_non_boolean_active_flag(auth_client):
    created = auth_client.post('/api/portofolios', json=make_portfolio(isActive=False)).get_json()

    resp = auth_client.put(f"/api/portofolios/{created['id']}", json=make_portfolio(isActive=[0]))

    assert resp.status_code == 400
    assert auth_client.get('/api/portofolios').get_json()[0]['isActive'] is False


def test_null_active_flag_uses_default(auth_client):
    body = auth_client.post('/api/portofolios', json=make_portfolio(isActive=None)).get_json()

    assert body['isActive'] is False


def test_create_rejects_non_string_fields(auth_client):
    bad_title = auth_client.post('/api/portofolios', json=make_portfolio(title=['a', 'b']))
    bad_url = auth_client.post('/api/portofolios', json=make_portfolio(projectUrl=42))

    assert bad_title.status_code == 400
    assert bad_url.status_code == 400
    assert auth_client.get('/api/portofolios').get_json() == []


def test_oversized_id_is_treated_as_missing(app, auth_client):
    huge = '99999999999999999999'

    assert auth_client.delete(f'/api/portofolios/{huge}').status_code == 500

    app.config['STRICT_NOT_FOUND'] = True
    resp = auth_client.patch(f'/api/portofolios/{huge}', json={'isActive': True})
    assert resp.status_code == 404
