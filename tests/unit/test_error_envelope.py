def test_invalid_admin_login_returns_error_envelope(client, admin_password):
    r = client.post('/auth/login', json={'password': 'wrongpass'})
    assert r.status_code == 401
    body = r.json()
    assert body['error_code'] == 'INVALID_CREDENTIALS'
    assert body['error'] == body['message']
    assert body['request_id'] == r.headers['X-Request-ID']


def test_validation_error_envelope(client):
    r = client.post('/notifications/subscribe', json={'token': 123})
    assert r.status_code == 422
    body = r.json()
    assert body['error_code'] == 'VALIDATION_ERROR'
    assert body['details']['validation_errors'][0]['field'] == 'body.token'


def test_unknown_route_uses_envelope(client):
    r = client.get('/does-not-exist')
    assert r.status_code == 404
    assert r.json()['error_code'] == 'NOT_FOUND'


def test_incoming_request_id_is_echoed(client):
    r = client.post('/notifications/subscribe', json={}, headers={'X-Request-ID': 'req-42'})
    assert r.status_code == 400
    assert r.headers['X-Request-ID'] == 'req-42'
    assert r.json()['request_id'] == 'req-42'
