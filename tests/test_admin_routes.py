import pytest

from certificate import count_certificates, get_by_public_id
from conftest import ADMIN_PASSWORD, _login

CREATE_FORM = {
    'cert_id': 'ALX-2025-002',
    'name': 'Grace Hopper',
    'project': 'Compiler Toolkit',
    'start_date': '01 Nov 2025',
    'end_date': '30 Nov 2025',
    'issue_date': '30 Nov 2025',
    'signature': 'Lead Mentor',
    'notes': 'Second cohort',
}


@pytest.mark.parametrize('method, path, data', [
    ('get', '/admin', None),
    ('post', '/admin/create', CREATE_FORM),
    ('post', '/admin/delete', {'id': '1'}),
])
def test_admin_routes_redirect_when_logged_out(app, client, method, path, data):
    resp = getattr(client, method)(path, data=data, follow_redirects=False)
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/admin/login')
    with app.app_context():
        assert count_certificates() == 1
        assert get_by_public_id('ALX-2025-001') is not None
        assert get_by_public_id('ALX-2025-002') is None


def test_login_page_renders(client):
    resp = client.get('/admin/login')
    assert resp.status_code == 200
    assert b'name="password"' in resp.data


def test_wrong_password_rerenders_with_error(client):
    resp = _login(client, 'not-the-password')
    assert resp.status_code == 200
    assert b'Invalid password' in resp.data
    resp = client.get('/admin', follow_redirects=False)
    assert resp.headers['Location'].endswith('/admin/login')


def test_login_grants_admin_session(client):
    resp = _login(client)
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/admin')
    with client.session_transaction() as sess:
        assert sess.get('_user_id') == 'admin'
        assert sess.get('user_type') == 'admin'
    resp = client.get('/admin')
    assert resp.status_code == 200
    assert b'ALX-2025-001' in resp.data
    assert b'Seeded entry' in resp.data


def test_login_page_redirects_when_already_admin(admin_client):
    resp = admin_client.get('/admin/login')
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/admin')


def test_create_certificate(app, admin_client):
    resp = admin_client.post('/admin/create', data=CREATE_FORM)
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/admin')
    with app.app_context():
        cert = get_by_public_id('ALX-2025-002')
        assert cert.name == 'Grace Hopper'
        assert cert.notes == 'Second cohort'
    assert admin_client.get('/cert/ALX-2025-002').status_code == 200


def test_create_accepts_json_body(app, admin_client):
    resp = admin_client.post('/admin/create', json=dict(CREATE_FORM, cert_id='JSON-1'))
    assert resp.status_code in (302, 303)
    with app.app_context():
        assert get_by_public_id('JSON-1').project == 'Compiler Toolkit'


def test_create_without_cert_id_generates_one(app, admin_client):
    form = dict(CREATE_FORM, cert_id='')
    resp = admin_client.post('/admin/create', data=form)
    assert resp.status_code in (302, 303)
    data = admin_client.get('/api/certificates.json').get_json()
    newest = data[0]
    assert newest['name'] == 'Grace Hopper'
    assert newest['cert_id'].startswith('ALX-')


def test_create_duplicate_shows_error_view(app, admin_client):
    resp = admin_client.post('/admin/create', data=dict(CREATE_FORM, cert_id='ALX-2025-001'))
    assert resp.status_code == 200
    assert b'already exists' in resp.data
    with app.app_context():
        assert count_certificates() == 1
        assert get_by_public_id('ALX-2025-001').name == 'Lucky KN'


def test_delete_certificate(app, admin_client):
    with app.app_context():
        key = get_by_public_id('ALX-2025-001').id
    resp = admin_client.post('/admin/delete', data={'id': str(key)})
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/admin')
    assert admin_client.get('/cert/ALX-2025-001').status_code == 404


@pytest.mark.parametrize('bad_id', ['9999', 'abc', '', '99999999999999999999', '-99999999999999999999'])
def test_delete_unknown_or_invalid_id_redirects(app, admin_client, bad_id):
    resp = admin_client.post('/admin/delete', data={'id': bad_id})
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/admin')
    with app.app_context():
        assert count_certificates() == 1


def test_logout_clears_session(admin_client):
    resp = admin_client.get('/admin/logout')
    assert resp.status_code in (302, 303)
    assert resp.headers['Location'].endswith('/')
    with admin_client.session_transaction() as sess:
        assert '_user_id' not in sess
    resp = admin_client.get('/admin', follow_redirects=False)
    assert resp.headers['Location'].endswith('/admin/login')


def test_create_stores_submitted_values_unchanged(app, admin_client):
    padded = dict(CREATE_FORM, cert_id='PAD-1', name='  Lucky  KN ', project=' Spaced Project', notes='line one\n')
    resp = admin_client.post('/admin/create', data=padded)
    assert resp.status_code in (302, 303)
    with app.app_context():
        cert = get_by_public_id('PAD-1')
        assert cert.name == '  Lucky  KN '
        assert cert.project == ' Spaced Project'
        assert cert.notes == 'line one\n'


def test_password_is_compared_exactly(client):
    resp = _login(client, f' {ADMIN_PASSWORD} ')
    assert resp.status_code == 200
    assert b'Invalid password' in resp.data
    with client.session_transaction() as sess:
        assert '_user_id' not in sess
