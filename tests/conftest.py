import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from models import db  # noqa: E402

ADMIN_PASSWORD = 'test-admin-pass'


def _login(client, password=ADMIN_PASSWORD):
    return client.post('/admin/login', data={'password': password}, follow_redirects=False)


@pytest.fixture()
def app(tmp_path):
    # Fresh SQLite file per test, seeded with the example certificate
    flask_app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'certs.db'}",
    })
    yield flask_app
    with flask_app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    resp = _login(client)
    assert resp.status_code in (302, 303)
    return client
