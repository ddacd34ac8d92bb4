"""Shared pytest fixtures."""

import pytest
from flask_bcrypt import generate_password_hash

from novaeco import create_app
from novaeco.models import AdminCredential
from novaeco.storage import MemoryCollectionStore

ADMIN_EMAIL = 'admin@novaecopackaging.com'
ADMIN_PASSWORD = 'password'


@pytest.fixture(scope='session')
def admin_password_hash():
    """Low-cost bcrypt hash of the test admin password."""
    return generate_password_hash(ADMIN_PASSWORD, rounds=4).decode('utf-8')


@pytest.fixture
def credential(admin_password_hash):
    return AdminCredential(ADMIN_EMAIL, admin_password_hash)


@pytest.fixture
def store():
    return MemoryCollectionStore()


@pytest.fixture
def app(admin_password_hash):
    """Application with an in-memory database."""
    app = create_app('testing')
    app.config['ADMIN_PASSWORD_HASH'] = admin_password_hash
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    """Test client with the admin logged in."""
    response = client.post('/login', data={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.status_code == 302
    return client
