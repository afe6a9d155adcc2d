import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashycardy_app import create_app, db
from flashycardy_app.config import Config
from flashycardy_app.models import User


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_TO_FILE = False
    LOG_LEVEL = 'WARNING'
    AI_BASE_URLS = ['http://ai.test']
    AI_ENDPOINT_PATHS = ['/api/generate']
    AI_API_KEY = ''
    AI_TIMEOUT_SECONDS = 30


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(username='alice', password='password123'):
    user = User(username=username, email=f'{username}@example.com')
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def login(client, username='alice', password='password123'):
    return client.post('/api/auth/login', json={'username': username, 'password': password})


@pytest.fixture
def user(app):
    return make_user()


@pytest.fixture
def auth_client(client, user):
    response = login(client)
    assert response.status_code == 200
    return client


@pytest.fixture
def user_factory(app):
    return make_user


@pytest.fixture
def login_as(client):
    def _login(username, password='password123'):
        return login(client, username, password)
    return _login
