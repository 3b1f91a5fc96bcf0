from unittest import mock

import pytest

from app import create_app
from models import db
from models.users import User


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    user = User(username="alice", email="alice@example.com", full_name="Alice Example")
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def logged_in_client(client, user):
    response = client.post("/api/auth/login", json={
        "username_or_email": "alice",
        "password": "password123",
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def upstream():
    """Replace the outbound HTTP call; tests set return_value/side_effect."""
    with mock.patch("utils.openrouter.requests.post") as post:
        yield post
