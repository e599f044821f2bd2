"""
Shared fixtures: an in-memory database per test and a TestClient wired to it.
"""

import pytest
from fastapi.testclient import TestClient

from movielist.api.dependencies import get_db
from movielist.api.main import app
from movielist.database import crud
from movielist.database.connection import DatabaseManager
from movielist.security.tokens import create_token


@pytest.fixture
def db_manager():
    """Fresh in-memory database with all tables created."""
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def session(db_manager):
    """Database session for direct CRUD tests."""
    session = db_manager.get_session()
    yield session
    session.close()


@pytest.fixture
def client(db_manager):
    """TestClient whose get_db dependency uses the test database."""

    def override_get_db():
        with db_manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def tokens(db_manager):
    """
    Seed an admin ("admin") and two regular users ("u1", "u2").

    Returns a dict of username -> bearer token.
    """
    seeded = {}
    with db_manager.session_scope() as session:
        for username, is_admin in (("admin", True), ("u1", False), ("u2", False)):
            user = crud.register_user(
                session,
                username=username,
                password="password1",
                first_name=f"{username}-first",
                last_name=f"{username}-last",
                email=f"{username}@example.com",
                is_admin=is_admin,
            )
            seeded[username] = create_token(user)
    return seeded
