"""Shared fixtures: a test app backed by in-memory SQLite."""

import pytest

from filmdb import create_app
from filmdb.config import TestConfig
from filmdb.models import db
from filmdb.repositories import ActorRepository, FilmRepository


@pytest.fixture
def app():
    """Application with freshly created tables."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()


@pytest.fixture
def actors(app) -> ActorRepository:
    return ActorRepository(db.session)


@pytest.fixture
def films(app) -> FilmRepository:
    return FilmRepository(db.session)


@pytest.fixture
def leo(actors):
    return actors.create({"first_name": "Leo", "last_name": "Di Caprio"})


@pytest.fixture
def inception(films):
    return films.create(
        {
            "title": "Inception",
            "description": "Dom Cobb es un ladrón que roba secretos en los sueños.",
            "release_year": 2010,
        }
    )
