import pytest
from tomatillos import create_app, db
from tomatillos.config import Config
from tomatillos.db_helper import TomatilloDBHelper
from tomatillos.movie import Movie
from tomatillos.provider import TomatilloProvider


def make_config(database_uri):
    return type("TestingConfig", (Config,), {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": database_uri,
        "SQLALCHEMY_ECHO": False,
    })


@pytest.fixture
def app(tmp_path):
    return create_app(make_config(f"sqlite:///{tmp_path / 'tomatillos.db'}"))


@pytest.fixture
def provider(app):
    with app.app_context():
        yield app.extensions["tomatillos"]


@pytest.fixture
def changes():
    return []


@pytest.fixture
def recording_provider(app, changes):
    """A provider whose change notifications land in the `changes` list."""
    with app.app_context():
        yield TomatilloProvider(TomatilloDBHelper(db), notify_change=changes.append)


@pytest.fixture
def client(app):
    return app.test_client()


def count_movies():
    return db.session.query(Movie).count()


def get_movie(title):
    return db.session.query(Movie).filter_by(title=title).first()
