from contextlib import closing

import pytest
from sqlalchemy import inspect
from tomatillos import create_app, db
from tomatillos.contract import MovieEntry
from tomatillos.db_helper import TomatilloDBHelper
from tomatillos.errors import StorageInitError

from conftest import make_config


def test_table_created_on_first_access(app):
    with app.app_context():
        assert not inspect(db.engine).has_table(MovieEntry.TABLE_NAME)

        helper = TomatilloDBHelper(db)
        session = helper.get_writable_database()

        assert session is helper.get_readable_database()
        assert inspect(db.engine).has_table(MovieEntry.TABLE_NAME)


def test_table_has_movie_columns(app):
    with app.app_context():
        TomatilloDBHelper(db).get_readable_database()
        columns = {c["name"] for c in inspect(db.engine).get_columns(MovieEntry.TABLE_NAME)}

    assert columns == {MovieEntry._ID, MovieEntry.TITLE, MovieEntry.RATING}


def test_existing_table_is_kept(provider):
    provider.insert(MovieEntry.CONTENT_URI, {MovieEntry.TITLE: "Akira", MovieEntry.RATING: 3})

    # A fresh helper sees the table and leaves its rows alone
    TomatilloDBHelper(db).get_readable_database()

    with closing(provider.query(MovieEntry.CONTENT_URI)) as cursor:
        assert len(cursor.all()) == 1


def test_unavailable_storage_raises(tmp_path):
    missing = tmp_path / "missing" / "tomatillos.db"
    app = create_app(make_config(f"sqlite:///{missing}"))

    with app.app_context():
        with pytest.raises(StorageInitError):
            TomatilloDBHelper(db).get_writable_database()
