from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from tomatillos.contract import MovieEntry
from tomatillos.errors import StorageInitError
from tomatillos.logger import logger
from tomatillos.movie import Movie


class TomatilloDBHelper:
    """
    Creates the movie table on first access and hands out sessions for it.

    Both handles are the Flask-SQLAlchemy scoped session, so reads and writes
    share one connection per app context. Calls must happen inside an
    application context.
    """

    def __init__(self, db):
        self.db = db
        self._created = False

    def get_readable_database(self):
        self._ensure_created()
        return self.db.session

    def get_writable_database(self):
        self._ensure_created()
        return self.db.session

    def _ensure_created(self):
        if self._created:
            return
        try:
            existed = inspect(self.db.engine).has_table(Movie.__tablename__)
            if not existed:
                self.db.create_all()
                logger.info(f"Created table '{MovieEntry.TABLE_NAME}'.")
        except SQLAlchemyError as e:
            logger.critical(
                f"Could not create table '{MovieEntry.TABLE_NAME}': {e}")
            raise StorageInitError(
                f"Could not create table '{MovieEntry.TABLE_NAME}'") from e
        self._created = True
