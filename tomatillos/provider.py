"""
Content provider for the movie rating table.

Works with tomatillos.contract and TomatilloDBHelper to give managed access
to the movie database. Callers address rows with content uris: the collection
uri for the whole table, or the collection uri plus a row id for one movie.
"""
import enum
import re
from urllib.parse import urlsplit

from sqlalchemy import delete, false, select, text, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from tomatillos import signals
from tomatillos.contract import CONTENT_AUTHORITY, PATH_MOVIE, MovieEntry, parse_id
from tomatillos.errors import InvalidInputError, UnsupportedIdentifierError
from tomatillos.logger import DUPLICATE_MARKER, logger
from tomatillos.movie import Movie

MIN_RATING = 1
MAX_RATING = 5

_DIGITS = re.compile(r"[0-9]+")

# Largest rowid SQLite can store; bigger ids match no row
MAX_ROW_ID = 2 ** 63 - 1


class Match(enum.Enum):
    COLLECTION = 100
    ITEM = 101
    UNMATCHED = -1


def check_input(values):
    """
    Checks whether values can be written to the database. Raises
    InvalidInputError if:
    1. values is None
    2. a rating is given and is not a whole number between 1 and 5.
    """
    if values is None:
        raise InvalidInputError("Cannot have null content values")

    rating = values.get(MovieEntry.RATING)
    if rating is None:
        return
    number = _as_rating(rating)
    if number is None:
        raise InvalidInputError(f"The rating {rating!r} is not a whole number.")
    if not MIN_RATING <= number <= MAX_RATING:
        raise InvalidInputError(
            f"The rating {number} is not between {MIN_RATING} and {MAX_RATING}.")


def _as_rating(value):
    # Only ints and digit strings; bools and floats are rejected
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    return None


class TomatilloProvider:

    def __init__(self, helper, notify_change=None, authority=CONTENT_AUTHORITY):
        self.helper = helper
        self.notify_change = notify_change or signals.notify_change
        self.authority = authority
        self.table = Movie.__table__

    def resolve(self, uri):
        try:
            parts = urlsplit(uri)
        except (TypeError, ValueError):
            return Match.UNMATCHED
        if parts.scheme != "content" or parts.netloc != self.authority:
            return Match.UNMATCHED

        segments = [s for s in parts.path.split("/") if s]
        if segments == [PATH_MOVIE]:
            return Match.COLLECTION
        if (len(segments) == 2 and segments[0] == PATH_MOVIE
                and _DIGITS.fullmatch(segments[1])):
            return Match.ITEM
        return Match.UNMATCHED

    def get_type(self, uri):
        match = self.resolve(uri)
        if match is Match.COLLECTION:
            return MovieEntry.CONTENT_DIR_TYPE
        if match is Match.ITEM:
            return MovieEntry.CONTENT_ITEM_TYPE
        raise UnsupportedIdentifierError(uri)

    def query(self, uri, projection=None, selection=None, selection_args=None,
              sort_order=None):
        """
        Returns a one-pass Result over the matching rows. The caller owns it
        and must close it, e.g. with contextlib.closing.
        """
        session = self.helper.get_readable_database()
        stmt = select(*self._columns(projection))
        where = self._where(uri, selection, selection_args)
        if where is not None:
            stmt = stmt.where(where)
        if sort_order:
            stmt = stmt.order_by(text(sort_order))

        logger.debug(f"Querying {uri}: {stmt}")
        return session.execute(stmt)

    def insert(self, uri, values):
        check_input(values)

        if self.resolve(uri) is not Match.COLLECTION:
            raise UnsupportedIdentifierError(uri)

        session = self.helper.get_writable_database()
        try:
            movie_id = self._insert_or_skip(session, values)
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Error inserting into {uri}: {e}")
            raise

        if movie_id is None:
            return None
        # Only notify once the row is really there.
        self.notify_change(uri)
        return MovieEntry.build_movie_uri(movie_id)

    def bulk_insert(self, uri, values_list):
        if self.resolve(uri) is not Match.COLLECTION:
            # Not optimized: one insert and one commit per row.
            return sum(1 for values in values_list
                       if self.insert(uri, values) is not None)

        session = self.helper.get_writable_database()
        number_inserted = 0
        try:
            for values in values_list:
                check_input(values)
                if self._insert_or_skip(session, values) is not None:
                    number_inserted += 1
            session.commit()
        except Exception as e:
            # Drops every row buffered by this batch.
            session.rollback()
            logger.error(f"Bulk insert into {uri} rolled back: {e}")
            raise

        if number_inserted > 0:
            self.notify_change(uri)
        logger.debug(f"Bulk inserted {number_inserted} rows into {uri}")
        return number_inserted

    def update(self, uri, values, selection=None, selection_args=None):
        session = self.helper.get_writable_database()
        check_input(values)

        where = self._where(uri, selection, selection_args)
        data = Movie._filter_valid_data(values)
        if not data:
            raise InvalidInputError("Cannot update with empty content values")

        stmt = update(self.table).values(**data)
        if where is not None:
            stmt = stmt.where(where)
        try:
            number_updated = session.execute(stmt).rowcount
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Error updating {uri}: {e}")
            raise

        if number_updated != 0:
            self.notify_change(uri)
        return number_updated

    def delete(self, uri, selection=None, selection_args=None):
        session = self.helper.get_writable_database()

        stmt = delete(self.table)
        where = self._where(uri, selection, selection_args)
        if where is not None:
            stmt = stmt.where(where)
        try:
            number_deleted = session.execute(stmt).rowcount
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Error deleting from {uri}: {e}")
            raise

        # A None selection deletes every row, so it always counts as a change.
        if selection is None or number_deleted != 0:
            self.notify_change(uri)
        return number_deleted

    def _insert_or_skip(self, session, values):
        """Inserts one row and returns its id, or None if the title is taken."""
        stmt = (
            sqlite_insert(self.table)
            .values(**Movie._filter_valid_data(values))
            .on_conflict_do_nothing(index_elements=[MovieEntry.TITLE])
        )
        result = session.execute(stmt)
        if result.rowcount == 0:
            logger.info(
                f"Trying to insert {values.get(MovieEntry.TITLE)} "
                f"but it's {DUPLICATE_MARKER}.")
            return None
        return result.inserted_primary_key[0]

    def _where(self, uri, selection, selection_args):
        match = self.resolve(uri)
        if match is Match.COLLECTION:
            if not selection:
                return None
            return text(selection).bindparams(**(selection_args or {}))
        if match is Match.ITEM:
            # The id in the uri wins over any selection the caller passed.
            movie_id = parse_id(uri)
            if movie_id > MAX_ROW_ID:
                return false()
            return self.table.c[MovieEntry._ID] == movie_id
        raise UnsupportedIdentifierError(uri)

    def _columns(self, projection):
        if projection is None:
            return list(self.table.c)
        try:
            return [self.table.c[name] for name in projection]
        except KeyError as e:
            raise InvalidInputError(f"Unknown column {e.args[0]}") from e
