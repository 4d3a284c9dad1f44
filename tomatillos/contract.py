"""Names and content uris shared by the movie table, the provider and its callers."""
from urllib.parse import urlsplit

CONTENT_AUTHORITY = "com.example.android.tomatillos"
BASE_CONTENT_URI = f"content://{CONTENT_AUTHORITY}"
PATH_MOVIE = "movies"

CURSOR_DIR_BASE_TYPE = "vnd.tomatillos.cursor.dir"
CURSOR_ITEM_BASE_TYPE = "vnd.tomatillos.cursor.item"


def with_appended_id(uri, movie_id):
    return f"{uri.rstrip('/')}/{int(movie_id)}"


def parse_id(uri):
    """
    Returns the last path segment of the uri as an int, or -1 when the
    path is empty. A non-numeric last segment raises ValueError.
    """
    segments = [s for s in urlsplit(uri).path.split("/") if s]
    if not segments:
        return -1
    return int(segments[-1])


class MovieEntry:
    TABLE_NAME = "movies"

    _ID = "_id"
    TITLE = "title"
    RATING = "rating"

    CONTENT_URI = f"{BASE_CONTENT_URI}/{PATH_MOVIE}"

    CONTENT_DIR_TYPE = f"{CURSOR_DIR_BASE_TYPE}/{CONTENT_AUTHORITY}/{PATH_MOVIE}"
    CONTENT_ITEM_TYPE = f"{CURSOR_ITEM_BASE_TYPE}/{CONTENT_AUTHORITY}/{PATH_MOVIE}"

    @classmethod
    def build_movie_uri(cls, movie_id):
        return with_appended_id(cls.CONTENT_URI, movie_id)
