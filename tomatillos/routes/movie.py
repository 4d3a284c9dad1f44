from contextlib import closing

from flask import Blueprint, Response, current_app
from tomatillos.contract import MovieEntry

movie = Blueprint("movie", __name__)

SEED_TITLES = [
    "Eternal Sunshine of the Spotless Mind",
    "Oldboy",
    "Ponyo",
    "Frozen",
    "Let the Right One In",
    "Amelie",
    "Pan's Labyrinth",
    "City of God",
    "Akira",
    "Some Like It Hot",
]
SEED_RATINGS = [5, 5, 1, 2, 3, 5, 5, 4, 3, 4]


def insert_data(provider):
    """
    Inserts the dummy movie ratings. Kept on the request thread to keep this
    toy app simple.
    """
    ratings = [
        {MovieEntry.TITLE: title, MovieEntry.RATING: rating}
        for title, rating in zip(SEED_TITLES, SEED_RATINGS)
    ]
    return provider.bulk_insert(MovieEntry.CONTENT_URI, ratings)


def render_ratings(provider):
    cursor = provider.query(
        MovieEntry.CONTENT_URI, [MovieEntry.TITLE, MovieEntry.RATING])
    lines = []
    # closing() releases the cursor on every exit path
    with closing(cursor):
        # Title is column 0, rating is column 1
        for row in cursor:
            lines.append(f"{row[0]} {row[1]}/5\n")
    return "".join(lines)


@movie.route("/", methods=["GET"])
def show_ratings():
    provider = current_app.extensions["tomatillos"]
    insert_data(provider)
    return Response(render_ratings(provider), mimetype="text/plain")
