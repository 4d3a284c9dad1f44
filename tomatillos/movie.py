from tomatillos import db
from tomatillos.contract import MovieEntry
from tomatillos.model import BaseModel


class Movie(BaseModel):
    __tablename__ = MovieEntry.TABLE_NAME

    # The unique title is what duplicate suppression keys on.
    title = db.Column(db.Text, unique=True, nullable=False)
    # Range is checked by the provider, not by the table.
    rating = db.Column(db.Integer)

    def __repr__(self):
        return f"<Movie {self.title} {self.rating}/5>"
