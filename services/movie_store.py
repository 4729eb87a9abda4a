"""Upsert and query helpers for the cached catalog (movies and genres)."""

from datetime import datetime, timezone

from models import db
from models.movie import Movie
from models.genre import Genre

# Value stored when a catalog record omits the field
MOVIE_DEFAULTS = {
    "title": "",
    "overview": "",
    "release_date": "",
    "poster_path": None,
    "backdrop_path": None,
    "genre_ids": [],
    "vote_average": 0.0,
    "vote_count": 0,
    "popularity": 0.0,
    "adult": False,
    "video": False,
    "original_language": "",
    "original_title": "",
}


def today_iso():
    """Current UTC date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


def upsert_movie(record):
    """
    Insert or fully replace the movie keyed by ``record["tmdb_id"]``.
    Fields absent from ``record`` are reset, not kept.
    """
    movie = Movie.query.filter_by(tmdb_id=record["tmdb_id"]).first()
    if movie is None:
        movie = Movie(tmdb_id=record["tmdb_id"])
        db.session.add(movie)

    for field, default in MOVIE_DEFAULTS.items():
        value = record.get(field)
        if value is None:
            value = list(default) if isinstance(default, list) else default
        setattr(movie, field, value)

    db.session.commit()
    return movie


def upsert_genre(record):
    """Insert the genre if its tmdb_id is unknown; an existing name is never changed."""
    genre = Genre.query.filter_by(tmdb_id=record["tmdb_id"]).first()
    if genre is None:
        genre = Genre(tmdb_id=record["tmdb_id"], name=record["name"])
        db.session.add(genre)
        db.session.commit()
    return genre


def list_upcoming(genre_filter=None, limit=20, today=None):
    """
    Upcoming cached movies, earliest release first.

    Only the ``2 * limit`` most recently inserted rows are considered, so a
    narrow genre filter can return fewer than ``limit`` movies.
    """
    if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    today = today or today_iso()

    movies = Movie.query.order_by(Movie.id.desc()).limit(limit * 2).all()

    if genre_filter:
        wanted = set(genre_filter)
        movies = [m for m in movies if wanted.intersection(m.genre_ids or [])]

    movies = [m for m in movies if m.release_date >= today]
    movies.sort(key=lambda m: m.release_date)
    return movies[:limit]


def list_genres():
    return Genre.query.order_by(Genre.name.asc()).all()


def get_movie(movie_id):
    return db.session.get(Movie, movie_id)
