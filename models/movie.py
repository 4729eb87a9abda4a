from datetime import datetime, timezone

from . import db


class Movie(db.Model):
    __tablename__ = "movies"

    id = db.Column(db.Integer, primary_key=True)  # Local row id
    tmdb_id = db.Column(db.Integer, unique=True, nullable=False, index=True)  # TMDB Movie ID
    title = db.Column(db.String(255), nullable=False)
    overview = db.Column(db.Text, nullable=False, default="")
    release_date = db.Column(db.String(10), nullable=False, default="")  # YYYY-MM-DD format
    poster_path = db.Column(db.String(255), nullable=True)
    backdrop_path = db.Column(db.String(255), nullable=True)
    genre_ids = db.Column(db.JSON, nullable=False, default=list)
    vote_average = db.Column(db.Float, nullable=False, default=0.0)  # TMDB rating (0-10)
    vote_count = db.Column(db.Integer, nullable=False, default=0)
    popularity = db.Column(db.Float, nullable=False, default=0.0)
    adult = db.Column(db.Boolean, nullable=False, default=False)
    video = db.Column(db.Boolean, nullable=False, default=False)
    original_language = db.Column(db.String(16), nullable=False, default="")
    original_title = db.Column(db.String(255), nullable=False, default="")
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc),
                           onupdate=lambda: datetime.now(timezone.utc))

    # Fields overwritten on every catalog upsert
    CATALOG_FIELDS = (
        "title",
        "overview",
        "release_date",
        "poster_path",
        "backdrop_path",
        "genre_ids",
        "vote_average",
        "vote_count",
        "popularity",
        "adult",
        "video",
        "original_language",
        "original_title",
    )

    def to_dict(self):
        data = {"id": self.id, "tmdb_id": self.tmdb_id}
        for field in self.CATALOG_FIELDS:
            data[field] = getattr(self, field)
        return data

    def __repr__(self):
        return f"<Movie id={self.id}, tmdb_id={self.tmdb_id}, title={self.title}, release_date={self.release_date}>"
