from datetime import datetime, timezone

from . import db


class CalendarEntry(db.Model):
    __tablename__ = "calendar_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    movie_id = db.Column(db.Integer, db.ForeignKey("movies.id"), nullable=False)  # Local movie row id
    added_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    watched = db.Column(db.Boolean, nullable=False, default=False)
    watched_at = db.Column(db.DateTime, nullable=True)
    notes = db.Column(db.Text, nullable=True)

    movie = db.relationship("Movie", lazy="joined")

    # One entry per user per movie
    __table_args__ = (
        db.UniqueConstraint("user_id", "movie_id", name="unique_user_movie"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "movie_id": self.movie_id,
            "added_at": self.added_at.isoformat() if self.added_at else None,
            "watched": self.watched,
            "watched_at": self.watched_at.isoformat() if self.watched_at else None,
            "notes": self.notes,
            "movie": self.movie.to_dict() if self.movie else None,
        }

    def __repr__(self):
        return f"<CalendarEntry user_id={self.user_id}, movie_id={self.movie_id}, watched={self.watched}>"
