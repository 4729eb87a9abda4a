"""Per-user calendar entries: one row per (user, movie)."""

import re
from datetime import datetime, timezone

from models import db
from models.calendar_entry import CalendarEntry
from models.movie import Movie
from services.errors import AlreadyExists, NotFound
from services.movie_store import today_iso

MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def _find(user_id, movie_id):
    return CalendarEntry.query.filter_by(user_id=user_id, movie_id=movie_id).first()


def add(user_id, movie_id, notes=None):
    if _find(user_id, movie_id) is not None:
        raise AlreadyExists("Movie already in your calendar")
    if db.session.get(Movie, movie_id) is None:
        raise NotFound(f"Movie {movie_id} does not exist")

    entry = CalendarEntry(
        user_id=user_id,
        movie_id=movie_id,
        added_at=datetime.now(timezone.utc),
        watched=False,
        notes=notes,
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def remove(user_id, movie_id):
    entry = _find(user_id, movie_id)
    if entry is None:
        raise NotFound("Movie not found in your calendar")

    db.session.delete(entry)
    db.session.commit()


def set_watched(user_id, movie_id, watched):
    entry = _find(user_id, movie_id)
    if entry is None:
        raise NotFound("Movie not found in your calendar")

    entry.watched = watched
    entry.watched_at = datetime.now(timezone.utc) if watched else None
    db.session.commit()
    return entry


def validate_month(month):
    """Raise ValueError unless ``month`` is None or a "YYYY-MM" string."""
    if month is not None and not (isinstance(month, str) and MONTH_RE.match(month)):
        raise ValueError(f"month must look like YYYY-MM, got {month!r}")


def list_for_user(user_id, month=None):
    """
    All of a user's entries with their movie loaded. ``month`` ("YYYY-MM")
    keeps only movies whose release date falls in that month.
    """
    validate_month(month)

    entries = CalendarEntry.query.filter_by(user_id=user_id).all()
    if month:
        entries = [
            e for e in entries
            if e.movie is not None and e.movie.release_date.startswith(month)
        ]
    return entries


def is_in_calendar(user_id, movie_id):
    return _find(user_id, movie_id) is not None


def calendar_stats(entries, today=None):
    """Totals shown above the calendar: all, watched, and still-upcoming unwatched."""
    today = today or today_iso()
    return {
        "total": len(entries),
        "watched": sum(1 for e in entries if e.watched),
        "upcoming": sum(
            1 for e in entries
            if e.movie is not None and e.movie.release_date >= today and not e.watched
        ),
    }
