"""
Calendar queries and commands for the current caller.

Queries degrade to empty results for anonymous callers so logged-out pages
still render. Commands raise Unauthenticated instead.
"""

from services import calendar_store, sync
from . import current_user_id, require_user_id


# =================================
#       Queries
# =================================


def get_calendar(month=None):
    calendar_store.validate_month(month)
    user_id = current_user_id()
    if not user_id:
        return []
    return calendar_store.list_for_user(user_id, month=month)


def is_in_calendar(movie_id):
    user_id = current_user_id()
    if not user_id:
        return False
    return calendar_store.is_in_calendar(user_id, movie_id)


def get_calendar_stats(today=None):
    return calendar_store.calendar_stats(get_calendar(), today=today)


# =================================
#       Commands
# =================================


def add_to_calendar(movie_id, notes=None):
    user_id = require_user_id()
    entry = calendar_store.add(user_id, movie_id, notes=notes)
    sync.publish_change("calendar", {"user_id": user_id, "movie_id": movie_id})
    return entry


def remove_from_calendar(movie_id):
    user_id = require_user_id()
    calendar_store.remove(user_id, movie_id)
    sync.publish_change("calendar", {"user_id": user_id, "movie_id": movie_id})


def mark_as_watched(movie_id, watched):
    user_id = require_user_id()
    entry = calendar_store.set_watched(user_id, movie_id, watched)
    sync.publish_change("calendar", {"user_id": user_id, "movie_id": movie_id})
    return entry
