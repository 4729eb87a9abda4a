from datetime import date

from flask import (
    current_app,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)
from flask_login import current_user

from routes import commands, get_catalog_client, parse_int_list
from services import ingestion, movie_store
from services.movie_store import today_iso
from . import views_bp
from .actions import ActionState
from .helpers import (
    POSTER_PLACEHOLDER,
    ROW_PLACEHOLDER,
    format_date,
    image_url,
    is_upcoming,
    month_key,
    month_options,
)


@views_bp.app_context_processor
def inject_helpers():
    base = current_app.config.get("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p")
    return {
        "poster_url": lambda path: image_url(base, path, "w500", POSTER_PLACEHOLDER),
        "row_poster_url": lambda path: image_url(base, path, "w200", ROW_PLACEHOLDER),
        "format_date": format_date,
        "sync_poll_seconds": current_app.config.get("SYNC_POLL_SECONDS", 15),
    }


def report(action):
    """Flash the action's outcome as a transient notification."""
    if action.message:
        flash(action.message, "success" if action.succeeded else "error")
    return action


def _safe_next(default):
    target = request.form.get("next") or ""
    if target.startswith("/") and not target.startswith("//"):
        return target
    return default


def _selected_genres():
    try:
        return parse_int_list(request.values.get("genres", ""))
    except ValueError:
        return []


def load_catalog():
    """Genre refresh, then movie refresh. Stops after the first failure."""
    client = get_catalog_client()
    failure = "Failed to load movies. Please check your TMDb API key."

    genres = ActionState("fetch_genres", failure_message=failure)
    if not genres.run(ingestion.refresh_genres, client).succeeded:
        return report(genres)

    movies = ActionState("fetch_movies", failure_message=failure)
    return report(movies.run(ingestion.refresh_movies, client, page=1))


# =================================
#       Discover
# =================================


@views_bp.route("/", methods=["GET"])
def discover():
    if not current_user.is_authenticated:
        return render_template("login.html")

    if current_app.config.get("REFRESH_ON_LOAD") and not session.get("catalog_loaded"):
        if load_catalog().succeeded:
            session["catalog_loaded"] = True

    selected = _selected_genres()
    movies = movie_store.list_upcoming(
        genre_filter=selected or None,
        limit=current_app.config.get("UPCOMING_LIMIT", 20),
    )
    entries = {e.movie_id: e for e in commands.get_calendar()}
    today = today_iso()

    cards = [
        {
            "movie": movie,
            "in_calendar": movie.id in entries,
            "watched": movie.id in entries and entries[movie.id].watched,
            "upcoming": is_upcoming(movie.release_date, today),
        }
        for movie in movies
    ]

    return render_template(
        "discover.html",
        view="dashboard",
        cards=cards,
        genres=movie_store.list_genres(),
        selected_genres=selected,
    )


@views_bp.route("/discover/refresh", methods=["POST"])
def refresh():
    selected = _selected_genres()
    action = ActionState(
        "refresh_movies",
        success_message="Movies refreshed!",
        failure_message="Failed to refresh movies",
    )
    report(action.run(
        ingestion.refresh_movies,
        get_catalog_client(),
        page=1,
        with_genres=selected or None,
    ))

    genres = ",".join(str(g) for g in selected)
    return redirect(url_for("views.discover", genres=genres or None))


# =================================
#       Calendar
# =================================


@views_bp.route("/calendar", methods=["GET"])
def calendar():
    if not current_user.is_authenticated:
        return render_template("login.html")

    month = request.args.get("month") or month_key(date.today())
    try:
        month_entries = commands.get_calendar(month=month)
    except ValueError:
        flash(f"Invalid month: {month}", "error")
        return redirect(url_for("views.calendar"))

    today = today_iso()
    month_entries = sorted(
        (e for e in month_entries if e.movie is not None),
        key=lambda e: e.movie.release_date,
    )
    rows = [
        {
            "entry": entry,
            "movie": entry.movie,
            "upcoming": is_upcoming(entry.movie.release_date, today),
        }
        for entry in month_entries
    ]

    return render_template(
        "calendar.html",
        view="calendar",
        month=month,
        months=month_options(),
        stats=commands.get_calendar_stats(today=today),
        rows=rows,
    )


# =================================
#       Card / Row Actions
# =================================


def _movie_id():
    try:
        return int(request.form.get("movie_id", ""))
    except ValueError:
        flash("Missing movie id", "error")
        return None


@views_bp.route("/calendar/add", methods=["POST"])
def add_to_calendar():
    movie_id = _movie_id()
    title = request.form.get("title", "movie")
    if movie_id is not None:
        report(ActionState(
            "add_to_calendar",
            success_message=f'Added "{title}" to your calendar!',
            failure_message="Failed to add movie to calendar",
        ).run(commands.add_to_calendar, movie_id, notes=request.form.get("notes") or None))
    return redirect(_safe_next(url_for("views.discover")))


@views_bp.route("/calendar/remove", methods=["POST"])
def remove_from_calendar():
    movie_id = _movie_id()
    title = request.form.get("title", "movie")
    if movie_id is not None:
        report(ActionState(
            "remove_from_calendar",
            success_message=f'Removed "{title}" from your calendar',
            failure_message="Failed to remove movie from calendar",
        ).run(commands.remove_from_calendar, movie_id))
    return redirect(_safe_next(url_for("views.discover")))


@views_bp.route("/calendar/watched", methods=["POST"])
def toggle_watched():
    movie_id = _movie_id()
    title = request.form.get("title", "movie")
    watched = request.form.get("watched") == "1"
    if movie_id is not None:
        report(ActionState(
            "mark_as_watched",
            success_message=(
                f'Marked "{title}" as watched!' if watched
                else f'Marked "{title}" as unwatched'
            ),
            failure_message="Failed to update watched status",
        ).run(commands.mark_as_watched, movie_id, watched))
    return redirect(_safe_next(url_for("views.discover")))
