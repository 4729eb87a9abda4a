from flask import Blueprint, jsonify, current_app
from flask_login import current_user
import redis

from services import sync
from services.catalog_client import TMDbClient
from services.errors import MovieTrackerError, Unauthenticated


other_api_bp = Blueprint("other", __name__)


@other_api_bp.route("/health", methods=["GET"])
def health_check():
    return jsonify({"status": "MovieTracker service is running!"}), 200


@other_api_bp.route("/api/sync/versions", methods=["GET"])
def sync_versions():
    """Per-entity change counters that polling clients compare between reads."""
    try:
        versions = sync.get_versions()
    except redis.exceptions.RedisError as e:
        return jsonify({"error": f"Sync channel unavailable: {e}"}), 503
    return jsonify({"versions": versions}), 200


# =================================
#         Helper Functions
# =================================


def current_user_id():
    """
    The logged-in user's id, or None for anonymous callers.
    """
    if current_user.is_authenticated:
        return current_user.id
    return None


def require_user_id():
    """
    Commands must have a caller; anonymous requests fail with Unauthenticated.
    """
    user_id = current_user_id()
    if user_id is None:
        raise Unauthenticated("Must be logged in")
    return user_id


def get_catalog_client():
    """
    The app's TMDb client. Tests may set ``app.catalog_client`` to a stub.
    """
    client = getattr(current_app, "catalog_client", None)
    if client is None:
        client = TMDbClient.from_config(current_app.config)
        current_app.catalog_client = client
    return client


def parse_int_list(raw):
    """
    "1,2,3" -> [1, 2, 3]. Raises ValueError on anything that is not an int.
    """
    if not raw:
        return []
    return [int(part) for part in raw.split(",") if part.strip()]


def handle_tracker_error(error):
    return jsonify({"error": error.message}), error.status_code


def register_error_handlers(bp):
    bp.register_error_handler(MovieTrackerError, handle_tracker_error)


def init_routes(app):
    from routes.calendar import calendar_api_bp
    from routes.movie import movie_api_bp
    from routes.user import user_api_bp

    app.register_blueprint(other_api_bp)
    app.register_blueprint(movie_api_bp)
    app.register_blueprint(calendar_api_bp)
    app.register_blueprint(user_api_bp)
