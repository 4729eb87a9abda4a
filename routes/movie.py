from flask import Blueprint, request, jsonify, current_app

from services import ingestion, movie_store
from . import get_catalog_client, parse_int_list, register_error_handlers


movie_api_bp = Blueprint("movie", __name__)
register_error_handlers(movie_api_bp)


# =================================
#       Catalog Queries
# =================================


@movie_api_bp.route("/api/movies/upcoming", methods=["GET"])
def get_upcoming_movies():
    try:
        genre_filter = parse_int_list(request.args.get("genres", ""))
        limit = request.args.get(
            "limit", current_app.config.get("UPCOMING_LIMIT", 20)
        )
        movies = movie_store.list_upcoming(
            genre_filter=genre_filter or None, limit=int(limit)
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"movies": [m.to_dict() for m in movies]}), 200


@movie_api_bp.route("/api/movies/<int:movie_id>", methods=["GET"])
def get_movie(movie_id):
    movie = movie_store.get_movie(movie_id)
    if not movie:
        return jsonify({"error": "Movie not found."}), 404
    return jsonify(movie.to_dict()), 200


@movie_api_bp.route("/api/genres", methods=["GET"])
def get_genres():
    genres = movie_store.list_genres()
    return jsonify({"genres": [g.to_dict() for g in genres]}), 200


# =================================
#       Catalog Refresh Actions
# =================================


@movie_api_bp.route("/api/catalog/movies/refresh", methods=["POST"])
def refresh_movies():
    data = request.get_json(silent=True) or {}

    page = data.get("page", 1)
    if not isinstance(page, int) or isinstance(page, bool) or page < 1:
        return jsonify({"error": "page must be a positive integer."}), 400

    genres = data.get("genres") or []
    if not isinstance(genres, list) or not all(
        isinstance(g, int) and not isinstance(g, bool) for g in genres
    ):
        return jsonify({"error": "genres must be a list of genre ids."}), 400

    stored = ingestion.refresh_movies(
        get_catalog_client(),
        page=page,
        with_genres=genres or None,
        region=data.get("region"),
    )
    return jsonify({"message": "Movies refreshed", "stored": stored}), 200


@movie_api_bp.route("/api/catalog/genres/refresh", methods=["POST"])
def refresh_genres():
    genres = ingestion.refresh_genres(get_catalog_client())
    return jsonify(
        {"genres": [{"tmdb_id": tmdb_id, "name": name} for tmdb_id, name in genres]}
    ), 200
