from flask import Blueprint, request, jsonify

from . import commands, register_error_handlers


calendar_api_bp = Blueprint("calendar", __name__)
register_error_handlers(calendar_api_bp)


# =================================
#   Calendar Queries (soft-fail when logged out)
# =================================


@calendar_api_bp.route("/api/calendar", methods=["GET"])
def get_calendar():
    month = request.args.get("month") or None

    try:
        entries = commands.get_calendar(month=month)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"entries": [e.to_dict() for e in entries]}), 200


@calendar_api_bp.route("/api/calendar/<int:movie_id>/status", methods=["GET"])
def get_calendar_status(movie_id):
    return jsonify({"in_calendar": commands.is_in_calendar(movie_id)}), 200


@calendar_api_bp.route("/api/calendar/stats", methods=["GET"])
def get_calendar_stats():
    return jsonify(commands.get_calendar_stats()), 200


# =================================
#   Calendar Commands (require a logged-in user)
# =================================


@calendar_api_bp.route("/api/calendar", methods=["POST"])
def add_to_calendar():
    data = request.get_json(silent=True) or {}

    movie_id = data.get("movie_id")
    if not isinstance(movie_id, int) or isinstance(movie_id, bool):
        return jsonify({"error": "Missing required field (movie_id)."}), 400

    notes = data.get("notes")
    if notes is not None and not isinstance(notes, str):
        return jsonify({"error": "notes must be a string."}), 400

    entry = commands.add_to_calendar(movie_id, notes=notes)
    return jsonify({"message": "Movie added to calendar", "id": entry.id}), 201


@calendar_api_bp.route("/api/calendar/<int:movie_id>", methods=["DELETE"])
def remove_from_calendar(movie_id):
    commands.remove_from_calendar(movie_id)
    return jsonify({"message": "Movie removed from calendar"}), 200


@calendar_api_bp.route("/api/calendar/<int:movie_id>/watched", methods=["PUT"])
def mark_as_watched(movie_id):
    data = request.get_json(silent=True) or {}

    watched = data.get("watched")
    if not isinstance(watched, bool):
        return jsonify({"error": "Missing required field (watched)."}), 400

    entry = commands.mark_as_watched(movie_id, watched)
    return jsonify(
        {"message": "Watched status updated", "entry": entry.to_dict()}
    ), 200
