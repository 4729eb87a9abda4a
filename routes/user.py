from flask import Blueprint, request, jsonify
from flask_login import login_user, logout_user, current_user

from models import db
from models.user import User


user_api_bp = Blueprint("user", __name__)


# =================================
#       User Endpoints
# =================================


@user_api_bp.route("/users", methods=["POST"])
def create_user():
    data = request.get_json(silent=True) or {}
    username = data.get("username", "")
    password = data.get("password", "")
    if not isinstance(username, str) or not isinstance(password, str):
        return jsonify({"error": "Username and password must be strings."}), 400

    username = username.strip()
    password = password.strip()
    if not username or not password:
        return jsonify({"error": "Username and password required."}), 400

    existing_user = User.query.filter_by(username=username).first()
    if existing_user:
        return jsonify({"error": "User already exists."}), 400

    new_user = User(username=username)
    new_user.password = password
    db.session.add(new_user)
    db.session.commit()
    return jsonify({"message": "User created successfully!", "id": new_user.id}), 201


@user_api_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or {}
    username = data.get("username", "")
    password = data.get("password", "")
    if not isinstance(username, str) or not isinstance(password, str):
        return jsonify({"error": "Username and password must be strings."}), 400

    user = User.query.filter_by(username=username.strip()).first()
    if not user or not user.verify_password(password):
        return jsonify({"error": "Invalid username or password."}), 401

    login_user(user)
    return jsonify({"message": "Logged in", "id": user.id}), 200


@user_api_bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    return jsonify({"message": "Logged out"}), 200


@user_api_bp.route("/me", methods=["GET"])
def me():
    if not current_user.is_authenticated:
        return jsonify({"user": None}), 200
    return jsonify(
        {"user": {"id": current_user.id, "username": current_user.username}}
    ), 200
