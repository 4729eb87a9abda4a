import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_login import LoginManager
from sqlalchemy.exc import OperationalError

from config import Config
from models import db
from models.user import User
from routes import init_routes
from services.sync import create_redis_client
from views import views_bp


login_manager = LoginManager()


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


def setup_logging(level=None):
    """
    Single console handler; level from the argument, then LOG_LEVEL, then INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    CORS(app, origins=app.config.get("CORS_ORIGINS", "*"))
    setup_logging(app.config.get("LOG_LEVEL"))

    # Initialize SQLAlchemy with the configured engine options
    db.init_app(app)
    app.logger.debug(
        "Engine options: %s", app.config.get("SQLALCHEMY_ENGINE_OPTIONS")
    )

    login_manager.init_app(app)

    # Change notifications; None when REDIS_HOST is unset
    app.redis = create_redis_client(app.config)
    app.catalog_client = None

    # Register your Blueprints
    init_routes(app)
    app.register_blueprint(views_bp)

    @app.errorhandler(OperationalError)
    def handle_stale_connection(error):
        # Stale connection? Roll back and dispose so the next request reconnects.
        db.session.rollback()
        db.engine.dispose()
        app.logger.error(f"Detected stale DB connection, disposed engine: {error}")
        return jsonify({"error": "Database unavailable, please retry."}), 503

    # Ensure DB tables exist
    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 6003)), debug=True)
