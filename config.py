import os
from dotenv import load_dotenv

# Only load .env in development mode (Optional)
if os.getenv("FLASK_ENV") == "development":
    load_dotenv()


class Config:
    # --------------------------------------
    # Flask / SQLAlchemy Settings
    # --------------------------------------
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI", "sqlite:///movietracker.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 'pool_pre_ping' tests each pooled connection with a SELECT 1 before use,
    # 'pool_recycle' drops connections idle for more than N seconds.
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 300,  # 5 minutes
    }

    # --------------------------------------
    # Redis config (change notifications)
    # Leave REDIS_HOST unset to run without the sync channel.
    # --------------------------------------
    REDIS_HOST = os.getenv("REDIS_HOST")
    REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))
    REDIS_DB = int(os.getenv("REDIS_DB", 0))
    REDIS_DECODE_RESPONSES = (
        os.getenv("REDIS_DECODE_RESPONSES", "True") == "True"
    )
    SYNC_CHANNEL_PREFIX = os.getenv("SYNC_CHANNEL_PREFIX", "movietracker")

    # --------------------------------------
    # TMDb catalog
    # --------------------------------------
    TMDB_API_KEY = os.getenv("TMDB_API_KEY")
    TMDB_BASE_URL = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
    TMDB_LANGUAGE = os.getenv("TMDB_LANGUAGE", "en-US")
    TMDB_REGION = os.getenv("TMDB_REGION", "US")
    TMDB_TIMEOUT = float(os.getenv("TMDB_TIMEOUT", 12))
    TMDB_IMAGE_BASE_URL = os.getenv(
        "TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p"
    )

    # --------------------------------------
    # Views
    # --------------------------------------
    UPCOMING_LIMIT = int(os.getenv("UPCOMING_LIMIT", 20))
    REFRESH_ON_LOAD = os.getenv("REFRESH_ON_LOAD", "True") == "True"
    SYNC_POLL_SECONDS = int(os.getenv("SYNC_POLL_SECONDS", 15))

    # Comma-separated list of origins allowed to call the API cross-site.
    # Cookies are never allowed cross-origin.
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --------------------------------------
    # Flask Secret Key
    # (Make sure to set this as an environment variable in production)
    # --------------------------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "default_secret_key")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_FLASK_DB_URL", "sqlite://")
    SQLALCHEMY_ENGINE_OPTIONS = {}
    REDIS_HOST = None
    TMDB_API_KEY = "test-key"
    REFRESH_ON_LOAD = False
    LOG_LEVEL = "WARNING"
