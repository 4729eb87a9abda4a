from flask import Flask
import os
import unittest
from unittest.mock import MagicMock

from models import db
from models.genre import Genre
from models.movie import Movie
from services import ingestion
from services.errors import UpstreamError

from fixtures import raw_tmdb_movie


class TestIngestion(unittest.TestCase):
    def setUp(self):
        # Create a test Flask application
        self.app = Flask(__name__)
        self.app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get(
            "TEST_FLASK_DB_URL", "sqlite://"
        )
        self.app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
        self.app.config["TESTING"] = True
        self.app.redis = None

        # Initialize the database
        db.init_app(self.app)
        with self.app.app_context():
            db.create_all()  # Create all tables

        self.client = MagicMock()

    def tearDown(self):
        # Clean up the database
        with self.app.app_context():
            db.drop_all()  # Drop all tables

    def test_refresh_movies_stores_every_result(self):
        self.client.fetch_upcoming.return_value = [
            raw_tmdb_movie(1, title="One"),
            raw_tmdb_movie(2, title="Two"),
        ]

        with self.app.app_context():
            stored = ingestion.refresh_movies(self.client, page=3, with_genres=[28])

            self.assertEqual(stored, 2)
            self.assertEqual(Movie.query.count(), 2)
        self.client.fetch_upcoming.assert_called_once_with(
            page=3, with_genres=[28], region=None
        )

    def test_refresh_movies_keeps_items_stored_before_a_failure(self):
        bad = {"title": "No id"}  # KeyError on the missing tmdb id
        self.client.fetch_upcoming.return_value = [raw_tmdb_movie(1), bad, raw_tmdb_movie(3)]

        with self.app.app_context():
            with self.assertRaises(KeyError):
                ingestion.refresh_movies(self.client)

            self.assertEqual([m.tmdb_id for m in Movie.query.all()], [1])

    def test_refresh_movies_upstream_failure_stores_nothing(self):
        self.client.fetch_upcoming.side_effect = UpstreamError("TMDb API error: 500", 500)

        with self.app.app_context():
            with self.assertRaises(UpstreamError):
                ingestion.refresh_movies(self.client)
            self.assertEqual(Movie.query.count(), 0)

    def test_refresh_genres_inserts_new_genres_only(self):
        self.client.fetch_genres.return_value = [(28, "Action"), (35, "Comedy")]

        with self.app.app_context():
            ingestion.refresh_genres(self.client)
            self.client.fetch_genres.return_value = [(28, "Renamed"), (18, "Drama")]
            genres = ingestion.refresh_genres(self.client)

            self.assertEqual(genres, [(28, "Renamed"), (18, "Drama")])
            self.assertEqual(Genre.query.count(), 3)
            self.assertEqual(Genre.query.filter_by(tmdb_id=28).first().name, "Action")

    def test_refresh_publishes_change(self):
        self.app.redis = MagicMock()
        self.app.redis.incr.return_value = 1
        self.client.fetch_upcoming.return_value = [raw_tmdb_movie(1)]

        with self.app.app_context():
            ingestion.refresh_movies(self.client)

        self.app.redis.incr.assert_called_once_with("movietracker:version:movies")
        self.assertEqual(
            self.app.redis.publish.call_args.args[0], "movietracker:movies"
        )


if __name__ == "__main__":
    unittest.main()
