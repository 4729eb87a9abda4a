import unittest

from app import create_app
from config import TestConfig
from models import db
from models.user import User


class TestUserSystem(unittest.TestCase):
    def setUp(self):
        # Create a test Flask application
        self.app = create_app(TestConfig)

        # Create a test client
        self.client = self.app.test_client()

    def tearDown(self):
        # Clean up the database
        with self.app.app_context():
            db.drop_all()  # Drop all tables

    def test_create_user(self):
        # Test creating a new user
        response = self.client.post(
            "/users",
            json={"username": "alice", "password": "password123"},
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(
            response.json["message"], "User created successfully!"
        )

        # Verify the user was added with a hashed password
        with self.app.app_context():
            user = User.query.filter_by(username="alice").first()
            self.assertIsNotNone(user)
            self.assertNotEqual(user.password_hash, "password123")
            self.assertTrue(user.verify_password("password123"))

    def test_create_duplicate_user(self):
        self.client.post("/users", json={"username": "alice", "password": "password123"})
        response = self.client.post(
            "/users", json={"username": "alice", "password": "other"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json["error"], "User already exists.")

    def test_create_user_requires_fields(self):
        response = self.client.post("/users", json={"username": "alice"})
        self.assertEqual(response.status_code, 400)

    def test_create_user_rejects_non_string_fields(self):
        for payload in (
            {"username": None, "password": "password123"},
            {"username": "alice", "password": 5},
        ):
            response = self.client.post("/users", json=payload)
            self.assertEqual(response.status_code, 400)

        with self.app.app_context():
            self.assertEqual(User.query.count(), 0)

    def test_login_rejects_non_string_fields(self):
        self.client.post("/users", json={"username": "alice", "password": "password123"})

        for payload in ({"username": None, "password": "x"}, {"username": "alice", "password": 5}):
            response = self.client.post("/login", json=payload)
            self.assertEqual(response.status_code, 400)
        self.assertIsNone(self.client.get("/me").json["user"])

    def test_login_and_logout(self):
        self.client.post("/users", json={"username": "alice", "password": "password123"})

        response = self.client.post(
            "/login", json={"username": "alice", "password": "password123"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/me").json["user"]["username"], "alice")

        self.client.post("/logout")
        self.assertIsNone(self.client.get("/me").json["user"])

    def test_login_wrong_password(self):
        self.client.post("/users", json={"username": "alice", "password": "password123"})

        response = self.client.post(
            "/login", json={"username": "alice", "password": "wrong"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertIsNone(self.client.get("/me").json["user"])

    def test_password_is_not_readable(self):
        with self.app.app_context():
            user = User(username="bob")
            user.password = "secret"
            with self.assertRaises(AttributeError):
                user.password


if __name__ == "__main__":
    unittest.main()
