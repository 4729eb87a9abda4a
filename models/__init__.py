from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .user import User  # noqa: E402,F401
from .movie import Movie  # noqa: E402,F401
from .genre import Genre  # noqa: E402,F401
from .calendar_entry import CalendarEntry  # noqa: E402,F401
