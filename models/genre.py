from . import db


class Genre(db.Model):
    __tablename__ = "genres"

    id = db.Column(db.Integer, primary_key=True)
    tmdb_id = db.Column(db.Integer, unique=True, nullable=False, index=True)  # TMDB Genre ID
    name = db.Column(db.String(64), nullable=False)

    def to_dict(self):
        return {"id": self.id, "tmdb_id": self.tmdb_id, "name": self.name}

    def __repr__(self):
        return f"<Genre tmdb_id={self.tmdb_id}, name={self.name}>"
