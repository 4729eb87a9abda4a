def movie_record(tmdb_id, title="Dune", release_date="2999-01-01", genre_ids=None, **extra):
    """Movie fields as the catalog client hands them to the store."""
    record = {
        "tmdb_id": tmdb_id,
        "title": title,
        "overview": f"{title} overview",
        "release_date": release_date,
        "poster_path": f"/{tmdb_id}.jpg",
        "backdrop_path": None,
        "genre_ids": genre_ids if genre_ids is not None else [28],
        "vote_average": 7.5,
        "vote_count": 100,
        "popularity": 50.0,
        "adult": False,
        "video": False,
        "original_language": "en",
        "original_title": title,
    }
    record.update(extra)
    return record


def raw_tmdb_movie(tmdb_id, title="Dune", release_date="2999-01-01", genre_ids=None):
    """One entry of TMDb's /movie/upcoming ``results``."""
    return {
        "id": tmdb_id,
        "title": title,
        "overview": f"{title} overview",
        "release_date": release_date,
        "poster_path": f"/{tmdb_id}.jpg",
        "backdrop_path": f"/{tmdb_id}-backdrop.jpg",
        "genre_ids": genre_ids if genre_ids is not None else [28],
        "vote_average": 7.5,
        "vote_count": 100,
        "popularity": 50.0,
        "adult": False,
        "video": False,
        "original_language": "en",
        "original_title": title,
    }
