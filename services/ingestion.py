"""
Catalog ingestion: fetch from TMDb and upsert item by item.

Each upsert commits on its own, so a failure part-way through keeps what
was already stored and skips the rest.
"""

import logging

from services import movie_store, sync
from services.catalog_client import to_movie_record

logger = logging.getLogger(__name__)


def refresh_movies(client, page=1, with_genres=None, region=None):
    """Fetch one page of upcoming movies and store it. Returns the stored count."""
    results = client.fetch_upcoming(page=page, with_genres=with_genres, region=region)

    stored = 0
    for raw in results:
        movie_store.upsert_movie(to_movie_record(raw))
        stored += 1

    logger.info(f"Stored {stored} upcoming movies from page {page}")
    sync.publish_change("movies", {"page": page, "count": stored})
    return stored


def refresh_genres(client):
    """Fetch the TMDb genre list and insert any genre not cached yet."""
    genres = client.fetch_genres()

    for tmdb_id, name in genres:
        movie_store.upsert_genre({"tmdb_id": tmdb_id, "name": name})

    logger.info(f"Synced {len(genres)} genres")
    sync.publish_change("genres", {"count": len(genres)})
    return genres
