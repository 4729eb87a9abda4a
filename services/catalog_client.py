"""TMDb catalog client."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import requests

from services.errors import ConfigError, UpstreamError

logger = logging.getLogger(__name__)


def to_movie_record(item: Dict[str, Any]) -> Dict[str, Any]:
    """Translate one raw ``/movie/upcoming`` result into Movie fields."""
    return {
        "tmdb_id": item["id"],
        "title": item.get("title") or "",
        "overview": item.get("overview") or "",
        "release_date": item.get("release_date") or "",
        "poster_path": item.get("poster_path"),
        "backdrop_path": item.get("backdrop_path"),
        "genre_ids": list(item.get("genre_ids") or []),
        "vote_average": float(item.get("vote_average") or 0),
        "vote_count": int(item.get("vote_count") or 0),
        "popularity": float(item.get("popularity") or 0),
        "adult": bool(item.get("adult", False)),
        "video": bool(item.get("video", False)),
        "original_language": item.get("original_language") or "",
        "original_title": item.get("original_title") or "",
    }


class TMDbClient:
    """Client for The Movie Database (TMDb) API."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.themoviedb.org/3",
        language: str = "en-US",
        region: str = "US",
        timeout: float = 12,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.region = region
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session=None):
        return cls(
            api_key=config.get("TMDB_API_KEY"),
            base_url=config.get("TMDB_BASE_URL", "https://api.themoviedb.org/3"),
            language=config.get("TMDB_LANGUAGE", "en-US"),
            region=config.get("TMDB_REGION", "US"),
            timeout=config.get("TMDB_TIMEOUT", 12),
            session=session,
        )

    def _get(self, path: str, params: Optional[Dict] = None) -> Dict:
        """GET ``path`` with the key and language merged into ``params``."""
        if not self.api_key:
            raise ConfigError("TMDB_API_KEY environment variable is required")

        url = f"{self.base_url}{path}"
        qp = {"api_key": self.api_key, "language": self.language}
        if params:
            qp.update(params)

        try:
            response = self.session.get(url, params=qp, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"TMDb request to {path} failed: {e}")
            raise UpstreamError(f"TMDb API unreachable: {e}") from e

        if not response.ok:
            logger.error(f"TMDb API error on {path}: {response.status_code}")
            raise UpstreamError(
                f"TMDb API error: {response.status_code}",
                upstream_status=response.status_code,
            )
        return response.json()

    def fetch_upcoming(
        self,
        page: int = 1,
        with_genres: Optional[Union[str, Iterable[int]]] = None,
        region: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch one page of upcoming movies as raw TMDb entries."""
        params = {"page": str(page), "region": region or self.region}
        if with_genres:
            if not isinstance(with_genres, str):
                with_genres = ",".join(str(g) for g in with_genres)
            params["with_genres"] = with_genres

        data = self._get("/movie/upcoming", params=params)
        return data.get("results", [])

    def fetch_genres(self) -> List[Tuple[int, str]]:
        data = self._get("/genre/movie/list")
        return [(g["id"], g["name"]) for g in data.get("genres", [])]
