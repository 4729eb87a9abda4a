class MovieTrackerError(Exception):
    """Base error; ``status_code`` is the HTTP status the API reports."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ConfigError(MovieTrackerError):
    """A required setting (e.g. the TMDb API key) is missing."""

    status_code = 500


class UpstreamError(MovieTrackerError):
    """The catalog API answered with a non-success status or not at all."""

    status_code = 502

    def __init__(self, message, upstream_status=None):
        super().__init__(message)
        self.upstream_status = upstream_status


class Unauthenticated(MovieTrackerError):
    status_code = 401


class AlreadyExists(MovieTrackerError):
    status_code = 409


class NotFound(MovieTrackerError):
    status_code = 404
