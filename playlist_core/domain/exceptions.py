from typing import Any, Dict, Optional


class PlaylistError(Exception):
    """Base exception for all playlist domain errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class InvalidStarRatingError(PlaylistError, ValueError):
    """Raised when a song is rated above the maximum number of stars."""

    def __init__(self, stars: int, max_stars: int):
        super().__init__(
            f"Star rating must not exceed {max_stars}, got {stars}",
            context={'stars': stars, 'max_stars': max_stars}
        )
        self.stars = stars
