from pydantic import BaseModel, ConfigDict, Field
from playlist_core.domain.exceptions import InvalidStarRatingError


MAX_STARS = 5

"""
Song Entity:
1. name (str): Title of the song. Required and cannot be changed after creation.
2. stars (int): Star rating. Only the upper bound (5) is checked, values at or below 0 are accepted.
3. played (bool): Whether the song has been played. Goes from False to True only.
"""
class Song(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(frozen=True)
    stars: int = Field(default=0, le=MAX_STARS)
    played: bool = False

    def set_stars(self, stars: int) -> None:
        # Checked before assignment so a rejected value is never stored
        if stars > MAX_STARS:
            raise InvalidStarRatingError(stars, MAX_STARS)
        self.stars = stars

    rate = set_stars

    def play(self) -> None:
        self.played = True

    def is_played(self) -> bool:
        return self.played
