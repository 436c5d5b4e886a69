import logging
from playlist_core.domain.entities.song import Song
from playlist_core.use_cases.utils import error_handler


logger = logging.getLogger('use_cases')

class SongUseCases:
    @error_handler
    def create(self, name: str) -> Song:
        """
        Creates a new unplayed and unrated song.

        :param name: The name of the song.
        :return: The created Song object.
        """
        song = Song(name=name)
        logger.info("CREATE SONG %s", name)
        return song

    @error_handler
    def rate(self, song: Song, stars: int) -> Song:
        """
        Sets the star rating of a song.

        :param song: The Song object to rate.
        :param stars: The new rating. Must not exceed 5.
        :return: The rated Song object.
        :raises InvalidStarRatingError: If stars is greater than 5. The song keeps its previous rating.
        """
        song.set_stars(stars)
        logger.info("RATE SONG %s: %s STARS", song.name, stars)
        return song

    @error_handler
    def play(self, song: Song) -> Song:
        """
        Marks a song as played. Playing it again changes nothing.

        :param song: The Song object to play.
        :return: The played Song object.
        """
        song.play()
        logger.info("PLAY SONG %s", song.name)
        return song
