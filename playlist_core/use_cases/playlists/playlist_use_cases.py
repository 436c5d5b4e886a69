import logging
from typing import Iterable, Optional
from playlist_core.domain.entities.playlist import Playlist
from playlist_core.domain.capabilities_interfaces.playable import Playable
from playlist_core.use_cases.utils import error_handler


logger = logging.getLogger('use_cases')

class PlaylistUseCases:
    @error_handler
    def create(self, name: Optional[str] = None) -> Playlist:
        """
        Creates a new empty playlist.

        :param name: Optional label of the playlist, shown in log records.
        :return: The created Playlist object.
        """
        playlist = Playlist(name=name)
        logger.info("CREATE PLAYLIST", extra={'playlist': name})
        return playlist

    @error_handler
    def add_song(self, playlist: Playlist, song: Playable) -> Playlist:
        """
        Appends a single song to the end of the playlist.

        :param playlist: The Playlist object to add the song to.
        :param song: The song to add. The playlist keeps this exact object.
        :return: The updated Playlist object.
        """
        playlist.add_one(song)
        logger.info("ADD SONG, %s IN TOTAL", playlist.count(), extra={'playlist': playlist.name})
        return playlist

    @error_handler
    def add_songs(self, playlist: Playlist, songs: Iterable[Playable]) -> Playlist:
        """
        Appends every song of an iterable, keeping the iteration order.

        :param playlist: The Playlist object to add the songs to.
        :param songs: The songs to add.
        :return: The updated Playlist object.
        """
        before = playlist.count()
        playlist.add_many(songs)
        logger.info("ADD %s SONGS, %s IN TOTAL", playlist.count() - before, playlist.count(),
                    extra={'playlist': playlist.name})
        return playlist

    @error_handler
    def mark_all_as_played(self, playlist: Playlist) -> Playlist:
        """
        Plays every song of the playlist. Membership and order are not changed.

        :param playlist: The Playlist object whose songs are played.
        :return: The same Playlist object.
        """
        playlist.mark_all_as_played()
        logger.info("MARK %s SONGS AS PLAYED", playlist.count(), extra={'playlist': playlist.name})
        return playlist
