from pydantic import BaseModel, PrivateAttr
from typing import Iterable, Optional, Union
from playlist_core.domain.capabilities_interfaces.playable import Playable


"""
Playlist Entity:
1. name (str, Optional): Label of the playlist, used when logging.
2. songs (tuple): Songs in insertion order. Duplicates are allowed.
The playlist keeps references to the songs it is given, never copies, so a song
played through the playlist is played for every other holder of it and vice versa.
"""

class Playlist(BaseModel):
    name: Optional[str] = None
    _songs: list = PrivateAttr(default_factory=list)

    @property
    def songs(self) -> tuple:
        return tuple(self._songs)

    def add_one(self, song: Playable) -> None:
        self._songs.append(song)

    def add_many(self, songs: Iterable[Playable]) -> None:
        for song in songs:
            self.add_one(song)

    def add(self, item: Union[Playable, Iterable]) -> None:
        """
        Adds either a single song or every song of an iterable.

        Elements of an iterable go through add again, so nested sequences
        are flattened at any depth.

        :param item: A Playable, or an iterable of Playables or nested iterables.
        """
        if callable(getattr(item, "play", None)):
            self.add_one(item)
            return
        if isinstance(item, (str, bytes)):
            raise TypeError(f"Expected a Playable or an iterable of Playables, got {type(item).__name__}")
        for element in item:
            self.add(element)

    def count(self) -> int:
        return len(self._songs)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self):
        return iter(self._songs)

    def __copy__(self):
        # The copy gets its own song list, the songs themselves are shared
        copied = super().__copy__()
        copied._songs = list(self._songs)
        return copied

    def mark_all_as_played(self) -> None:
        for song in self._songs:
            song.play()
