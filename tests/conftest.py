import logging
from unittest.mock import Mock

import pytest

from playlist_core.domain.entities.song import Song
from playlist_core.domain.entities.playlist import Playlist


@pytest.fixture
def song():
    return Song(name="La la la")


@pytest.fixture
def playlist():
    return Playlist(name="test playlist")


@pytest.fixture
def song_stand_ins():
    """Two stand-ins that satisfy the Song capability set and record calls."""
    return Mock(spec=Song), Mock(spec=Song)


@pytest.fixture
def restore_logging():
    """Undo any dictConfig applied during a test so caplog keeps working."""
    names = ('use_cases', 'utils', '')
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (list(logger.handlers), logger.propagate, logger.level)

    yield

    for name in names:
        logger = logging.getLogger(name)
        handlers, propagate, level = saved[name]
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()
        logger.propagate = propagate
        logger.setLevel(level)
