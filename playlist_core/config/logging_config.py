import logging
import logging.config
import os
from typing import Optional


class PlaylistFilter(logging.Filter):
    def filter(self, record):
        if getattr(record, 'playlist', None) is None:
            record.playlist = '-'  # Set default playlist if not provided
        return True


def build_logging_config(level: str = 'INFO', log_file: Optional[str] = None) -> dict:
    handlers = {
        'console': {
            'level': level,
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['playlist_filter']
        },
    }
    if log_file:
        handlers['file'] = {
            'level': level,
            'class': 'logging.FileHandler',
            'filename': log_file,
            'formatter': 'standard',
            'filters': ['playlist_filter']
        }
    handler_names = list(handlers)

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(playlist)s - %(message)s'
            },
        },
        'filters': {
            'playlist_filter': {
                '()': PlaylistFilter,
            },
        },
        'handlers': handlers,
        'loggers': {
            'use_cases': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            'utils': {
                'handlers': handler_names,
                'level': level,
                'propagate': False,
            },
            '': {
                'handlers': handler_names,
                'level': level,
                'propagate': True,
            }
        }
    }


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> dict:
    """
    Applies the logging configuration with logging.config.dictConfig.

    Values not passed explicitly are read from the PLAYLIST_LOG_LEVEL and
    PLAYLIST_LOG_FILE environment variables. Without a log file only the
    console handler is installed.

    :param level: Log level name, e.g. 'INFO' or 'DEBUG'.
    :param log_file: Path of the file handler's log file.
    :return: The applied configuration dict.
    """
    level = (level or os.getenv('PLAYLIST_LOG_LEVEL', 'INFO')).upper()
    log_file = log_file or os.getenv('PLAYLIST_LOG_FILE')
    config = build_logging_config(level=level, log_file=log_file)
    logging.config.dictConfig(config)
    return config
