import logging
from functools import wraps


logger = logging.getLogger('utils')

def error_handler(func):
    """
    A decorator that logs exceptions raised by the wrapped use case method.

    The error is logged together with the traceback and then raised again,
    so the caller still decides how to handle it.

    :param func: The function to be wrapped.
    :return: The wrapped function with error logging.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise
    return wrapper
