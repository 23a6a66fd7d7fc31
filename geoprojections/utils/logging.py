"""Logging utility for geoprojections"""

__all__ = ['LOGGER', 'log_transform']

import functools
import logging

LOGGER = logging.getLogger('geoprojections')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)


def log_transform(func):
    """
    Decorates a coordinate transform method so that its arguments, result and any
    raised error are logged at DEBUG level.

    Nothing is formatted unless the package logger has DEBUG enabled.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return func(self, *args, **kwargs)

        call_args = ', '.join(
            [repr(arg) for arg in args] + [f'{k}={v!r}' for k, v in kwargs.items()]
        )
        try:
            result = func(self, *args, **kwargs)
        except Exception as exc:
            LOGGER.debug('%r.%s(%s) failed: %s', self, func.__name__, call_args, exc)
            raise

        LOGGER.debug('%r.%s(%s) -> %r', self, func.__name__, call_args, result)
        return result

    return wrapper
