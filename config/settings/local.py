"""
Local development settings.
"""
from .base import *  # noqa: F401,F403
from .base import LOGGING, config

DEBUG = config('DEBUG', default=True, cast=bool)
ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

LOGGING['loggers']['apps']['level'] = 'DEBUG'
