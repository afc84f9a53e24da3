"""Settings used by the pytest suite."""

from .base import *  # noqa: F401,F403
from .base import get_env

DEBUG = False

SECRET_KEY = 'test-secret-key'

TEST_DB_ENGINE = get_env('TEST_DB_ENGINE', 'django.db.backends.sqlite3')

# SQLite runs in memory; any other engine (PostgreSQL for the race tests)
# is configured through TEST_DB_* variables.
DATABASES = {
    'default': {
        'ENGINE': TEST_DB_ENGINE,
        'NAME': get_env(
            'TEST_DB_NAME',
            ':memory:' if TEST_DB_ENGINE.endswith('sqlite3') else 'cat_hotel',
        ),
        'USER': get_env('TEST_DB_USER', ''),
        'PASSWORD': get_env('TEST_DB_PASSWORD', ''),
        'HOST': get_env('TEST_DB_HOST', ''),
        'PORT': get_env('TEST_DB_PORT', ''),
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'
