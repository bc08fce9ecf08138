from .base import *  # noqa: F401,F403
from .base import BASE_DIR

DEBUG = False

ALLOWED_HOSTS = ['testserver']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test.sqlite3',
    }
}

PICQER_API_KEY = 'test-api-key'
PICQER_BASE_URL = 'https://example.picqer.com/api/v1'
# 1 ms between requests keeps client tests fast
PICQER_REQUESTS_PER_MINUTE = 60000

SYNC_CLIENT_CLASS = 'integrator.clients.picqer_client.PicqerClient'

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BEAT_SCHEDULE = {}
