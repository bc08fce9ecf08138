from pathlib import Path

from environs import Env

env = Env()
env.read_env(recurse=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = env.str('SECRET_KEY', 'django-insecure-0q9v$1k!n7@t3c+picqer-mirror-dev-only-key')

DEBUG = env.bool('DEBUG', False)

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

APP_VERSION = env.str('APP_VERSION', '1.0.0')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',
    'integrator',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': env.str('LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'django.db.backends': {
            'level': 'WARNING',
        },
    },
}

# Celery
CELERY_BROKER_URL = env.str('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_RESULT_BACKEND = CELERY_BROKER_URL
SYNC_SCHEDULE_SECONDS = env.int('SYNC_SCHEDULE_SECONDS', 0)
CELERY_BEAT_SCHEDULE = {}
if SYNC_SCHEDULE_SECONDS > 0:
    CELERY_BEAT_SCHEDULE['sync-all-entities'] = {
        'task': 'integrator.tasks.sync_all_entities',
        'schedule': SYNC_SCHEDULE_SECONDS,
    }

# Picqer API
PICQER_API_KEY = env.str('PICQER_API_KEY', '')
PICQER_BASE_URL = env.str('PICQER_BASE_URL', env.str('PICQER_API_URL', ''))
PICQER_REQUESTS_PER_MINUTE = env.int('PICQER_REQUESTS_PER_MINUTE', 30)

# Remote client: swap via env or override in dev.py/prod.py
SYNC_CLIENT_CLASS = env.str('SYNC_CLIENT_CLASS', 'integrator.clients.picqer_client.PicqerClient')
