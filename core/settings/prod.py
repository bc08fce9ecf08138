from .base import *  # noqa: F401,F403
from .base import env

DEBUG = False

SECRET_KEY = env.str('SECRET_KEY')  # required, no default

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS')

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': env.str('DB_NAME', env.str('SQL_DATABASE', 'picqer_mirror')),
        'USER': env.str('DB_USER', env.str('SQL_USER', 'postgres')),
        'PASSWORD': env.str('DB_PASSWORD', env.str('SQL_PASSWORD', 'postgres')),
        'HOST': env.str('DB_HOST', env.str('SQL_SERVER', 'db')),
        'PORT': env.str('DB_PORT', env.str('SQL_PORT', '5432')),
        'OPTIONS': {
            'sslmode': env.str('DB_SSLMODE', 'require'),
        },
    }
}

# Security
SECURE_SSL_REDIRECT = env.bool('SECURE_SSL_REDIRECT', True)
SECURE_HSTS_SECONDS = env.int('SECURE_HSTS_SECONDS', 31536000)
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
