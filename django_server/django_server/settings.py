"""
Django settings for the CropAdviser backend.

Every deployment specific value is read with python-decouple, either from the
environment or from a .env file next to manage.py.
"""
from pathlib import Path

from decouple import config, Csv

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config('SECRET_KEY', default='django-insecure-crop-adviser-development-key')

DEBUG = config('DEBUG', default=False, cast=bool)

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

CSRF_TRUSTED_ORIGINS = config('CSRF_TRUSTED_ORIGINS', default='', cast=Csv())

FRONTEND_URL = config('FRONTEND_URL', default='/')


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'crop_adviser_backend',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'django_server.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'django_server.wsgi.application'
ASGI_APPLICATION = 'django_server.asgi.application'


DB_ENGINE = config('DB_ENGINE', default='django.db.backends.sqlite3')

if DB_ENGINE == 'django.db.backends.sqlite3':
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': config('DB_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': config('DB_NAME'),
            'USER': config('DB_USER', default=''),
            'PASSWORD': config('DB_PASSWORD', default=''),
            'HOST': config('DB_HOST', default='localhost'),
            'PORT': config('DB_PORT', default=''),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_USER_MODEL = 'crop_adviser_backend.Userprofile'

# Sessions live in the database so they survive restarts of the web process.
SESSION_ENGINE = 'django.contrib.sessions.backends.db'
SESSION_COOKIE_AGE = config('SESSION_COOKIE_AGE', default=60 * 60 * 24 * 7, cast=int)

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
        'crop_adviser_backend.services.auth_services.OpenIdBearerAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'crop_adviser_backend.exceptions.custom_exception_handler.custom_exception_handler',
}


# OpenID Connect identity provider, authentication is delegated to it entirely
OIDC_ISSUER = config('OIDC_ISSUER', default='')
OIDC_AUTHORIZATION_ENDPOINT = config('OIDC_AUTHORIZATION_ENDPOINT', default=f'{OIDC_ISSUER}/authorize')
OIDC_TOKEN_ENDPOINT = config('OIDC_TOKEN_ENDPOINT', default=f'{OIDC_ISSUER}/token')
OIDC_USERINFO_ENDPOINT = config('OIDC_USERINFO_ENDPOINT', default=f'{OIDC_ISSUER}/userinfo')
OIDC_END_SESSION_ENDPOINT = config('OIDC_END_SESSION_ENDPOINT', default='')
OIDC_CLIENT_ID = config('OIDC_CLIENT_ID', default='')
OIDC_CLIENT_SECRET = config('OIDC_CLIENT_SECRET', default='')
OIDC_SCOPE = config('OIDC_SCOPE', default='openid email profile')
OIDC_REQUEST_TIMEOUT = config('OIDC_REQUEST_TIMEOUT', default=10, cast=int)


# Weather snapshots younger than this are served from the database
WEATHER_MAX_AGE_MINUTES = config('WEATHER_MAX_AGE_MINUTES', default=60, cast=int)

# /api/init is a development convenience, switch it off in production
SEED_ENDPOINT_ENABLED = config('SEED_ENDPOINT_ENABLED', default=True, cast=bool)
SEED_ON_STARTUP = config('SEED_ON_STARTUP', default=False, cast=bool)


LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


LOG_LEVEL = config('LOG_LEVEL', default='INFO')
DB_LOG_LEVEL = config('DB_LOG_LEVEL', default='WARNING')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {module}:{lineno} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'database': {
            'class': 'django_server.custom_logger.DatabaseLogHandler',
            'level': DB_LOG_LEVEL,
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'crop_adviser': {
            'handlers': ['console', 'database'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
