"""Base settings for PIREP Service."""
import os
from pathlib import Path

from celery.schedules import crontab

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
DEBUG = os.environ.get('DEBUG', 'True').lower() == 'true'
ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '*').split(',')

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'rest_framework',
    'corsheaders',
    'django_filters',
    'apps.core.apps.CoreConfig',
    'apps.api.apps.ApiConfig',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'shared.common.middleware.RequestIDMiddleware',
    'shared.common.middleware.LoggingMiddleware',
]

ROOT_URLCONF = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.environ.get('DB_NAME', 'pirep_service_db'),
        'USER': os.environ.get('DB_USER', 'pirep_service_user'),
        'PASSWORD': os.environ.get('DB_PASSWORD', 'pirep_service_password'),
        'HOST': os.environ.get('DB_HOST', 'pgbouncer'),
        'PORT': os.environ.get('DB_PORT', '6432'),
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True
STATIC_URL = 'static/'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    # Identity comes from the X-Pilot-ID header set by the gateway
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_FILTER_BACKENDS': ['django_filters.rest_framework.DjangoFilterBackend'],
    'EXCEPTION_HANDLER': 'shared.common.exceptions.custom_exception_handler',
}

CORS_ALLOW_ALL_ORIGINS = DEBUG

REDIS_URL = os.environ.get('REDIS_URL', 'redis://redis:6379/7')
EVENT_BACKEND = os.environ.get('EVENT_BACKEND', 'redis')

CELERY_BROKER_URL = os.environ.get('CELERY_BROKER_URL', REDIS_URL)
CELERY_RESULT_BACKEND = os.environ.get('CELERY_RESULT_BACKEND', REDIS_URL)
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = TIME_ZONE
CELERY_TASK_TIME_LIMIT = 600  # 10 minutes

CELERY_BEAT_SCHEDULE = {
    'recalculate-aircraft-stats': {
        'task': 'apps.core.tasks.recalculate_aircraft_stats',
        'schedule': crontab(hour=3, minute=0),  # Nightly
    },
    'recalculate-pilot-stats': {
        'task': 'apps.core.tasks.recalculate_pilot_stats',
        'schedule': crontab(hour=3, minute=30),
    },
}

# Virtual airline settings
VA_SETTINGS = {
    'pireps.duplicate_check_time': int(os.environ.get('PIREPS_DUPLICATE_CHECK_TIME', '10')),
    'pireps.remove_bid_on_accept': os.environ.get('PIREPS_REMOVE_BID_ON_ACCEPT', 'False').lower() == 'true',
    'pilots.count_transfer_hours': os.environ.get('PILOTS_COUNT_TRANSFER_HOURS', 'True').lower() == 'true',
}

SERVICE_NAME = 'pirep-service'
SERVICE_PORT = 8016

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'json': {
            '()': 'pythonjsonlogger.jsonlogger.JsonFormatter',
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'json',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.environ.get('LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'django.db.backends': {
            'level': 'WARNING',
        },
    },
}
