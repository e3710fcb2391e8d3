"""Django settings for the publication service.

Values are read from the environment so that the same image can run in every
deployment. Defaults are suitable for local development only.
"""

import os
from pathlib import Path

from core.logging import setup_logging


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv(
    "DJANGO_SECRET_KEY", "django-insecure-publication-service-local-development-key"
)

DEBUG = _env_bool("DJANGO_DEBUG", False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",")
    if host.strip()
]


# Application definition

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "django_rq",
    "core",
]

MIDDLEWARE = [
    "core.middleware.RequestIDMiddleware",
    "core.middleware.ProcessTimeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "core.middleware.SecurityContextMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "core.middleware.SecurityHeadersMiddleware",
]

ROOT_URLCONF = "publication_service.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "publication_service.wsgi.application"


# Database
# The schema is owned by the publication data store; every model is unmanaged.

POSTGRES_SCHEMA = os.getenv("POSTGRES_SCHEMA", "public")

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "HOST": os.getenv("POSTGRES_HOST", "localhost"),
        "PORT": os.getenv("POSTGRES_PORT", "5432"),
        "NAME": os.getenv("POSTGRES_DB", "publications"),
        "USER": os.getenv("POSTGRES_USER", "publications"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
        "OPTIONS": {"options": f"-c search_path={POSTGRES_SCHEMA}"},
        "CONN_MAX_AGE": int(os.getenv("POSTGRES_CONN_MAX_AGE", "60")),
    }
}


# Redis backs the Django cache (token introspection, health checks) and RQ.

REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD", "")
REDIS_DB = int(os.getenv("REDIS_DB", "0"))

_redis_auth = f":{REDIS_PASSWORD}@" if REDIS_PASSWORD else ""
REDIS_URL = f"redis://{_redis_auth}{REDIS_HOST}:{REDIS_PORT}/{REDIS_DB}"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": REDIS_URL,
        "KEY_PREFIX": "publication-service",
    }
}

RQ_QUEUES = {
    "default": {
        "HOST": REDIS_HOST,
        "PORT": REDIS_PORT,
        "DB": REDIS_DB,
        "PASSWORD": REDIS_PASSWORD or None,
        "DEFAULT_TIMEOUT": 600,
    }
}


# Password validation

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": (
            "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"
        ),
    },
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]


# Internationalization

LANGUAGE_CODE = "en-gb"
TIME_ZONE = "Europe/London"
USE_I18N = True
USE_TZ = True


# Static files (CSS, JavaScript, Images)

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Django REST Framework

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.auth.oauth2.OAuth2Authentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}


# OAuth2 bearer token validation

OAUTH2_SERVICE_ENABLED = _env_bool("OAUTH2_SERVICE_ENABLED", True)
OAUTH2_INTROSPECTION_ENABLED = _env_bool("OAUTH2_INTROSPECTION_ENABLED", False)
OAUTH2_INTROSPECT_URL = os.getenv("OAUTH2_INTROSPECT_URL", "")
OAUTH2_CLIENT_ID = os.getenv("OAUTH2_CLIENT_ID", "")
OAUTH2_CLIENT_SECRET = os.getenv("OAUTH2_CLIENT_SECRET", "")
OAUTH2_TOKEN_CACHE_PREFIX = "oauth2:token:"
OAUTH2_TOKEN_CACHE_TTL = int(os.getenv("OAUTH2_TOKEN_CACHE_TTL", "60"))
JWT_SECRET = os.getenv("JWT_SECRET", "")


# GOV.UK Notify

GOVUK_NOTIFY_API_KEY = os.getenv("GOVUK_NOTIFY_API_KEY", "")
GOVUK_NOTIFY_BASE_URL = os.getenv(
    "GOVUK_NOTIFY_BASE_URL", "https://api.notifications.service.gov.uk"
)
GOVUK_NOTIFY_TEMPLATE_ID_SUBSCRIPTION = os.getenv(
    "GOVUK_NOTIFY_TEMPLATE_ID_SUBSCRIPTION", ""
)
GOVUK_NOTIFY_TEMPLATE_ID_PDF_AND_SUMMARY = os.getenv(
    "GOVUK_NOTIFY_TEMPLATE_ID_PDF_AND_SUMMARY", ""
)
GOVUK_NOTIFY_TEMPLATE_ID_SUMMARY_ONLY = os.getenv(
    "GOVUK_NOTIFY_TEMPLATE_ID_SUMMARY_ONLY", ""
)
CATH_SERVICE_URL = os.getenv(
    "CATH_SERVICE_URL", "https://www.court-tribunal-hearings.service.gov.uk"
)


# Publication pipeline

NOTIFICATION_RETRY_ATTEMPTS = int(os.getenv("NOTIFICATION_RETRY_ATTEMPTS", "1"))
NOTIFICATION_RETRY_BASE_DELAY_MS = int(
    os.getenv("NOTIFICATION_RETRY_BASE_DELAY_MS", "1000")
)
NOTIFICATION_RETRY_BACKOFF_MULTIPLIER = float(
    os.getenv("NOTIFICATION_RETRY_BACKOFF_MULTIPLIER", "2")
)
NOTIFICATION_MAX_WORKERS = int(os.getenv("NOTIFICATION_MAX_WORKERS", "10"))
PUBLICATION_PROCESSING_ASYNC = _env_bool("PUBLICATION_PROCESSING_ASYNC", True)
TEMP_STORAGE_ROOT = Path(
    os.getenv("TEMP_STORAGE_ROOT", str(BASE_DIR / "storage" / "temp" / "uploads"))
)
SEARCH_EXTRACTION_MAX_DEPTH = int(os.getenv("SEARCH_EXTRACTION_MAX_DEPTH", "64"))


# PDDA HTML uploads

PDDA_HTML_S3_BUCKET = os.getenv("PDDA_HTML_S3_BUCKET", "")
PDDA_HTML_S3_REGION = os.getenv("PDDA_HTML_S3_REGION", "eu-west-2")
PDDA_HTML_S3_ENDPOINT_URL = os.getenv("PDDA_HTML_S3_ENDPOINT_URL") or None
PDDA_HTML_MAX_FILE_SIZE = int(
    os.getenv("PDDA_HTML_MAX_FILE_SIZE", str(10 * 1024 * 1024))
)
DATA_UPLOAD_MAX_MEMORY_SIZE = 12 * 1024 * 1024
FILE_UPLOAD_MAX_MEMORY_SIZE = PDDA_HTML_MAX_FILE_SIZE

# Logging is configured through structlog; Django's dictConfig is left empty.
LOGGING_CONFIG = None
setup_logging()
