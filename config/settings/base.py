"""
Base Django settings for the storefront catalog API.

This module defines configuration shared across all environments
(dev / staging / production). Environment-specific overrides live in:
`dev.py`, `staging.py`, and `prod.py`.

Notes:
- Environment variables are loaded via `django-environ`.
- Products are not stored locally: listings come from the hosted Storefront
  API configured by the STOREFRONT_* settings below.
- Where applicable, helpers are Docker-secrets friendly (e.g., *_FILE vars).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import environ

# ---------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------
# => parents[2] points to <project_root>
BASE_DIR = Path(__file__).resolve().parents[2]

# ---------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------
env = environ.Env(
    DEBUG=(bool, True),
)

# Load .env if present (prefer <project_root>/.env; fall back to config/.env)
env_file_candidates = [BASE_DIR / ".env", BASE_DIR / "config" / ".env"]
for _env_path in env_file_candidates:
    if _env_path.exists():
        environ.Env.read_env(_env_path)
        break


def read_secret(path: str | None, default: str = "") -> str:
    """
    Read a secret from a file (e.g., `/run/secrets/...`); fall back to `default`.

    Returns the stripped file contents on success, otherwise `default`.
    """
    if not path:
        return default
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return default


# --- Core / Security ----------------------------------------------------------
DEBUG: bool = env.bool("DEBUG", default=True)

SECRET_KEY: str = read_secret(
    env("DJANGO_SECRET_KEY_FILE", default=None),
    default=env("SECRET_KEY", default="dev-secret-key-change-me"),
)

ALLOWED_HOSTS: list[str] = env.list("ALLOWED_HOSTS", default=["*"])
CSRF_TRUSTED_ORIGINS: list[str] = env.list("CSRF_TRUSTED_ORIGINS", default=[])

if not DEBUG and ALLOWED_HOSTS == ["*"]:
    raise RuntimeError("Set ALLOWED_HOSTS explicitly for non-debug runs.")

# ---------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------
INSTALLED_APPS = [
    # Django apps (auth/contenttypes back DRF's anonymous user)
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    # Third-party apps
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "catalog.apps.CatalogConfig",
]

# ---------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# ---------------------------------------------------------------------
# Templates (browsable API + Swagger UI)
# ---------------------------------------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# ---------------------------------------------------------------------
# URL / WSGI / ASGI
# ---------------------------------------------------------------------
ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# ---------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------
# Only Django internals use it; SQLite unless DATABASE_URL says otherwise.
DATABASES = {"default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}")}

# ---------------------------------------------------------------------
# Internationalization
# ---------------------------------------------------------------------
LANGUAGE_CODE = env("LANGUAGE_CODE", default="en")
TIME_ZONE = env("TZ", default="UTC")
USE_I18N = True
USE_TZ = True

# ---------------------------------------------------------------------
# Static
# ---------------------------------------------------------------------
STATIC_URL = "/static/"
STATIC_ROOT = Path(env("STATIC_ROOT", default=BASE_DIR / "staticfiles"))

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ---------------------------------------------------------------------
# Storefront API (hosted commerce platform)
# ---------------------------------------------------------------------
# Empty domain = not configured: listings answer 502, health reports null.
STOREFRONT_DOMAIN: str = env("PUBLIC_STORE_DOMAIN", default="")
STOREFRONT_ACCESS_TOKEN: str = read_secret(
    env("PUBLIC_STOREFRONT_API_TOKEN_FILE", default=None),
    default=env("PUBLIC_STOREFRONT_API_TOKEN", default=""),
)
STOREFRONT_API_VERSION: str = env("STOREFRONT_API_VERSION", default="2024-10")
STOREFRONT_TIMEOUT: float = env.float("STOREFRONT_TIMEOUT", default=10.0)

# Products per collection page
CATALOG_PAGE_SIZE: int = env.int("CATALOG_PAGE_SIZE", default=8)

# Whether an unreachable storefront turns the health status into "error"
HEALTH_STOREFRONT_REQUIRED: bool = env.bool("HEALTH_STOREFRONT_REQUIRED", default=False)

# ---------------------------------------------------------------------
# Django REST Framework (DRF)
# ---------------------------------------------------------------------
REST_FRAMEWORK: dict[str, Any] = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    # The catalog is public and stateless: no sessions, no auth.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
}

if not DEBUG:
    REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = ["rest_framework.renderers.JSONRenderer"]
else:
    REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ]

# ---------------------------------------------------------------------
# OpenAPI (drf-spectacular)
# ---------------------------------------------------------------------
SPECTACULAR_SETTINGS = {
    "TITLE": env("OPENAPI_TITLE", default="Storefront catalog API"),
    "DESCRIPTION": "Collection listings with URL-driven sorting and filtering.",
    "VERSION": env("OPENAPI_VERSION", default="0.1.0"),
    "SERVERS": [{"url": env("OPENAPI_SERVER_URL", default="http://localhost:8000")}],
    "SERVE_INCLUDE_SCHEMA": env.bool("OPENAPI_SERVE_INCLUDE_SCHEMA", default=DEBUG),
    "SWAGGER_UI_SETTINGS": {
        "deepLinking": True,
        "displayRequestDuration": True,
    },
}

# --- Logging ------------------------------------------------------------------
# Simple console logs by default; tune levels/handlers for production as needed.
LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"simple": {"format": "[{levelname}] {name}: {message}", "style": "{"}},
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "simple"}},
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "django.request": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "catalog": {"handlers": ["console"], "level": "INFO"},
    },
}

# --- Production security toggles ---------------------------------------------
# Auto-harden when DEBUG=False. You can still override via env in `prod.py`.
if not DEBUG:
    SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
    SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=60 * 60 * 24 * 30)  # 30 days
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True
    CSRF_COOKIE_SECURE = True

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True
