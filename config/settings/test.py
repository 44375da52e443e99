"""
Test-specific Django settings.

Runs on SQLite by default. Set POSTGRES_DB (and the other POSTGRES_*
variables) to run the suite, including the row-locking tests, on PostgreSQL.
"""

import os

from .base import *  # noqa: F403,F405

ENVIRONMENT = "test"

SECRET_KEY = "test-secret-key-not-for-production"

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

if os.getenv("POSTGRES_DB"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("POSTGRES_DB"),
            "USER": os.getenv("POSTGRES_USER", "postgres"),
            "PASSWORD": os.getenv("POSTGRES_PASSWORD", "postgres"),
            "HOST": os.getenv("POSTGRES_HOST", "localhost"),
            "PORT": os.getenv("POSTGRES_PORT", "5432"),
            "ATOMIC_REQUESTS": False,
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

ORDER_TRANSACTION_TIMEOUT = 15

# Faster password hashing in tests
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Console only, no log files from test runs
LOGGING = build_logging(None, level="WARNING")  # noqa: F405
