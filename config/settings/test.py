"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="ZqDsaWtc8uJTb9Pr0JXn2v1LUeWYpnYq1EphU6aR9NCmtfStoNBI6ZEfLAixj1Eu",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"

# CACHES
# ------------------------------------------------------------------------------
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "",
    },
}

# Records backend
# ------------------------------------------------------------------------------
# Requests never leave the process: tests plug an httpx.MockTransport in.
RECORDS_API_URL = "http://records.test/api"
PORTFOLIO_SCALE = 1

# Your stuff...
# ------------------------------------------------------------------------------
