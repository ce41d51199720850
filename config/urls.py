from django.conf import settings
from django.urls import include
from django.urls import path

from config.api import api

urlpatterns = [
    # API
    path("api/", api.urls),
]

if settings.DEBUG and "debug_toolbar" in settings.INSTALLED_APPS:
    urlpatterns = [
        path("__debug__/", include("debug_toolbar.urls")),
        *urlpatterns,
    ]
