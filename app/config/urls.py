"""
URL configuration for the job board API.
"""

from common.views import api_root, health_check
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    path("", api_root, name="api_root"),
    # Admin
    path("admin/", admin.site.urls),
    # API Endpoints
    path("api/", include("job.urls")),
    path("api/auth/", include("user.urls")),
    # Health Check
    path("health", health_check, name="health_check"),
    path("health/", health_check),
    # API Documentation (Spectacular)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]

handler404 = "common.views.endpoint_not_found"
handler500 = "common.views.server_error"
