"""
URL configuration for the RouteDash backend.

Every API route lives under /api/; the orders and restaurants apps register
their own base endpoints.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/", include("orders.urls")),  # /api/orders/
    path("api/", include("restaurants.urls")),  # /api/restaurants/
]
