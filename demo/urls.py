"""
URL configuration for the demo site.

Unknown paths fall through to Django's 404 page, which renders without a
resolved view.
"""

from django.urls import include, path

urlpatterns = [
    path("users/", include("demo.users.urls", namespace="users")),
]
