"""
Django app configuration for demo users.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "demo.users"
    label = "users"
    verbose_name = "Demo Users"
