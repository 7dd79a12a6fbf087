"""
Django app configuration for the code explorer.

Provides the show_source_code template tag (load it with
{% load source_code %}).
"""

from django.apps import AppConfig


class CodeExplorerConfig(AppConfig):
    name = "demo.code_explorer"
    label = "code_explorer"
    verbose_name = "Code Explorer"
