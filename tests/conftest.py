"""
Pytest configuration for the demo site tests.

pytest-django reads DJANGO_SETTINGS_MODULE from pyproject.toml; the
setdefault here covers running a single file from another directory.
"""

import os

import pytest


def pytest_configure():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "demo.settings_test")


@pytest.fixture
def client():
    """Django test client fixture."""
    from django.test import Client
    return Client()
