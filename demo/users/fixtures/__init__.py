"""
User fixtures.

Seeds the demo database with its initial accounts.
"""

from .loader import LoadUserData
from .managers import (
    DjangoObjectManager,
    DjangoPasswordEncoder,
    ObjectManager,
    PasswordEncoder,
)

__all__ = [
    "DjangoObjectManager",
    "DjangoPasswordEncoder",
    "LoadUserData",
    "ObjectManager",
    "PasswordEncoder",
]
