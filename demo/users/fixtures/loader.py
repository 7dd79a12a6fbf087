"""
Fixture that seeds the super admin account.

Meant to run once against an empty database. Running it again fails on the
unique username; that is left to the database to report.
"""

from __future__ import annotations

import logging

from demo.users.models import User

from .managers import ObjectManager, PasswordEncoder

logger = logging.getLogger(__name__)

SUPER_ADMIN_USERNAME = "superadmin"
SUPER_ADMIN_PASSWORD = "superadmin"
SUPER_ADMIN_EMAIL = "a.gribet@gmail.com"
SUPER_ADMIN_ROLES = ["ROLE_SUPER_ADMIN"]


class LoadUserData:
    """Creates the super admin user."""

    def __init__(self, encoder: PasswordEncoder):
        self.encoder = encoder

    def load(self, manager: ObjectManager) -> User:
        """
        Build the super admin, persist it and flush the manager.

        Args:
            manager: ObjectManager that stores the user

        Returns:
            The user handed to the manager
        """
        user = User(username=SUPER_ADMIN_USERNAME)
        user.password = self.encoder.encode_password(user, SUPER_ADMIN_PASSWORD)
        user.email = SUPER_ADMIN_EMAIL
        user.enabled = True
        user.set_roles(SUPER_ADMIN_ROLES)

        manager.persist(user)
        manager.flush()

        logger.info("Loaded user %s with roles %s", user.username, user.roles)
        return user
