"""
User model tests.
"""

import pytest
from django.db import IntegrityError

from demo.users.models import User


class TestUserRoles:
    def test_set_roles_uppercases_and_dedupes(self):
        user = User(username="a")

        user.set_roles(["role_admin", "ROLE_ADMIN", "role_user"])

        assert user.roles == ["ROLE_ADMIN", "ROLE_USER"]

    def test_has_role(self):
        user = User(username="a", roles=["ROLE_SUPER_ADMIN"])

        assert user.has_role("ROLE_SUPER_ADMIN")
        assert user.has_role("role_super_admin")
        assert not user.has_role("ROLE_USER")

    def test_defaults(self):
        user = User(username="a")

        assert user.enabled is False
        assert user.roles == []
        assert str(user) == "a"


@pytest.mark.django_db
class TestUserSchema:
    def test_username_is_unique(self):
        User.objects.create(username="a", email="a@example.com")

        with pytest.raises(IntegrityError):
            User.objects.create(username="a", email="other@example.com")

    def test_roles_round_trip_through_json(self):
        User.objects.create(username="a", email="a@example.com", roles=["ROLE_SUPER_ADMIN"])

        assert User.objects.get(username="a").roles == ["ROLE_SUPER_ADMIN"]
