"""
User models for the demo site.

A deliberately small account record: the seeded admin is created by
demo.users.fixtures and never changed by application code.
"""

from django.db import models


# =============================================================================
# ABSTRACT BASE CLASSES
# =============================================================================


class TimestampedModel(models.Model):
    """
    Abstract base class with created_at and updated_at timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# =============================================================================
# USER
# =============================================================================


class User(TimestampedModel):
    """
    Demo site account.

    The password column only ever holds an encoded hash; encoding is done
    by whoever creates the user (see demo.users.fixtures.managers).
    Roles are a set of identifiers such as "ROLE_SUPER_ADMIN", stored as a
    JSON list.
    """

    username = models.CharField(max_length=180, unique=True)
    password = models.CharField(max_length=255)
    email = models.EmailField(max_length=180)
    enabled = models.BooleanField(default=False)
    roles = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "demo_user"
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["username"]

    def __str__(self) -> str:
        return self.username

    def set_roles(self, roles) -> None:
        """Replace the roles, upper-cased and without duplicates."""
        normalized: list[str] = []
        for role in roles:
            role = str(role).upper()
            if role not in normalized:
                normalized.append(role)
        self.roles = normalized

    def has_role(self, role: str) -> bool:
        return role.upper() in self.roles
