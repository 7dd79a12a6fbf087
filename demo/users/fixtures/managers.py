"""
Persistence and password-encoding capabilities used by fixtures.

Fixtures receive these explicitly instead of looking them up, so tests can
hand in fakes and the management command hands in the Django-backed ones.
"""

from __future__ import annotations

import logging
from typing import Protocol

from django.contrib.auth.hashers import make_password
from django.db import models, transaction

logger = logging.getLogger(__name__)


class ObjectManager(Protocol):
    """Queues objects for persistence and writes them on flush."""

    def persist(self, obj) -> None: ...

    def flush(self) -> None: ...


class PasswordEncoder(Protocol):
    """Turns a plaintext password into the stored one-way hash."""

    def encode_password(self, user, plaintext: str) -> str: ...


class DjangoObjectManager:
    """
    ObjectManager backed by the Django ORM.

    persist() only queues the instance; flush() saves every queued instance
    in queue order inside a single transaction, then empties the queue.
    Database errors (IntegrityError on a duplicate username, for example)
    propagate to the caller.
    """

    def __init__(self, using: str = "default"):
        self.using = using
        self._pending: list[models.Model] = []

    @property
    def pending(self) -> list[models.Model]:
        return list(self._pending)

    def persist(self, obj: models.Model) -> None:
        if obj not in self._pending:
            self._pending.append(obj)

    def flush(self) -> None:
        if not self._pending:
            return

        with transaction.atomic(using=self.using):
            for obj in self._pending:
                obj.save(using=self.using)

        logger.debug("Flushed %d object(s) to %s", len(self._pending), self.using)
        self._pending.clear()


class DjangoPasswordEncoder:
    """PasswordEncoder using the hashers configured in PASSWORD_HASHERS."""

    def encode_password(self, user, plaintext: str) -> str:
        # The user is not needed by Django's hashers; salts are random.
        return make_password(plaintext)
