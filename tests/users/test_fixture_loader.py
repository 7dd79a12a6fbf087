"""
Fixture loader tests.

Tests verify:
- Exactly one super admin is persisted, then flushed
- The password handed to the manager is the encoded one
- Errors from the encoder and the manager propagate
- The Django-backed manager and encoder write a usable row
"""

from unittest.mock import MagicMock

import pytest
from django.contrib.auth.hashers import check_password
from django.db import IntegrityError

from demo.users.fixtures import DjangoObjectManager, DjangoPasswordEncoder, LoadUserData
from demo.users.models import User


class RecordingManager:
    """ObjectManager fake that records calls in order."""

    def __init__(self):
        self.calls = []

    def persist(self, obj):
        self.calls.append(("persist", obj))

    def flush(self):
        self.calls.append(("flush", None))


class ReversingEncoder:
    def encode_password(self, user, plaintext):
        return "encoded:" + plaintext[::-1]


class TestLoadUserData:
    def test_persists_one_super_admin_then_flushes(self):
        manager = RecordingManager()

        LoadUserData(encoder=ReversingEncoder()).load(manager)

        assert [name for name, _ in manager.calls] == ["persist", "flush"]
        user = manager.calls[0][1]
        assert user.username == "superadmin"
        assert user.email == "a.gribet@gmail.com"
        assert user.enabled is True
        assert user.roles == ["ROLE_SUPER_ADMIN"]

    def test_password_is_encoded(self):
        manager = RecordingManager()

        user = LoadUserData(encoder=ReversingEncoder()).load(manager)

        assert user.password == "encoded:nimdarepus"
        assert user.password != "superadmin"

    def test_encoder_receives_user_and_plaintext(self):
        encoder = MagicMock()
        encoder.encode_password.return_value = "hash"

        user = LoadUserData(encoder=encoder).load(RecordingManager())

        encoder.encode_password.assert_called_once_with(user, "superadmin")

    def test_encoder_error_propagates(self):
        encoder = MagicMock()
        encoder.encode_password.side_effect = RuntimeError("no hasher")
        manager = RecordingManager()

        with pytest.raises(RuntimeError, match="no hasher"):
            LoadUserData(encoder=encoder).load(manager)

        assert manager.calls == []

    def test_flush_error_propagates(self):
        manager = MagicMock()
        manager.flush.side_effect = IntegrityError("duplicate")

        with pytest.raises(IntegrityError):
            LoadUserData(encoder=ReversingEncoder()).load(manager)

        manager.persist.assert_called_once()


@pytest.mark.django_db
class TestDjangoBackedLoad:
    def test_creates_row_with_hashed_password(self):
        LoadUserData(encoder=DjangoPasswordEncoder()).load(DjangoObjectManager())

        user = User.objects.get(username="superadmin")
        assert user.email == "a.gribet@gmail.com"
        assert user.enabled is True
        assert user.roles == ["ROLE_SUPER_ADMIN"]
        assert user.password != "superadmin"
        assert check_password("superadmin", user.password)

    def test_second_run_fails_on_unique_username(self):
        fixture = LoadUserData(encoder=DjangoPasswordEncoder())
        fixture.load(DjangoObjectManager())

        with pytest.raises(IntegrityError):
            fixture.load(DjangoObjectManager())

        assert User.objects.filter(username="superadmin").count() == 1


@pytest.mark.django_db
class TestDjangoObjectManager:
    def test_persist_does_not_write_until_flush(self):
        manager = DjangoObjectManager()
        manager.persist(User(username="a", email="a@example.com"))

        assert User.objects.count() == 0
        assert len(manager.pending) == 1

        manager.flush()

        assert User.objects.count() == 1
        assert manager.pending == []

    def test_same_object_is_queued_once(self):
        manager = DjangoObjectManager()
        user = User(username="a", email="a@example.com")

        manager.persist(user)
        manager.persist(user)

        assert len(manager.pending) == 1

    def test_flush_with_nothing_pending(self):
        DjangoObjectManager().flush()

        assert User.objects.count() == 0
