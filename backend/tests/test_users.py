"""Tests for the User entity: defaults, invariants, slug and personal data."""
import json
import logging
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from eventboard import notifications
from eventboard.models import User
from eventboard.personal_data import PersonalDataSelection
from eventboard.schemas.user import UserOut
from tests.factories import create_test_user


class TestUserDefaults:
    """Column defaults and stored invariants."""

    def test_flags_default_to_false(self, db):
        user = create_test_user(db, name="Alice")
        assert user.admin is False
        assert user.can_publish_events_immediately is False
        assert user.email_verified_at is None

    def test_id_assigned_on_insert(self, db):
        user = create_test_user(db)
        assert user.id is not None
        assert len(user.id) == 36

    def test_id_cannot_be_reassigned(self, db):
        user = create_test_user(db)
        with pytest.raises(ValueError):
            user.id = "00000000-0000-0000-0000-000000000000"

    def test_setting_same_id_is_allowed(self, db):
        user = create_test_user(db)
        user.id = user.id

    def test_email_is_unique(self, db):
        create_test_user(db, name="Alice", email="same@example.com")
        with pytest.raises(IntegrityError):
            create_test_user(db, name="Bob", email="same@example.com")

    def test_has_verified_email(self, db):
        user = create_test_user(db, email_verified_at=datetime.now(timezone.utc))
        assert user.has_verified_email()


class TestSlug:
    def test_slug_from_name(self):
        assert User(name="Ada Lovelace").slug == "ada-lovelace"

    def test_slug_transliterates_and_drops_punctuation(self):
        assert User(name="  Élodie Dupont!  ").slug == "elodie-dupont"

    def test_slug_need_not_be_unique(self, db):
        first = create_test_user(db, name="Sam Smith", email="sam1@example.com")
        second = create_test_user(db, name="Sam Smith", email="sam2@example.com")
        assert first.slug == second.slug

    def test_slug_follows_name_changes(self):
        user = User(name="Old Name")
        user.name = "New Name"
        assert user.slug == "new-name"


class TestCountry:
    def test_country_is_normalized(self):
        user = User(name="Ana", country=" pt ")
        assert user.country == "PT"
        assert user.has_country

    def test_blank_country_is_none(self):
        user = User(name="Ana", country="")
        assert user.country is None
        assert not user.has_country

    def test_invalid_country_rejected(self):
        with pytest.raises(ValueError):
            User(name="Ana", country="Portugal")


class TestPresentation:
    def test_attributes_hide_credentials(self, db):
        user = create_test_user(db, name="Alice", remember_token="tok")
        data = user.attributes_to_dict()
        assert "password" not in data
        assert "remember_token" not in data
        assert data["email"] == "alice@example.com"
        assert data["admin"] is False

    def test_attributes_are_json_safe(self, db):
        user = create_test_user(db, email_verified_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))
        data = user.attributes_to_dict()
        assert data["email_verified_at"].startswith("2024-05-01T12:00:00")
        json.dumps(data)

    def test_user_out_schema(self, db):
        user = create_test_user(db, name="Grace Hopper", country="us")
        out = UserOut.model_validate(user)
        assert out.slug == "grace-hopper"
        assert out.country == "US"
        assert "password" not in out.model_dump()


class TestPersonalDataExport:
    def test_export_name(self):
        assert User(name="Ada Lovelace").personal_data_export_name() == "personal-data-ada-lovelace.zip"

    def test_select_personal_data(self, db):
        user = create_test_user(db, name="Ada Lovelace")
        selection = PersonalDataSelection()
        user.select_personal_data(selection)
        assert list(selection.files) == ["user.json"]
        document = selection.files["user.json"]
        assert document["id"] == user.id
        assert document["name"] == "Ada Lovelace"
        assert "password" not in document


class _Welcome(notifications.Notification):
    pass


class _RecordingNotifier:
    def __init__(self):
        self.sent = []

    def send(self, notifiable, notification):
        self.sent.append((notifiable, notification))


class TestNotifications:
    def test_mail_route_is_email(self):
        user = User(name="Ada", email="ada@example.com")
        assert user.route_notification_for("mail") == "ada@example.com"

    def test_unknown_channel_has_no_route(self):
        assert User(name="Ada", email="ada@example.com").route_notification_for("sms") is None

    def test_notify_hands_off_to_installed_notifier(self, db, monkeypatch):
        recorder = _RecordingNotifier()
        monkeypatch.setattr(notifications, "_notifier", recorder)
        user = create_test_user(db, name="Ada")
        welcome = _Welcome()
        user.notify(welcome)
        assert recorder.sent == [(user, welcome)]

    def test_set_notifier_returns_previous(self, monkeypatch):
        original = notifications.get_notifier()
        monkeypatch.setattr(notifications, "_notifier", original)
        recorder = _RecordingNotifier()
        assert notifications.set_notifier(recorder) is original
        assert notifications.get_notifier() is recorder

    def test_default_notifier_logs_delivery(self, db, caplog):
        user = create_test_user(db, name="Ada")
        with caplog.at_level(logging.INFO, logger="eventboard"):
            notifications.LoggingNotifier().send(user, _Welcome())
        assert "Sending _Welcome via mail to ada@example.com" in caplog.text

    def test_default_notifier_skips_missing_route(self, caplog):
        class _Sms(notifications.Notification):
            channels = ("sms",)

        with caplog.at_level(logging.WARNING, logger="eventboard"):
            notifications.LoggingNotifier().send(User(name="Ada", email="ada@example.com"), _Sms())
        assert "No sms route" in caplog.text
