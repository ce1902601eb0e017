"""
Tests for the SMTP transport
"""
import smtplib
from unittest.mock import patch

import pytest

from doordont.core.config import settings
from doordont.core.exceptions import NotificationError
from doordont.services.external import mailer


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_USER", "team@example.com")
    monkeypatch.setattr(settings, "EMAIL_PASS", "app-password")
    monkeypatch.setattr(settings, "SMTP_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "SMTP_PORT", 465)


def test_unconfigured_mailer_sends_nothing():
    with patch.object(mailer.smtplib, "SMTP_SSL") as smtp:
        assert mailer.send_email("jon@example.com", "Goal update", "body") is False
    smtp.assert_not_called()


def test_send_email(configured):
    with patch.object(mailer.smtplib, "SMTP_SSL") as smtp:
        assert mailer.send_email("jon@example.com", "Goal update", "You promised...") is True

    smtp.assert_called_once_with("smtp.example.com", 465, timeout=30)
    server = smtp.return_value.__enter__.return_value
    server.login.assert_called_once_with("team@example.com", "app-password")
    message = server.send_message.call_args[0][0]
    assert message["To"] == "jon@example.com"
    assert message["From"] == "team@example.com"
    assert message["Subject"] == "Goal update"
    assert message.get_content().strip() == "You promised..."


def test_smtp_failure_raises_notification_error(configured):
    with patch.object(mailer.smtplib, "SMTP_SSL") as smtp:
        smtp.return_value.__enter__.return_value.login.side_effect = \
            smtplib.SMTPAuthenticationError(535, b"bad credentials")
        with pytest.raises(NotificationError):
            mailer.send_email("jon@example.com", "Goal update", "body")
