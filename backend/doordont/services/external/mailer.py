"""
Mailer - SMTP mail transport
"""
import logging
import smtplib
from email.message import EmailMessage

from doordont.core.config import settings
from doordont.core.exceptions import NotificationError

logger = logging.getLogger(__name__)


def is_email_configured() -> bool:
    """Check whether SMTP credentials are present"""
    return bool(settings.EMAIL_USER and settings.EMAIL_PASS)


def build_message(to_address: str, subject: str, body: str) -> EmailMessage:
    message = EmailMessage()
    message["From"] = settings.EMAIL_USER
    message["To"] = to_address
    message["Subject"] = subject
    message.set_content(body)
    return message


def send_email(to_address: str, subject: str, body: str) -> bool:
    """
    Send a plain-text email over SMTP with SSL

    Args:
        to_address: Recipient address
        subject: Subject line
        body: Plain-text body

    Returns:
        True once the server accepted the message, False if email is not configured

    Raises:
        NotificationError: If the SMTP exchange fails
    """
    if not is_email_configured():
        logger.warning("Email credentials not found. Email notifications are disabled.")
        return False

    logger.info(f"[EMAIL] Sending '{subject}' to {to_address}")
    try:
        with smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT, timeout=30) as server:
            server.login(settings.EMAIL_USER, settings.EMAIL_PASS)
            server.send_message(build_message(to_address, subject, body))
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"[EMAIL] Send failed: {e}")
        raise NotificationError(f"Failed to send email: {e}")

    logger.info(f"[EMAIL] Email sent to {to_address}")
    return True
