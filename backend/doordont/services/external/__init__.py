"""
External transports
"""
from .mailer import send_email, is_email_configured

__all__ = ['send_email', 'is_email_configured']
