"""Notification utilities - email."""

from src.oxhub.core.notifications.email import send_otp_email

__all__ = ["send_otp_email"]
