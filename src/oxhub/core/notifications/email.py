"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import resend

from src.oxhub.core.config import get_settings
from src.oxhub.core.logging import get_logger

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_CODE_STYLE = (
    "font-size: 32px; font-weight: 700; letter-spacing: 8px; "
    "background-color: #f3f4f6; padding: 16px 24px; border-radius: 6px; display: inline-block;"
)
_MUTED_STYLE = "color: #666; font-size: 14px;"


def send_otp_email(to: str, otp: str, expires_in_minutes: int) -> bool:
    """Deliver a login passcode by email.

    Args:
        to: Recipient email address
        otp: The plaintext passcode
        expires_in_minutes: Shown to the user in the email body

    Returns:
        True if email was sent (or logged in dev mode), False on error
    """
    settings = get_settings()

    if not settings.resend_api_key:
        # Dev mode: log instead of sending
        logger.warning(
            "RESEND_API_KEY not set - email not sent",
            to=to,
            email_type="otp",
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": "Your login code",
                "html": _get_otp_email_html(otp, expires_in_minutes, settings.app_name),
            }
        )

    try:
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("OTP email sent", to=to)
        return True
    except FuturesTimeoutError:
        logger.error("Email send timed out", to=to, timeout=settings.email_send_timeout_seconds)
        return False
    except Exception as e:
        logger.error("Failed to send OTP email", to=to, error=str(e))
        return False


def _get_otp_email_html(otp: str, expires_in_minutes: int, app_name: str) -> str:
    """Generate HTML content for the passcode email."""
    safe_app_name = html.escape(app_name)
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #2563eb; margin-bottom: 24px;">Sign in to {safe_app_name}</h1>
    <p>Use the code below to finish signing in:</p>
    <p style="margin: 32px 0;"><span style="{_CODE_STYLE}">{html.escape(otp)}</span></p>
    <p style="{_MUTED_STYLE}">
        This code expires in {expires_in_minutes} minutes and can only be used once.
        If you didn't try to sign in, you can safely ignore this email.
    </p>
</body>
</html>"""
