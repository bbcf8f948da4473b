"""
Email utilities for intern account management.
Centralizes email sending logic with consistent error handling.
"""
import logging
import secrets

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


def generate_temporary_password(length=12):
    """
    Generate a temporary password with at least one uppercase letter,
    lowercase letter, digit and symbol.

    Args:
        length: Password length (default 12 characters)

    Returns:
        str: Random password
    """
    uppercase = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    lowercase = 'abcdefghijklmnopqrstuvwxyz'
    digits = '0123456789'
    symbols = '!@#$%'

    rng = secrets.SystemRandom()
    password_chars = [
        rng.choice(uppercase),
        rng.choice(lowercase),
        rng.choice(digits),
        rng.choice(symbols),
    ]

    all_chars = uppercase + lowercase + digits + symbols
    password_chars.extend(rng.choice(all_chars) for _ in range(length - len(password_chars)))
    rng.shuffle(password_chars)

    return ''.join(password_chars)


def send_intern_welcome_email(user, temp_password, frontend_url=None):
    """
    Send a newly added intern their login credentials.

    Args:
        user: User instance (with profile)
        temp_password: The generated password set on the account
        frontend_url: Optional frontend login URL (defaults to settings)

    Returns:
        bool: True if email sent successfully, False otherwise
    """
    if not user.email:
        logger.warning(f"Cannot send welcome email: User {user.username} has no email")
        return False

    profile = getattr(user, "profile", None)
    ctx = {
        "app_name": settings.EITP_APP_NAME,
        "name": (profile.full_name if profile else "") or "there",
        "email": user.email,
        "branch": profile.branch if profile else "",
        "year": profile.year if profile else "",
        "temporary_password": temp_password,
        "login_url": frontend_url or settings.FRONTEND_LOGIN_URL,
        "support_email": settings.EITP_REPLY_TO_EMAIL,
    }

    try:
        text_body = render_to_string("emails/intern_welcome.txt", ctx)
        html_body = render_to_string("emails/intern_welcome.html", ctx)
        send_mail(
            subject=f"Welcome to {ctx['app_name']} - Your Login Credentials",
            message=text_body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[user.email],
            html_message=html_body,
            fail_silently=False,
        )
    except Exception as e:
        logger.error(f"Failed to send welcome email to {user.email}: {e}")
        return False

    logger.info(f"Welcome email sent to {user.email}")
    return True
