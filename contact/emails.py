"""
Reply emails for contact-form queries.
"""
import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from rest_framework import status
from rest_framework.exceptions import APIException

logger = logging.getLogger(__name__)


class EmailDeliveryFailed(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "The reply email could not be sent."
    default_code = "email_failed"


def send_contact_reply(contact_message, reply_text, admin_name):
    """
    Email ``reply_text`` to the sender of ``contact_message``.

    Returns:
        bool: True if the mail backend accepted the message, False otherwise
    """
    reply_to = settings.EITP_REPLY_TO_EMAIL
    ctx = {
        "app_name": settings.EITP_APP_NAME,
        "student_id": contact_message.student_id,
        "message": reply_text,
        "original_message": contact_message.message,
        "reply_to": reply_to,
        "admin_name": admin_name,
    }

    try:
        text_body = render_to_string("emails/contact_reply.txt", ctx)
        html_body = render_to_string("emails/contact_reply.html", ctx)
        email = EmailMultiAlternatives(
            subject=f"Re: your query to {ctx['app_name']}",
            body=text_body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[contact_message.email],
            reply_to=[reply_to],
        )
        email.attach_alternative(html_body, "text/html")
        sent = email.send(fail_silently=False)
    except Exception as e:
        logger.error(f"Failed to send contact reply to {contact_message.email}: {e}")
        return False

    logger.info(f"Contact reply sent to {contact_message.email} for query {contact_message.pk}")
    return sent > 0
