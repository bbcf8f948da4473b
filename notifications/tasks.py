# notifications/tasks.py
import logging

from celery import shared_task

from .models import Notification

logger = logging.getLogger(__name__)

URGENT_ALERT_SUBJECT = "Urgent Review Alert"
URGENT_ALERT_MESSAGE = "📢 ALERT: There will be a review on the works today. Please complete all tasks by today."


def post_urgent_alert(created_by=None) -> Notification:
    note = Notification.objects.create(
        subject=URGENT_ALERT_SUBJECT,
        message=URGENT_ALERT_MESSAGE,
        type=Notification.TYPE_URGENT,
        created_by=created_by,
    )
    logger.info("Urgent alert %s posted by %s", note.pk, created_by.pk if created_by else "scheduler")
    return note


@shared_task
def post_urgent_alert_task() -> int:
    """Post the review alert on a schedule (add a periodic task for it in the admin)."""
    return post_urgent_alert().pk
