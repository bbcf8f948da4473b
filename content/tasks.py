# content/tasks.py
import logging

from celery import shared_task

from common.uploads import discard_files

logger = logging.getLogger(__name__)


@shared_task
def delete_stored_files_task(names) -> int:
    """Remove files left behind by a deleted upload row (gallery, MoU, document, submission or message)."""
    names = [n for n in names if n]
    discard_files(names)
    logger.info("Removed %d stored file(s)", len(names))
    return len(names)
