"""
Append-only comment threads stored on a JSON column.

The row is locked for the read-modify-write so concurrent comments on the
same task or submission are never lost.
"""
import time

from django.db import transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone


def next_comment_id(existing):
    """Epoch milliseconds, bumped past any id already in the thread."""
    candidate = int(time.time() * 1000)
    taken = [c.get("id") for c in existing if isinstance(c, dict) and isinstance(c.get("id"), int)]
    if taken and candidate <= max(taken):
        candidate = max(taken) + 1
    return candidate


def append_comment(queryset, pk, **fields):
    """Lock row ``pk`` of ``queryset``, append a comment and return ``(obj, comment)``."""
    with transaction.atomic():
        obj = get_object_or_404(queryset.select_for_update(), pk=pk)
        existing = list(obj.comments or [])
        comment = {
            "id": next_comment_id(existing),
            **fields,
            "time": timezone.localtime().isoformat(timespec="seconds"),
        }
        obj.comments = existing + [comment]
        obj.save(update_fields=["comments"])
    return obj, comment
