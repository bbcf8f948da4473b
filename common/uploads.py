"""
Helpers for storing uploaded files in the configured storage backend.

Uploaded names are prefixed with the epoch milliseconds of the upload and
sanitized so they are safe as object keys: every character outside
``[A-Za-z0-9.]`` becomes ``_`` and runs of underscores collapse to one.
"""
import logging
import re
import time

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils.deconstruct import deconstructible
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9.]")
_UNDERSCORE_RUNS = re.compile(r"_{2,}")


class UploadFailed(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "File upload failed."
    default_code = "upload_failed"


def sanitize_filename(name: str) -> str:
    return _UNDERSCORE_RUNS.sub("_", _UNSAFE_CHARS.sub("_", name))


def timestamped_name(name: str, now_ms=None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}_{sanitize_filename(name)}"


@deconstructible
class FolderUploadTo:
    """``upload_to`` callable placing files under ``<folder>/<epoch-ms>_<name>``."""

    def __init__(self, folder):
        self.folder = folder

    def __call__(self, instance, filename):
        return f"{self.folder}/{timestamped_name(filename)}"

    def __eq__(self, other):
        return isinstance(other, FolderUploadTo) and other.folder == self.folder


def validate_upload_size(upload):
    limit = settings.EITP_MAX_UPLOAD_SIZE
    if upload.size > limit:
        raise ValidationError(f"{upload.name} exceeds the {limit // (1024 * 1024)} MB upload limit.")
    return upload


def size_label(num_bytes: int) -> str:
    """Human size label used on documents, e.g. ``"12.3 KB"``."""
    return f"{num_bytes / 1024:.1f} KB"


def store_files(files, folder):
    """
    Save every upload under ``folder`` and return ``[(name, url), ...]``.

    If one save fails, the files already written for this call are removed
    before the error propagates.
    """
    stored = []
    try:
        for upload in files:
            name = default_storage.save(f"{folder}/{timestamped_name(upload.name)}", upload)
            stored.append((name, default_storage.url(name)))
    except Exception as exc:
        logger.warning("Upload to %s failed after %d file(s); cleaning up: %s", folder, len(stored), exc)
        discard_files(name for name, _ in stored)
        raise UploadFailed() from exc
    return stored


def discard_files(names):
    for name in names:
        try:
            default_storage.delete(name)
        except Exception:
            logger.exception("Could not remove stored file %s", name)
