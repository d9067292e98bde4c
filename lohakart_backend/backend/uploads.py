# backend/uploads.py

"""
UPLOAD BUCKETS

Files are stored through Django's default storage under a named bucket
(sub-directory of MEDIA_ROOT):
- product-images/
- news-images/
- resumes/
- fabrication-drawings/

Callers that keep a plain URL on the row (product images, news images) use
store_upload(); models that own the file (resumes, drawings) use FileField
with resume_upload_to / drawing_upload_to.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import PurePosixPath

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "gif"}
DOCUMENT_EXTENSIONS = {"pdf", "doc", "docx"}
DRAWING_EXTENSIONS = {"pdf", "dwg", "dxf", "step", "stp", "jpg", "jpeg", "png"}

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def file_extension(name: str) -> str:
    return PurePosixPath(name or "").suffix.lstrip(".").lower()


def validate_upload(uploaded_file, *, allowed_extensions: set[str]) -> str:
    """
    Checks extension + size. Returns the normalized extension.
    """
    ext = file_extension(getattr(uploaded_file, "name", ""))
    if ext not in allowed_extensions:
        allowed = ", ".join(sorted(allowed_extensions))
        raise ValidationError(f"Unsupported file type '.{ext}'. Allowed: {allowed}")

    size = getattr(uploaded_file, "size", 0) or 0
    if size > MAX_UPLOAD_BYTES:
        raise ValidationError("File is too large (max 10 MB).")

    return ext


def random_bucket_name(bucket: str, filename: str) -> str:
    """
    <bucket>/<uuid>.<ext>
    Random names so uploads never collide or leak the client's file name.
    """
    ext = file_extension(filename) or "bin"
    return f"{bucket}/{uuid.uuid4().hex}.{ext}"


# upload_to callables must live at module level (migrations serialize them by path)
def resume_upload_to(instance, filename):
    return random_bucket_name(settings.BUCKET_RESUMES, filename)


def drawing_upload_to(instance, filename):
    return random_bucket_name(settings.BUCKET_FABRICATION_DRAWINGS, filename)


def store_upload(uploaded_file, *, bucket: str, allowed_extensions: set[str]) -> str:
    """
    Save into the bucket and return the public URL.
    """
    validate_upload(uploaded_file, allowed_extensions=allowed_extensions)
    name = default_storage.save(random_bucket_name(bucket, uploaded_file.name), uploaded_file)
    url = default_storage.url(name)

    logger.info("Stored upload", extra={"bucket": bucket, "storage_name": name})
    return url
