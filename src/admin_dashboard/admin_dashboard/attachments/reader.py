from __future__ import annotations

import mimetypes
from typing import Iterable, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.logger import get_logger
from ..core.constants import DEFAULT_MAX_UPLOAD_BYTES
from ..core.exceptions import AttachmentReadError
from .model import Attachment

logger = get_logger(__name__)

IMAGE_TYPES = ("image/png", "image/jpeg", "image/gif", "image/webp")
PDF_TYPES = ("application/pdf",)


def _fail(field_name: str, message: str) -> AttachmentReadError:
    logger.warning("upload rejected (%s): %s", field_name, message)
    return AttachmentReadError(message, {field_name: message})


def read_upload(
    file: Optional[FileStorage],
    *,
    field_name: str,
    label: str,
    allowed_types: Iterable[str],
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> Attachment:
    """Read an uploaded file fully into memory.

    Every failure (missing, unreadable, empty, too large, wrong type) raises
    AttachmentReadError keyed by ``field_name``.
    """

    if file is None or not file.filename:
        raise _fail(field_name, f"Please upload {label}")

    filename = secure_filename(file.filename) or "upload"
    content_type = (file.mimetype or "").lower() or (mimetypes.guess_type(filename)[0] or "")
    allowed = tuple(allowed_types)
    if content_type not in allowed:
        raise _fail(field_name, f"{label.capitalize()} must be one of: {', '.join(allowed)}")

    try:
        data = file.stream.read(max_bytes + 1)
    except (OSError, ValueError) as e:
        raise _fail(field_name, f"Could not read {label}: {e}")

    if not data:
        raise _fail(field_name, f"{label.capitalize()} is empty")
    if len(data) > max_bytes:
        raise _fail(field_name, f"{label.capitalize()} is larger than {max_bytes // 1024} KB")

    return Attachment(filename=filename, content_type=content_type, data=data)


def read_image(file: Optional[FileStorage], *, field_name: str = "image", max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> Attachment:
    return read_upload(file, field_name=field_name, label="a product image", allowed_types=IMAGE_TYPES, max_bytes=max_bytes)


def read_pdf(
    file: Optional[FileStorage],
    *,
    field_name: str = "document",
    label: str = "a PDF document",
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> Attachment:
    attachment = read_upload(file, field_name=field_name, label=label, allowed_types=PDF_TYPES, max_bytes=max_bytes)
    if not attachment.data.startswith(b"%PDF"):
        raise _fail(field_name, f"{label.capitalize()} is not a valid PDF file")
    return attachment
