import base64
import logging
import mimetypes
from typing import Callable, Iterable, Optional

from compass_helpers.models import FileData

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
# multiple of 3 so each chunk encodes to base64 without padding
CHUNK_SIZE = 3 * 64 * 1024


class FileReadError(Exception):
    """Raised when an uploaded file cannot be accepted."""


def _mime_type_of(uploaded) -> str:
    mime = getattr(uploaded, "type", None) or ""
    if not mime:
        mime = mimetypes.guess_type(uploaded.name)[0] or ""
    return mime


def read_uploaded_file(
    uploaded,
    allowed_types: Iterable[str],
    on_progress: Optional[Callable[[int], None]] = None,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> FileData:
    """Encode an uploaded file as base64, reporting progress per chunk.

    ``uploaded`` is anything with ``name``, ``type`` and ``getvalue()``
    (e.g. a Streamlit ``UploadedFile``).
    """
    allowed = list(allowed_types)
    mime = _mime_type_of(uploaded)
    if mime not in allowed:
        raise FileReadError(
            f"Unsupported file type '{mime or 'unknown'}' for {uploaded.name}. "
            f"Allowed: {', '.join(allowed)}"
        )

    content = uploaded.getvalue()
    size = len(content)
    if size == 0:
        raise FileReadError(f"{uploaded.name} is empty.")
    if size > max_bytes:
        raise FileReadError(
            f"{uploaded.name} is {size / (1024 * 1024):.1f} MB; "
            f"the limit is {max_bytes / (1024 * 1024):.0f} MB."
        )

    encoded = []
    done = 0
    if on_progress:
        on_progress(0)
    while done < size:
        chunk = content[done:done + CHUNK_SIZE]
        encoded.append(base64.b64encode(chunk).decode("ascii"))
        done += len(chunk)
        if on_progress:
            on_progress(int(done * 100 / size))

    logger.info("Read %s (%s, %d bytes)", uploaded.name, mime, size)
    return FileData(name=uploaded.name, mime_type=mime, base64="".join(encoded))
