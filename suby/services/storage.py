"""Image storage for firm uploads.

Files land flat in ``settings.upload_dir`` as ``<epoch-millis>_<basename>``
and are served back under ``/uploads``. Only the stored filename is kept on
the Firm row.
"""


import logging
import re
import time
from pathlib import Path

import aiofiles

from suby.core.config import settings
from suby.core.exceptions import BadRequestError, PayloadTooLargeError, UnsupportedMediaError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_basename(filename: str) -> str:
    """Strip any directory part of a client filename and tame odd characters."""
    name = Path(filename.replace("\\", "/")).name
    name = _UNSAFE_CHARS.sub("_", name).lstrip(".")
    return name or "image"


class ImageStorage:
    def __init__(self, root: str | None = None, max_bytes: int | None = None):
        self.root = Path(root or settings.upload_dir)
        self.max_bytes = max_bytes or settings.max_upload_size_bytes

    def validate(self, filename: str, content: bytes) -> str:
        """Check extension and size; return the lower-cased extension."""
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_IMAGE_EXTENSIONS:
            accepted = ", ".join(sorted(ALLOWED_IMAGE_EXTENSIONS))
            raise UnsupportedMediaError(
                f"Unsupported image type '{ext or filename}'. Accepted formats: {accepted}"
            )
        if not content:
            raise BadRequestError("Uploaded image is empty.")
        if len(content) > self.max_bytes:
            raise PayloadTooLargeError(
                f"Image size exceeds the {self.max_bytes // (1024 * 1024)}MB limit."
            )
        return ext

    async def save(self, filename: str, content: bytes) -> str:
        """Validate and write an upload; return the stored filename."""
        self.validate(filename, content)

        stored_name = f"{int(time.time() * 1000)}_{safe_basename(filename)}"
        self.root.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self.root / stored_name, "wb") as f:
            await f.write(content)

        logger.info("Stored image %s (%d bytes)", stored_name, len(content))
        return stored_name

    async def delete(self, stored_name: str | None) -> None:
        """Best-effort removal of a stored image; missing files are ignored."""
        if not stored_name:
            return
        path = self.root / safe_basename(stored_name)
        try:
            path.unlink(missing_ok=True)
            logger.info("Removed image %s", path.name)
        except OSError as exc:
            logger.warning("Failed to remove image %s: %s", path.name, exc)
