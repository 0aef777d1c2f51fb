"""
Image upload storage.

Files are written to the configured upload directory under a
collision-resistant name: upload time in epoch milliseconds followed by the
original file name.
"""

from pathlib import Path
import logging
import time

from app.config import settings
from app.exceptions import ServiceValidationError, UploadError

logger = logging.getLogger("recipeshare.upload")


class UploadService:
    @staticmethod
    def build_file_name(original_name: str) -> str:
        base = Path(original_name or "").name.replace(" ", "-")
        if not base:
            raise ServiceValidationError("No file uploaded", details={"field": "file"})
        return f"{int(time.time() * 1000)}-{base}"

    @staticmethod
    def store_image(original_name: str, content: bytes) -> str:
        """Persist the image and return its public URL."""
        file_name = UploadService.build_file_name(original_name)
        upload_dir = Path(settings.upload_dir)
        try:
            upload_dir.mkdir(parents=True, exist_ok=True)
            (upload_dir / file_name).write_bytes(content)
        except OSError as e:
            logger.exception(f"upload_failed file_name={file_name}")
            raise UploadError("Image upload failed.") from e

        logger.info(f"upload_stored file_name={file_name} size={len(content)}")
        return f"{settings.upload_url_prefix.rstrip('/')}/{file_name}"
