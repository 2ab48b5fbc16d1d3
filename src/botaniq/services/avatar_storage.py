"""Local disk storage for profile avatars."""

import logging
import re
import secrets
from pathlib import Path
from typing import BinaryIO

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from botaniq.core.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
SAFE_EXTENSION = re.compile(r"^\.[A-Za-z0-9]{1,10}$")


def avatar_filename(original_filename: str | None) -> str:
    """Build a collision-resistant name keeping the original extension.

    Extensions with anything but letters and digits are dropped.
    """
    suffix = Path(original_filename or "").suffix
    if not SAFE_EXTENSION.match(suffix):
        suffix = ""
    return f"profile-{secrets.token_urlsafe(16)}{suffix}"


class AvatarStorage:
    """Streams uploads into the uploads directory and removes replaced files."""

    def __init__(self, upload_dir: Path, max_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def path_for(self, filename: str) -> Path:
        # Stored names are bare filenames; never let one escape the directory.
        return self.upload_dir / Path(filename).name

    async def save(self, upload: UploadFile) -> str:
        """
        Write an uploaded file to disk in chunks.

        Args:
            upload: Multipart file part

        Returns:
            Stored filename (not a path)

        Raises:
            PayloadTooLargeError: If the file exceeds max_bytes; nothing is
                left on disk in that case
        """
        filename = avatar_filename(upload.filename)
        target = self.path_for(filename)
        await run_in_threadpool(self._write, upload.file, target)
        logger.info("Avatar stored", extra={"avatar": filename})
        return filename

    def _write(self, source: BinaryIO, target: Path) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        written = 0
        try:
            with open(target, "wb") as buffer:
                while True:
                    chunk = source.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise PayloadTooLargeError(
                            "UPLOAD_001", details={"max_bytes": self.max_bytes}
                        )
                    buffer.write(chunk)
        except BaseException:
            target.unlink(missing_ok=True)
            raise

    def delete(self, filename: str) -> bool:
        """Best-effort removal of a stored file.

        Returns:
            True if a file was removed. Failures are logged, never raised.
        """
        path = self.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.warning(
                "Failed to delete avatar",
                extra={"avatar": filename, "error_type": type(exc).__name__},
            )
            return False
        logger.info("Avatar deleted", extra={"avatar": filename})
        return True

