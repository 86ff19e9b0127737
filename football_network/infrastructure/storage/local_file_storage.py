"""Local filesystem storage for uploaded files.

Paths are relative to the upload directory; each path component is
normalised with werkzeug's ``secure_filename`` so a stored path can
never escape the upload directory. Image uploads are verified with
Pillow before they are written.
"""

import asyncio
import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from werkzeug.utils import secure_filename

from football_network.domain.file.ports import IFileStorage, StorageError

logger = logging.getLogger(__name__)


def normalise_path(path: str) -> str:
    """
    Examples:
        >>> normalise_path("clubs/logos/../../etc/passwd")
        'clubs/logos/etc/passwd'
    """
    parts = [secure_filename(part) for part in path.replace("\\", "/").split("/")]
    parts = [part for part in parts if part]
    if not parts:
        raise StorageError(f"Invalid storage path: '{path}'")
    return "/".join(parts)


def verify_image(content: bytes) -> None:
    """Raise StorageError unless content is a readable image."""
    try:
        with Image.open(io.BytesIO(content)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise StorageError("Uploaded content is not a valid image.") from e


class LocalFileStorage(IFileStorage):
    def __init__(self, base_dir: str):
        self._base_dir = Path(base_dir).resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _full_path(self, path: str) -> Path:
        return self._base_dir / normalise_path(path)

    async def save(self, path: str, content: bytes, content_type: str) -> str:
        if content_type.lower().startswith("image/"):
            verify_image(content)

        relative = normalise_path(path)
        target = self._base_dir / relative
        try:
            await asyncio.to_thread(self._write, target, content)
        except OSError as e:
            logger.error("Failed to write file", extra={"path": relative}, exc_info=True)
            raise StorageError(f"Failed to store '{relative}'.") from e

        logger.info("File stored", extra={"path": relative, "size_bytes": len(content)})
        return relative

    async def delete(self, path: str) -> bool:
        target = self._full_path(path)
        try:
            if not target.exists():
                return False
            await asyncio.to_thread(target.unlink)
        except OSError as e:
            raise StorageError(f"Failed to delete '{path}'.") from e
        logger.info("File deleted", extra={"path": path})
        return True

    async def exists(self, path: str) -> bool:
        return self._full_path(path).is_file()

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
