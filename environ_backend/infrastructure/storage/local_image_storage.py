"""Image storage on the local filesystem, served by the app under MEDIA_URL.

Layout: {media_root}/waste/{user_id}/{uuid}{ext}
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path

from ...core.exceptions import ImageValidationError

logger = logging.getLogger(__name__)

EXTENSIONS_BY_MIME = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/bmp": ".bmp",
    "image/tiff": ".tiff",
}


@dataclass
class StoredImage:
    path: Path
    relative_path: str
    public_url: str


class LocalImageStorage:
    def __init__(self, root: str, base_url: str) -> None:
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def _extension(self, mime_type: str) -> str:
        # Only the sniffed type decides how StaticFiles serves the file back
        extension = EXTENSIONS_BY_MIME.get(mime_type)
        if extension is None:
            raise ImageValidationError(f"Unsupported image format: {mime_type}")
        return extension

    async def save(self, user_id: str, data: bytes, mime_type: str) -> StoredImage:
        """Write the image and return where it can be fetched from"""
        relative = f"waste/{user_id}/{uuid.uuid4().hex}{self._extension(mime_type)}"
        target = self.root / relative

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            logger.error(f"Failed to store image {relative}: {e}")
            raise RuntimeError(f"Failed to upload image: {e}")

        return StoredImage(
            path=target,
            relative_path=relative,
            public_url=f"{self.base_url}/{relative}",
        )
