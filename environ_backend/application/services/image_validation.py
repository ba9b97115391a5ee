"""Upload checks shared by the classification endpoints"""

from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ...core.exceptions import ImageTooLargeError, ImageValidationError

INVALID_IMAGE_MESSAGE = "Please upload a valid image file."


def sniff_image_mime(data: bytes) -> str:
    """
    Decode just enough of the bytes to learn the real image format.

    Raises:
        ImageValidationError: If Pillow cannot identify the data as an image
    """
    try:
        with Image.open(BytesIO(data)) as image:
            image.verify()
            image_format = image.format
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise ImageValidationError(INVALID_IMAGE_MESSAGE) from e

    mime_type = Image.MIME.get(image_format or "")
    if not mime_type:
        raise ImageValidationError(INVALID_IMAGE_MESSAGE)
    return mime_type


def validate_image_upload(data: bytes, content_type: Optional[str], max_bytes: int) -> str:
    """
    Validate an uploaded image and return its detected MIME type.

    Raises:
        ImageValidationError: Missing data, non-image content type or undecodable bytes
        ImageTooLargeError: Data larger than max_bytes
    """
    if not data:
        raise ImageValidationError("Please select an image to upload.")
    if not content_type or not content_type.lower().startswith("image/"):
        raise ImageValidationError(INVALID_IMAGE_MESSAGE)
    if len(data) > max_bytes:
        max_mb = max_bytes / (1024 * 1024)
        raise ImageTooLargeError(f"Image too large. Maximum size is {max_mb:g} MB.")
    return sniff_image_mime(data)
