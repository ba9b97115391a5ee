from .local_image_storage import LocalImageStorage, StoredImage

__all__ = ["LocalImageStorage", "StoredImage"]
