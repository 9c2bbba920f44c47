import hashlib
import os


def get_file_extension(filename: str) -> str:
    """Extract the file extension without the dot, lowercased."""
    _, ext = os.path.splitext(filename)
    return ext.lstrip(".").lower()


def get_mime_type(filename: str) -> str:
    """Map file extension to MIME type."""
    ext = get_file_extension(filename)
    mime_map = {
        "pdf": "application/pdf",
        "png": "image/png",
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "gif": "image/gif",
        "webp": "image/webp",
        "tiff": "image/tiff",
        "tif": "image/tiff",
    }
    return mime_map.get(ext, "application/octet-stream")


def compute_file_hash(content: bytes) -> str:
    """SHA-256 hex digest of the exact uploaded bytes (the extraction cache key)."""
    return hashlib.sha256(content).hexdigest()
