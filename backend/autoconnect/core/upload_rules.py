"""Upload Rules - accept/reject decisions for bill images.

Invariants:
    - Only jpg, jpeg, png, gif and webp filenames pass (case-insensitive)
    - Anything larger than the configured limit is rejected
    - Size is checked after type, so a large .txt reports the type problem
"""

import re

from autoconnect.core.errors import UploadRejectedError

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_IMAGE_NAME = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)


def is_image_filename(filename: str | None) -> bool:
    return bool(filename) and _IMAGE_NAME.search(filename) is not None


def check_image_upload(
    filename: str | None, size: int, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> None:
    """Raise UploadRejectedError when the upload breaks a rule."""
    if not is_image_filename(filename):
        raise UploadRejectedError("Only image files are allowed!")
    if size > max_bytes:
        raise UploadRejectedError(
            f"File too large (limit {max_bytes // (1024 * 1024)} MB)",
        )
