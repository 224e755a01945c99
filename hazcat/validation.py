"""Input checks that run before any network call."""
from hazcat.constants import (
    MAX_IMAGE_BYTES,
    MSG_ERR_MEDIA_TYPE,
    MSG_ERR_TOO_LARGE,
    SUPPORTED_MEDIA_TYPES,
)
from hazcat.errors import PayloadTooLarge, UnsupportedMediaType
from hazcat.models import ImageSubmission


# ── pure predicates (module-level so tests can import them directly) ──────────


def decoded_size(content: str) -> int:
    """Byte length `content` decodes to, computed from its length alone."""
    length = len(content)
    padding = len(content[-2:]) - len(content[-2:].rstrip("="))
    return ((length - padding) * 3) // 4


def is_file_small_enough(content: str, max_bytes: int = MAX_IMAGE_BYTES) -> bool:
    return decoded_size(content) <= max_bytes


def is_media_type_valid(media_type: str) -> bool:
    return media_type in SUPPORTED_MEDIA_TYPES


# ── stage ─────────────────────────────────────────────────────────────────────


def validate_submission(
    content: str,
    media_type: str,
    max_bytes: int = MAX_IMAGE_BYTES,
) -> ImageSubmission:
    """Return the submission when both checks pass. Size is checked first."""
    match is_file_small_enough(content, max_bytes):
        case False:
            size = decoded_size(content)
            raise PayloadTooLarge(size, max_bytes, MSG_ERR_TOO_LARGE % (size, max_bytes))
        case True:
            pass

    match is_media_type_valid(media_type):
        case False:
            raise UnsupportedMediaType(media_type, MSG_ERR_MEDIA_TYPE % media_type)
        case True:
            pass

    return ImageSubmission(content=content, media_type=media_type)
