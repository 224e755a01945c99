"""Error taxonomy — every failure names the stage it came from."""
from enum import Enum

from hazcat.constants import (
    MSG_ERR_EMPTY_OUTPUT,
    MSG_ERR_MISSING_CONTENT,
    MSG_ERR_MISSING_RESPONSE,
    MSG_ERR_MISSING_TEXT,
    STAGE_CALLING,
    STAGE_PARSING,
    STAGE_VALIDATING,
)


class HazCatError(Exception):
    """Base for all check failures. `stage` is where the call stopped."""

    stage: str = ""


# ── validating ────────────────────────────────────────────────────────────────


class PayloadTooLarge(HazCatError):
    stage = STAGE_VALIDATING

    def __init__(self, size: int, limit: int, message: str) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit


class UnsupportedMediaType(HazCatError):
    stage = STAGE_VALIDATING

    def __init__(self, media_type: str, message: str) -> None:
        super().__init__(message)
        self.media_type = media_type


# ── calling ───────────────────────────────────────────────────────────────────


class CallFailed(HazCatError):
    stage = STAGE_CALLING


# ── parsing ───────────────────────────────────────────────────────────────────


class EnvelopeFault(Enum):
    MISSING_RESPONSE = MSG_ERR_MISSING_RESPONSE
    EMPTY_OUTPUT = MSG_ERR_EMPTY_OUTPUT
    MISSING_MESSAGE_CONTENT = MSG_ERR_MISSING_CONTENT
    MISSING_TEXT_OUTPUT = MSG_ERR_MISSING_TEXT


class MalformedEnvelope(HazCatError):
    stage = STAGE_PARSING

    def __init__(self, reason: EnvelopeFault) -> None:
        super().__init__(reason.value)
        self.reason = reason


class InvalidJson(HazCatError):
    stage = STAGE_PARSING


class SchemaMismatch(HazCatError):
    stage = STAGE_PARSING
