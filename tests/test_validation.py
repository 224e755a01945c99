"""TDD: input validation tests written FIRST"""
import base64

import pytest

from hazcat.constants import MAX_IMAGE_BYTES, SUPPORTED_MEDIA_TYPES
from hazcat.errors import PayloadTooLarge, UnsupportedMediaType
from hazcat.models import ImageSubmission
from hazcat.validation import (
    decoded_size,
    is_file_small_enough,
    is_media_type_valid,
    validate_submission,
)

# 50 MiB leaves a remainder of 2 when split into 3-byte groups → one "=" of padding.
EXACT_LIMIT_B64 = "A" * 69905067 + "="
# 50 MiB + 1 is a multiple of 3 → no padding.
OVER_LIMIT_B64 = "A" * 69905068


# ── decoded_size ──────────────────────────────────────────────────────────────


def test_decoded_size_matches_real_encoding():
    for n in range(0, 12):
        encoded = base64.b64encode(b"x" * n).decode()
        assert decoded_size(encoded) == n


def test_decoded_size_empty_is_zero():
    assert decoded_size("") == 0


def test_decoded_size_uses_decoded_not_encoded_length():
    encoded = base64.b64encode(b"\x00" * 300).decode()
    assert len(encoded) == 400
    assert decoded_size(encoded) == 300


# ── is_file_small_enough ──────────────────────────────────────────────────────


def test_small_file_passes():
    assert is_file_small_enough(base64.b64encode(b"cat").decode())


def test_exactly_at_limit_passes():
    assert decoded_size(EXACT_LIMIT_B64) == MAX_IMAGE_BYTES
    assert is_file_small_enough(EXACT_LIMIT_B64)


def test_one_byte_over_limit_fails():
    assert decoded_size(OVER_LIMIT_B64) == MAX_IMAGE_BYTES + 1
    assert not is_file_small_enough(OVER_LIMIT_B64)


def test_limit_is_overridable():
    encoded = base64.b64encode(b"12345").decode()
    assert is_file_small_enough(encoded, max_bytes=5)
    assert not is_file_small_enough(encoded, max_bytes=4)


# ── is_media_type_valid ───────────────────────────────────────────────────────


@pytest.mark.parametrize("media_type", SUPPORTED_MEDIA_TYPES)
def test_supported_media_types_pass(media_type):
    assert is_media_type_valid(media_type)


@pytest.mark.parametrize(
    "media_type",
    [
        "IMAGE/PNG",
        "Image/Jpeg",
        "image/png; charset=binary",
        "image/*",
        "image/jpg",
        "image/svg+xml",
        "application/pdf",
        "",
    ],
)
def test_unsupported_media_types_fail(media_type):
    assert not is_media_type_valid(media_type)


# ── validate_submission ───────────────────────────────────────────────────────


def test_validate_submission_returns_submission():
    content = base64.b64encode(b"meow").decode()

    submission = validate_submission(content, "image/png")

    assert submission == ImageSubmission(content=content, media_type="image/png")


def test_validate_submission_too_large_raises():
    content = base64.b64encode(b"123456").decode()

    with pytest.raises(PayloadTooLarge) as exc_info:
        validate_submission(content, "image/png", max_bytes=5)

    assert exc_info.value.size == 6
    assert exc_info.value.limit == 5
    assert exc_info.value.stage == "validating"


def test_validate_submission_bad_type_raises():
    with pytest.raises(UnsupportedMediaType) as exc_info:
        validate_submission("QQ==", "IMAGE/PNG")

    assert exc_info.value.media_type == "IMAGE/PNG"


def test_validate_submission_checks_size_before_type():
    with pytest.raises(PayloadTooLarge):
        validate_submission("QUJD", "text/plain", max_bytes=1)
