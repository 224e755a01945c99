"""All magic values live here — no inline literals anywhere else."""

# Input limits
MAX_IMAGE_BYTES = 50 * 1024 * 1024
SUPPORTED_MEDIA_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
)

# Providers
PROVIDER_OPENAI = "openai"
PROVIDER_CLAUDE = "claude"
SUPPORTED_PROVIDERS: tuple[str, ...] = (PROVIDER_OPENAI, PROVIDER_CLAUDE)
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_ANTHROPIC_BASE_URL = "https://api.anthropic.com"
OPENAI_IMAGE_DETAIL = "auto"
CLAUDE_MAX_TOKENS = 1024

# Reply contract
KEY_HAZ_CAT = "hazCat"
KEY_MESSAGE = "message"
VERDICT_KEYS = frozenset({KEY_HAZ_CAT, KEY_MESSAGE})

# Envelope item tags
OPENAI_ITEM_MESSAGE = "message"
OPENAI_CONTENT_TEXT = "output_text"
CLAUDE_CONTENT_TEXT = "text"

# Failure stages
STAGE_VALIDATING = "validating"
STAGE_CALLING = "calling"
STAGE_PARSING = "parsing"

# Error messages
MSG_ERR_TOO_LARGE = "File size exceeds the limit (%d > %d bytes)."
MSG_ERR_MEDIA_TYPE = "Invalid file type: %r."
MSG_ERR_MISSING_RESPONSE = "Invalid response format: missing response object."
MSG_ERR_EMPTY_OUTPUT = "Invalid response format: missing output text."
MSG_ERR_MISSING_CONTENT = "Invalid response format: missing message content."
MSG_ERR_MISSING_TEXT = "Invalid response format: missing text output."
MSG_ERR_INVALID_JSON = "Model response was not valid JSON"
MSG_ERR_NOT_OBJECT = "Model response JSON was not an object"
MSG_ERR_KEYS = "Model response keys %s did not match %s"
MSG_ERR_HAZ_CAT_TYPE = "Model response hazCat must be a boolean, got %s"
MSG_ERR_MESSAGE_TYPE = "Model response message must be a string, got %s"
MSG_ERR_CALL_FAILED = "Model call to %s failed: %s"
MSG_ERR_API_KEY = "HAZCAT_API_KEY must be set in .env"
MSG_ERR_MODEL = "HAZCAT_MODEL must be set in .env"
MSG_ERR_PROVIDER = "HAZCAT_PROVIDER must be one of %s, got %r"

# Log messages
MSG_CHECK_REJECTED = "✗ Rejected (%s): %s"
MSG_CHECK_CALLING = "→ %s model %s"
MSG_CHECK_DONE = "✓ Verdict hazCat=%s (%.1fs)"
MSG_CHECK_FAILED = "✗ Check failed at %s (%.1fs): %s"
MSG_CLI_STARTING = "Checking %s as %s…"
MSG_CLI_UNKNOWN_TYPE = "Could not guess media type for %s; pass --media-type"
MSG_CLI_UNREADABLE = "Could not read %s: %s"
