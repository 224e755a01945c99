"""ClaudeBackend — Anthropic Claude vision backend."""
from anthropic import AnthropicError, AsyncAnthropic

from hazcat.backends.client import VerdictBackend
from hazcat.constants import (
    CLAUDE_MAX_TOKENS,
    DEFAULT_ANTHROPIC_BASE_URL,
    MSG_ERR_CALL_FAILED,
    PROVIDER_CLAUDE,
)
from hazcat.errors import CallFailed
from hazcat.models import VerdictRequest
from hazcat.parser import extract_message_text


class ClaudeBackend(VerdictBackend):
    name = PROVIDER_CLAUDE

    def __init__(self, api_key: str, model: str, base_url: str | None = None) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url or DEFAULT_ANTHROPIC_BASE_URL

    async def fetch_text(self, request: VerdictRequest) -> str:
        submission = request.submission
        try:
            async with AsyncAnthropic(api_key=self._api_key, base_url=self._base_url) as client:
                message = await client.messages.create(
                    model=self._model,
                    max_tokens=CLAUDE_MAX_TOKENS,
                    system=request.instructions,
                    messages=[
                        {
                            "role": "user",
                            "content": [
                                {
                                    "type": "image",
                                    "source": {
                                        "type": "base64",
                                        "media_type": submission.media_type,
                                        "data": submission.content,
                                    },
                                },
                            ],
                        }
                    ],
                )
        except AnthropicError as e:
            raise CallFailed(MSG_ERR_CALL_FAILED % (self._base_url, e)) from e
        return extract_message_text(message)
