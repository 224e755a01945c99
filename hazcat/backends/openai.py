"""OpenAIResponsesBackend — OpenAI Responses API backend."""
from openai import AsyncOpenAI, OpenAIError

from hazcat.backends.client import VerdictBackend
from hazcat.constants import (
    DEFAULT_OPENAI_BASE_URL,
    MSG_ERR_CALL_FAILED,
    OPENAI_IMAGE_DETAIL,
    PROVIDER_OPENAI,
)
from hazcat.errors import CallFailed
from hazcat.models import VerdictRequest
from hazcat.parser import extract_output_text


class OpenAIResponsesBackend(VerdictBackend):
    name = PROVIDER_OPENAI

    def __init__(self, api_key: str, model: str, base_url: str | None = None) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url or DEFAULT_OPENAI_BASE_URL

    async def fetch_text(self, request: VerdictRequest) -> str:
        try:
            async with AsyncOpenAI(api_key=self._api_key, base_url=self._base_url) as client:
                response = await client.responses.create(
                    model=self._model,
                    input=[
                        {"role": "system", "content": request.instructions},
                        {
                            "role": "user",
                            "content": [
                                {
                                    "type": "input_image",
                                    "image_url": request.image_url,
                                    "detail": OPENAI_IMAGE_DETAIL,
                                }
                            ],
                        },
                    ],
                )
        except OpenAIError as e:
            raise CallFailed(MSG_ERR_CALL_FAILED % (self._base_url, e)) from e
        return extract_output_text(response)
