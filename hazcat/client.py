"""HazCatClient — validate → build → call → parse, one image per call."""
import logging
import time

from hazcat.backends.claude import ClaudeBackend
from hazcat.backends.client import VerdictBackend
from hazcat.backends.openai import OpenAIResponsesBackend
from hazcat.config import Config
from hazcat.constants import (
    MSG_CHECK_CALLING,
    MSG_CHECK_DONE,
    MSG_CHECK_FAILED,
    MSG_CHECK_REJECTED,
    MSG_ERR_API_KEY,
    MSG_ERR_MODEL,
    MSG_ERR_PROVIDER,
    PROVIDER_OPENAI,
    SUPPORTED_PROVIDERS,
)
from hazcat.errors import HazCatError
from hazcat.models import Verdict
from hazcat.parser import parse_verdict
from hazcat.prompt import PromptBuilder
from hazcat.validation import validate_submission

logger = logging.getLogger(__name__)


def make_backend(
    provider: str,
    api_key: str,
    model: str,
    base_url: str | None = None,
) -> VerdictBackend:
    match provider:
        case "openai":
            return OpenAIResponsesBackend(api_key, model, base_url)
        case "claude":
            return ClaudeBackend(api_key, model, base_url)
        case _:
            raise ValueError(MSG_ERR_PROVIDER % (", ".join(SUPPORTED_PROVIDERS), provider))


class HazCatClient:
    """Checks whether an image contains a cat.

    Holds only immutable configuration, so one instance may serve
    concurrent `check` calls.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        provider: str = PROVIDER_OPENAI,
        *,
        prompt_builder: PromptBuilder | None = None,
        backend: VerdictBackend | None = None,
    ) -> None:
        match (api_key, model):
            case ("" | None, _):
                raise ValueError(MSG_ERR_API_KEY)
            case (_, "" | None):
                raise ValueError(MSG_ERR_MODEL)
            case _:
                pass
        self._model = model
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._backend = backend or make_backend(provider, api_key, model, base_url)

    @classmethod
    def from_config(cls, config: Config) -> "HazCatClient":
        return cls(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            provider=config.provider,
        )

    async def check(self, image: str, media_type: str) -> Verdict:
        """Return the verdict for a base64 image, or raise the first stage's HazCatError."""
        try:
            submission = validate_submission(image, media_type)
        except HazCatError as e:
            logger.warning(MSG_CHECK_REJECTED % (type(e).__name__, e))
            raise

        request = self._prompt_builder.build(submission)

        start = time.monotonic()
        logger.debug(MSG_CHECK_CALLING % (self._backend.name, self._model))
        try:
            raw_text = await self._backend.fetch_text(request)
            verdict = parse_verdict(raw_text)
        except HazCatError as e:
            logger.error(MSG_CHECK_FAILED % (e.stage, time.monotonic() - start, e))
            raise

        logger.info(MSG_CHECK_DONE % (verdict.haz_cat, time.monotonic() - start))
        return verdict
