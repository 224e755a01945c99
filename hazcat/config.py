from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from hazcat.constants import (
    MSG_ERR_API_KEY,
    MSG_ERR_MODEL,
    MSG_ERR_PROVIDER,
    PROVIDER_OPENAI,
    SUPPORTED_PROVIDERS,
)


@dataclass(frozen=True)
class Config:
    api_key: str
    model: str
    base_url: Optional[str]
    provider: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("HAZCAT_API_KEY")
        model = os.getenv("HAZCAT_MODEL")
        base_url = os.getenv("HAZCAT_BASE_URL") or None
        provider = os.getenv("HAZCAT_PROVIDER", PROVIDER_OPENAI)
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            api_key=api_key,
            model=model,
            base_url=base_url,
            provider=provider.strip().lower(),
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        model: Optional[str],
        base_url: Optional[str],
        provider: str,
        log_level: str,
    ) -> "Config":
        match api_key:
            case None | "":
                raise ValueError(MSG_ERR_API_KEY)
            case _:
                pass

        match model:
            case None | "":
                raise ValueError(MSG_ERR_MODEL)
            case _:
                pass

        match provider in SUPPORTED_PROVIDERS:
            case False:
                raise ValueError(MSG_ERR_PROVIDER % (", ".join(SUPPORTED_PROVIDERS), provider))
            case True:
                pass

        return Config(
            api_key=api_key,
            model=model,
            base_url=base_url,
            provider=provider,
            log_level=log_level,
        )
