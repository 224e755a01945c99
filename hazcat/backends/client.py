"""VerdictBackend — abstract base for model backends."""
from abc import ABC, abstractmethod

from hazcat.models import VerdictRequest


class VerdictBackend(ABC):
    name: str = "abstract"

    @abstractmethod
    async def fetch_text(self, request: VerdictRequest) -> str:
        """Send the request to the model and return its raw reply text.

        Raises CallFailed when the SDK call fails and MalformedEnvelope when
        the reply carries no text.
        """
        ...
