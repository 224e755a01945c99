from dataclasses import dataclass

from hazcat.constants import KEY_HAZ_CAT, KEY_MESSAGE


@dataclass(frozen=True)
class ImageSubmission:
    content: str
    media_type: str


@dataclass(frozen=True)
class VerdictRequest:
    instructions: str
    submission: ImageSubmission
    image_url: str


@dataclass(frozen=True)
class Verdict:
    haz_cat: bool
    message: str

    def to_dict(self) -> dict[str, bool | str]:
        """Wire form, keyed the way the model replies."""
        return {KEY_HAZ_CAT: self.haz_cat, KEY_MESSAGE: self.message}
