"""ResponseParser — reply envelope → text → Verdict."""
import json
import logging
from typing import Any

from hazcat.constants import (
    CLAUDE_CONTENT_TEXT,
    KEY_HAZ_CAT,
    KEY_MESSAGE,
    MSG_ERR_HAZ_CAT_TYPE,
    MSG_ERR_INVALID_JSON,
    MSG_ERR_KEYS,
    MSG_ERR_MESSAGE_TYPE,
    MSG_ERR_NOT_OBJECT,
    OPENAI_CONTENT_TEXT,
    OPENAI_ITEM_MESSAGE,
    VERDICT_KEYS,
)
from hazcat.errors import EnvelopeFault, InvalidJson, MalformedEnvelope, SchemaMismatch
from hazcat.models import Verdict

logger = logging.getLogger(__name__)


# ── text extraction ───────────────────────────────────────────────────────────


def extract_output_text(response: Any) -> str:
    """Pull the output text out of an OpenAI Responses API reply.

    Uses the SDK's flattened `output_text` when it is non-empty, otherwise
    descends into the first output item. Each missing level raises
    MalformedEnvelope with its own reason.
    """
    match response:
        case None:
            raise MalformedEnvelope(EnvelopeFault.MISSING_RESPONSE)
        case _:
            pass

    flattened = getattr(response, "output_text", None)
    if flattened:
        return flattened

    output = list(getattr(response, "output", None) or [])
    match output:
        case []:
            raise MalformedEnvelope(EnvelopeFault.EMPTY_OUTPUT)
        case [item, *_]:
            pass

    content = getattr(item, "content", None) or []
    if getattr(item, "type", None) != OPENAI_ITEM_MESSAGE or not content:
        raise MalformedEnvelope(EnvelopeFault.MISSING_MESSAGE_CONTENT)

    text_item = next(
        (c for c in content if getattr(c, "type", None) == OPENAI_CONTENT_TEXT),
        None,
    )
    match text_item:
        case None:
            raise MalformedEnvelope(EnvelopeFault.MISSING_TEXT_OUTPUT)
        case _:
            return text_item.text


def extract_message_text(message: Any) -> str:
    """Pull the first text block out of an Anthropic Messages API reply."""
    match message:
        case None:
            raise MalformedEnvelope(EnvelopeFault.MISSING_RESPONSE)
        case _:
            pass

    content = list(getattr(message, "content", None) or [])
    match content:
        case []:
            raise MalformedEnvelope(EnvelopeFault.EMPTY_OUTPUT)
        case _:
            pass

    text_block = next(
        (b for b in content if getattr(b, "type", None) == CLAUDE_CONTENT_TEXT),
        None,
    )
    match text_block:
        case None:
            raise MalformedEnvelope(EnvelopeFault.MISSING_TEXT_OUTPUT)
        case _:
            return text_block.text


# ── JSON + shape ──────────────────────────────────────────────────────────────


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def parse_verdict(raw_text: str) -> Verdict:
    """Decode `raw_text` and accept only {"hazCat": bool, "message": str}."""
    try:
        parsed = json.loads(raw_text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        logger.debug(f"Unparseable model reply: {raw_text!r}")
        raise InvalidJson(MSG_ERR_INVALID_JSON) from e

    match parsed:
        case dict():
            pass
        case _:
            raise SchemaMismatch(MSG_ERR_NOT_OBJECT)

    keys = set(parsed)
    if keys != VERDICT_KEYS:
        raise SchemaMismatch(MSG_ERR_KEYS % (sorted(keys), sorted(VERDICT_KEYS)))

    match parsed[KEY_HAZ_CAT], parsed[KEY_MESSAGE]:
        case bool() as haz_cat, str() as message:
            return Verdict(haz_cat=haz_cat, message=message)
        case bool(), other:
            raise SchemaMismatch(MSG_ERR_MESSAGE_TYPE % type(other).__name__)
        case other, _:
            raise SchemaMismatch(MSG_ERR_HAZ_CAT_TYPE % type(other).__name__)
