"""Entry point — wires Config → HazCatClient and checks one image file."""
import argparse
import asyncio
import base64
import json
import logging
import mimetypes
import sys
from pathlib import Path

from rich.logging import RichHandler

from hazcat.client import HazCatClient
from hazcat.config import Config
from hazcat.constants import MSG_CLI_STARTING, MSG_CLI_UNKNOWN_TYPE, MSG_CLI_UNREADABLE
from hazcat.errors import HazCatError


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hazcat", description="Does this image haz cat?")
    parser.add_argument("image", type=Path, help="path to a jpeg, png, gif or webp image")
    parser.add_argument("--media-type", help="override the media type guessed from the file name")
    return parser.parse_args(argv)


def guess_media_type(path: Path) -> str | None:
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    media_type = args.media_type or guess_media_type(args.image)
    match media_type:
        case None:
            logger.error(MSG_CLI_UNKNOWN_TYPE % args.image)
            return 1
        case _:
            pass

    logger.info(MSG_CLI_STARTING % (args.image, media_type))
    try:
        raw = args.image.read_bytes()
    except OSError as e:
        logger.error(MSG_CLI_UNREADABLE % (args.image, e))
        return 1

    image = base64.standard_b64encode(raw).decode()
    client = HazCatClient.from_config(config)
    try:
        verdict = asyncio.run(client.check(image, media_type))
    except HazCatError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(json.dumps(verdict.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
