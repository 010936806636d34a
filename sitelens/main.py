"""Entry point — wires Config → Gemini adapters → stdout."""
import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from sitelens.config import Config
from sitelens.constants import (
    CLI_DESCRIPTION,
    CLI_PROG,
    CMD_ANALYZE,
    CMD_TRANSLATE,
    LOG_LEVELS,
    MSG_BAD_LOG_LEVEL,
    MSG_IMAGE_UNREADABLE,
    STDIN_MARKER,
)
from sitelens.image_data import encode_image_file
from sitelens.services import analyze_construction_photo, translate_project_content

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(console=Console(stderr=True), rich_tracebacks=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="override LOG_LEVEL"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser(CMD_ANALYZE, help="analyze a construction site photo")
    analyze.add_argument("image", help="path to an image file")

    translate = commands.add_parser(
        CMD_TRANSLATE, help="render project text as Chinese/Vietnamese interlinear"
    )
    translate.add_argument("text", nargs="+", help=f"text to translate, or {STDIN_MARKER} for stdin")
    return parser


def _read_text(parts: list[str]) -> str:
    match parts:
        case [marker] if marker == STDIN_MARKER:
            return sys.stdin.read()
        case _:
            return " ".join(parts)


async def run(args: argparse.Namespace, config: Config) -> str:
    match args.command:
        case cmd if cmd == CMD_ANALYZE:
            return await analyze_construction_photo(encode_image_file(args.image), config=config)
        case cmd if cmd == CMD_TRANSLATE:
            return await translate_project_content(_read_text(args.text), config=config)
        case other:
            raise ValueError(f"unknown command: {other}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = Config.from_env()
    except ValueError as exc:
        parser.error(str(exc))

    level = args.log_level or config.log_level
    if level not in LOG_LEVELS:
        parser.error(MSG_BAD_LOG_LEVEL % (", ".join(LOG_LEVELS), level))
    _setup_logging(level)

    try:
        print(asyncio.run(run(args, config)))
    except OSError as exc:
        logger.error(MSG_IMAGE_UNREADABLE, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
