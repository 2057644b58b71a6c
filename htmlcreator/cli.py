import argparse
import json
import logging
import sys
from typing import Sequence, TextIO

from htmlcreator.config import RenderConfig
from htmlcreator.document import HTMLDocument
from htmlcreator.node import Node

logger = logging.getLogger(__name__)


def parse_html_attr(value: str) -> tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {value!r}")
    key, attr_value = value.split("=", 1)
    return key, attr_value


def build_parser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        description="Render a JSON element tree into a single-line HTML document."
    )
    argparser.add_argument(
        "input", nargs="?", type=argparse.FileType("r", encoding="utf-8"), default=sys.stdin,
        help="JSON file holding a list of elements (defaults to stdin)",
    )
    argparser.add_argument("--title")
    argparser.add_argument("--boilerplate", action="store_true")
    argparser.add_argument(
        "--html-attr", action="append", type=parse_html_attr, default=[],
        metavar="KEY=VALUE", help="attribute for the html element (repeatable)",
    )
    argparser.add_argument("--exclude-html-tag", action="store_true")
    argparser.add_argument("--verbose", "-v", action="store_true")
    return argparser


def load_document(stream: TextIO) -> HTMLDocument:
    data = json.load(stream)
    if isinstance(data, dict):
        data = [data]
    return HTMLDocument([Node.from_dict(item) for item in data])


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = load_document(args.input)
    except (json.JSONDecodeError, TypeError, AttributeError) as e:
        logger.error("Invalid element tree: %s", e)
        return 1

    if args.boilerplate:
        document.scaffold()
    if args.title is not None:
        document.set_title(args.title)

    config = RenderConfig(
        html_tag_attributes=dict(args.html_attr) or None,
        exclude_html_tag=args.exclude_html_tag,
    )
    print(document.serialize(config))
    return 0
