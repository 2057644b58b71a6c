import logging
from typing import Any, Mapping

from htmlcreator.config import RenderConfig
from htmlcreator.constants import CAMEL_CASE_PATTERN, DOCTYPE, LINE_BREAK_PATTERN, VOID_ELEMENTS
from htmlcreator.node import Content, Node, NodeContent, TextContent

logger = logging.getLogger(__name__)


def hyphenate(key: str) -> str:
    return CAMEL_CASE_PATTERN.sub(lambda m: "-" + m.group(1).lower(), key)


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render attributes as ` key="value"` pairs, in declaration order, unescaped."""
    if not attributes:
        return ""
    return "".join(f' {hyphenate(key)}="{value}"' for key, value in attributes.items())


def render_content(content: Content) -> str:
    match content:
        case NodeContent(children=children):
            return "".join(render_node(child) for child in children)
        case TextContent(text=str() as text):
            return text
        case _:
            return ""


def render_node(node: Node) -> str:
    if node.tag is None:
        match node.content:
            case TextContent(text=str() as text):
                return text
            case None:
                return ""
            case _:
                logger.debug("Text node has no string payload, rendering as empty: %r", node)
                return ""

    attrs = render_attributes(node.attributes)
    if node.tag in VOID_ELEMENTS:
        return f"<{node.tag}{attrs} />"
    return f"<{node.tag}{attrs}>{render_content(node.content)}</{node.tag}>"


def serialize_document(stack: list[Node], config: RenderConfig | None = None) -> str:
    """
    Render ``stack`` inside a synthetic ``html`` element, prefixed by the
    doctype, with every line break removed.
    """
    config = config or RenderConfig()
    root = Node(
        tag="html",
        attributes=dict(config.html_tag_attributes or {}),
        content=NodeContent(stack),
    )
    return LINE_BREAK_PATTERN.sub("", DOCTYPE + render_node(root))
