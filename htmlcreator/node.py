import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

logger = logging.getLogger(__name__)


@dataclass
class TextContent:
    text: str = ""

    def __repr__(self) -> str:
        return repr(self.text)


@dataclass
class NodeContent:
    children: list['Node'] = field(default_factory=list)


Content = TextContent | NodeContent | None


def coerce_content(value: Any) -> Content:
    """
    Wrap a plain ``str`` or ``list`` of nodes into the matching content
    variant. Variants and ``None`` pass through untouched; any other value
    is dropped so the node renders as empty.
    """
    if value is None or isinstance(value, (TextContent, NodeContent)):
        return value
    if isinstance(value, str):
        return TextContent(value)
    if isinstance(value, (list, tuple)):
        return NodeContent(list(value))
    logger.debug("Dropping unsupported content of type %s", type(value).__name__)
    return None


@dataclass
class Node:
    """
    One markup element, or one piece of text when ``tag`` is None.

    ``content`` is either a ``TextContent`` or a ``NodeContent``; plain
    strings and lists given at construction are wrapped accordingly.
    """
    tag: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    content: Content = None

    def __post_init__(self) -> None:
        self.content = coerce_content(self.content)
        if self.attributes is None:
            self.attributes = {}

    def __repr__(self) -> str:
        if self.tag is None:
            return repr(self.content)
        attrs = " ".join(f'{k}="{v}"' for k, v in self.attributes.items())
        return f"<{self.tag} {attrs}>" if attrs else f"<{self.tag}>"

    @classmethod
    def text(cls, value: str) -> "Node":
        return cls(content=TextContent(value))

    @property
    def is_text(self) -> bool:
        return self.tag is None

    @property
    def children(self) -> list['Node']:
        """Child nodes, or an empty list when content is text or absent."""
        if isinstance(self.content, NodeContent):
            return self.content.children
        return []

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        """
        Build a node tree from its object-literal form::

            {"type": "p", "attributes": {"id": "x"}, "content": "hi"}

        ``content`` may be a string or a list of such objects.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")

        attributes = {
            str(key): str(value)
            for key, value in (data.get("attributes") or {}).items()
        }
        raw_content = data.get("content")
        content: Content
        if isinstance(raw_content, list):
            content = NodeContent([cls.from_dict(item) for item in raw_content])
        else:
            content = coerce_content(raw_content)

        return cls(tag=data.get("type") or None, attributes=attributes, content=content)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.tag is not None:
            result["type"] = self.tag
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        match self.content:
            case TextContent(text=text):
                result["content"] = text
            case NodeContent(children=children):
                result["content"] = [child.to_dict() for child in children]
        return result
