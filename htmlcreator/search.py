from dataclasses import dataclass
from typing import Any, Mapping

from htmlcreator.node import Node, NodeContent


@dataclass(frozen=True)
class Selector:
    """
    Criterion for locating nodes.

    Only one field is ever applied. ``search`` checks ``tag``, then ``id``,
    then ``class_name``; targeted appends check ``id``, then ``class_name``,
    then ``tag``. Empty strings count as unset.
    """
    tag: str | None = None
    id: str | None = None
    class_name: str | None = None

    @classmethod
    def coerce(cls, value: "Selector | Mapping[str, Any] | None") -> "Selector":
        if isinstance(value, Selector):
            return value
        if not value:
            return cls()
        return cls(
            tag=value.get("tag") or value.get("type"),
            id=value.get("id"),
            class_name=value.get("class_name") or value.get("class"),
        )

    def matches(self, node: Node) -> bool:
        if self.tag:
            return node.tag == self.tag
        if self.id:
            return node.attributes.get("id") == self.id
        if self.class_name:
            return node.attributes.get("class") == self.class_name
        return False


def search(stack: Any, selector: Selector) -> list[Node]:
    """
    Depth-first search over a list of nodes.

    Matches on the current level come first, in order, followed by the
    results of descending into each sibling whose content is a node list.
    Anything that isn't a list yields no results.
    """
    if not isinstance(stack, list):
        return []

    result = [node for node in stack if selector.matches(node)]
    for node in stack:
        if isinstance(node.content, NodeContent):
            result.extend(search(node.content.children, selector))
    return result
