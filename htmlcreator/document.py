import copy
import logging
from typing import Any, Mapping

from htmlcreator.config import RenderConfig
from htmlcreator.constants import CHARSET_META, VIEWPORT_META
from htmlcreator.node import Node, NodeContent, TextContent
from htmlcreator.search import Selector, search
from htmlcreator.serializer import render_node, serialize_document

logger = logging.getLogger(__name__)


def append_child(target: Node, element: Node) -> None:
    """
    Add ``element`` as the last child of ``target``. Text content is kept
    as a leading text node.
    """
    match target.content:
        case NodeContent(children=children):
            children.append(element)
        case TextContent() as text:
            target.content = NodeContent([Node(content=text), element])
        case _:
            target.content = NodeContent([element])


class HTMLDocument:
    """
    Aggregate root owning the top-level node list.

    Mutators return the document so calls can be chained::

        HTMLDocument().append(Node("p", content="hi")).scaffold().set_title("Hi")

    Instances are not thread-safe: targeted appends and ``set_title`` look
    nodes up and then mutate them.
    """

    def __init__(self, content: list[Node] | None = None) -> None:
        self.content: list[Node] = content if isinstance(content, list) else []

    def __repr__(self) -> str:
        return f"HTMLDocument({self.content!r})"

    def __str__(self) -> str:
        return self.serialize()

    @classmethod
    def from_dicts(cls, items: list[Mapping[str, Any]]) -> "HTMLDocument":
        return cls([Node.from_dict(item) for item in items])

    def append(self, element: Node | list[Node]) -> "HTMLDocument":
        if isinstance(element, list):
            self.content = self.content + element
        else:
            self.content.append(element)
        return self

    def append_to_target(
        self,
        element: Node,
        selector: Selector | Mapping[str, Any] | None,
    ) -> "HTMLDocument":
        selector = Selector.coerce(selector)
        targets: list[Node] = []
        if selector.id:
            targets = self.find_by_id(selector.id)
        elif selector.class_name:
            targets = self.find_by_class_name(selector.class_name)
        elif selector.tag:
            targets = self.find_by_type(selector.tag)

        if not targets:
            logger.debug("No target matched %r, nothing appended", selector)
            return self

        # every target after the first gets its own copy of the element
        append_child(targets[0], element)
        for target in targets[1:]:
            append_child(target, copy.deepcopy(element))
        return self

    def append_to_class(self, class_name: str, element: Node) -> "HTMLDocument":
        return self.append_to_target(element, Selector(class_name=class_name))

    def append_to_id(self, id: str, element: Node) -> "HTMLDocument":
        return self.append_to_target(element, Selector(id=id))

    def append_to_type(self, tag: str, element: Node) -> "HTMLDocument":
        return self.append_to_target(element, Selector(tag=tag))

    def find_by_type(self, tag: str) -> list[Node]:
        return search(self.content, Selector(tag=tag))

    def find_by_id(self, id: str) -> list[Node]:
        return search(self.content, Selector(id=id))

    def find_by_class_name(self, class_name: str) -> list[Node]:
        return search(self.content, Selector(class_name=class_name))

    def set_title(self, title: str) -> "HTMLDocument":
        """
        Overwrite the first ``title`` node, or add one to the first ``head``,
        or append a new ``head`` holding the title.
        """
        titles = self.find_by_type("title")
        if titles:
            titles[0].content = TextContent(title)
            return self

        title_node = Node(tag="title", content=TextContent(title))
        heads = self.find_by_type("head")
        if heads:
            logger.debug("Adding title to existing head")
            append_child(heads[0], title_node)
            return self

        logger.debug("No head found, appending a new one")
        self.content.append(Node(tag="head", content=NodeContent([title_node])))
        return self

    def scaffold(self) -> "HTMLDocument":
        """
        Wrap the current content in ``body`` and put a ``head`` with charset
        and viewport metadata before it. Not idempotent.
        """
        head = Node(tag="head", content=NodeContent([
            Node(tag="meta", attributes=dict(CHARSET_META)),
            Node(tag="meta", attributes=dict(VIEWPORT_META)),
        ]))
        body = Node(tag="body", content=NodeContent(self.content))
        self.content = [head, body]
        return self

    def render_content(self) -> str:
        return "".join(render_node(node) for node in self.content)

    def serialize(self, config: RenderConfig | None = None) -> str:
        return serialize_document(self.content, config)
