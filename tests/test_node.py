import pytest

from htmlcreator.node import Node, NodeContent, TextContent
from htmlcreator.serializer import render_node


@pytest.mark.ci
def test_plain_content_is_wrapped():
    text = Node(tag="p", content="hi")
    assert text.content == TextContent("hi")

    child = Node(tag="span")
    parent = Node(tag="div", content=[child])
    assert isinstance(parent.content, NodeContent)
    assert parent.children == [child]


@pytest.mark.ci
def test_text_node():
    node = Node.text("hello")
    assert node.is_text
    assert node.tag is None
    assert node.children == []
    assert repr(node) == "'hello'"


@pytest.mark.ci
def test_from_dict_builds_tree():
    node = Node.from_dict({
        "type": "form",
        "attributes": {"method": "POST", "refreshtime": 5},
        "content": [
            {"type": "input", "attributes": {"type": "hidden"}},
            {"content": "text"},
        ],
    })
    assert node.tag == "form"
    assert node.attributes == {"method": "POST", "refreshtime": "5"}
    assert node.children[0].tag == "input"
    assert node.children[1].is_text
    assert node.children[1].content == TextContent("text")


@pytest.mark.ci
def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        Node.from_dict(["not", "a", "mapping"])


@pytest.mark.ci
def test_to_dict_omits_absent_fields():
    data = {"type": "div", "attributes": {"id": "x"}, "content": [{"content": "a"}, {"type": "br"}]}
    assert Node.from_dict(data).to_dict() == data
    assert Node(tag="p").to_dict() == {"type": "p"}


@pytest.mark.ci
def test_unsupported_content_is_dropped():
    assert Node(content={"type": "p"}).content is None
    assert Node(content=5).content is None
    assert render_node(Node(content={"type": "p"})) == ""
    assert render_node(Node(content=5)) == ""
    assert render_node(Node.from_dict({"content": {"type": "p"}})) == ""
    assert render_node(Node(tag="p", content=5)) == "<p></p>"
