from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class RenderConfig:
    """
    Options for whole-document serialization.

    ``exclude_html_tag`` is accepted for compatibility but has no effect:
    the ``html`` wrapper is always rendered.
    """
    html_tag_attributes: dict[str, str] | None = None
    exclude_html_tag: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "RenderConfig":
        if not data:
            return cls()
        attributes = data.get("html_tag_attributes", data.get("htmlTagAttributes"))
        exclude = data.get("exclude_html_tag", data.get("excludeHTMLtag", False))
        return cls(
            html_tag_attributes=dict(attributes) if attributes else None,
            exclude_html_tag=bool(exclude),
        )
