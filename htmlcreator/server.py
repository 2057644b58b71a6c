import html
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from htmlcreator.config import RenderConfig
from htmlcreator.document import HTMLDocument
from htmlcreator.node import Node

logger = logging.getLogger(__name__)

app = FastAPI(title="HTML Creator Render Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class RenderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: list[dict[str, Any]] = Field(default_factory=list)
    title: str | None = None
    boilerplate: bool = False
    html_tag_attributes: dict[str, str] | None = Field(default=None, alias="htmlTagAttributes")


def html_response(document: HTMLDocument, config: RenderConfig | None = None) -> HTMLResponse:
    return HTMLResponse(document.serialize(config), media_type="text/html; charset=utf-8")


def build_autopost_document(action: str, fields: dict[str, str]) -> HTMLDocument:
    """
    Page holding a hidden-field form that posts itself to ``action`` as
    soon as it loads. Names, values and ``action`` come from the request
    and are escaped here.
    """
    names = sorted(fields, key=str.lower)
    inputs = [
        Node(tag="input", attributes={
            "type": "hidden",
            "name": html.escape(name, quote=True),
            "value": html.escape(fields[name], quote=True),
        })
        for name in names
    ]
    script = Node(
        tag="script",
        attributes={"type": "text/javascript"},
        content="document.querySelector('form').submit()",
    )
    form = Node(
        tag="form",
        attributes={"method": "POST", "action": html.escape(action, quote=True)},
        content=[*inputs, script],
    )
    return HTMLDocument([
        Node(tag="head", content=[Node(tag="title", content="Redirecting")]),
        Node(tag="body", content=[form]),
    ])


@app.post("/render")
async def render_endpoint(payload: RenderRequest) -> HTMLResponse:
    try:
        document = HTMLDocument.from_dicts(payload.content)
    except (TypeError, AttributeError) as e:
        return HTMLResponse(str(e), status_code=422)
    if payload.boilerplate:
        document.scaffold()
    if payload.title is not None:
        document.set_title(payload.title)
    config = RenderConfig(html_tag_attributes=payload.html_tag_attributes)
    return html_response(document, config)


@app.get("/autopost")
async def autopost_endpoint(action: str, request: Request) -> HTMLResponse:
    fields = {key: value for key, value in request.query_params.items() if key != "action"}
    logger.info("Auto-posting %d fields to %s", len(fields), action)
    return html_response(build_autopost_document(action, fields))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
