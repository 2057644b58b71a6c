import re


DOCTYPE = "<!DOCTYPE html>"

# Always self-closing; content assigned to these is never rendered.
VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'command', 'embed', 'hr', 'img',
    'input', 'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr',
})

LINE_BREAK_PATTERN = re.compile(r"\r\n|\n|\r")

# camelCase attribute keys become hyphen-case: dataFoo -> data-foo
CAMEL_CASE_PATTERN = re.compile(r"(?<=.)([A-Z])")

CHARSET_META = {"charset": "utf-8"}
VIEWPORT_META = {
    "name": "viewport",
    "content": "width=device-width, initial-scale=1, shrink-to-fit=no",
}
