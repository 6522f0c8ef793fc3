"""Framework-agnostic request handling for a conversion endpoint.

A web layer (any framework) reads the request body and content type, then
calls :func:`handle_convert` and writes back the returned status code and
JSON-serialisable payload::

    status, payload = handle_convert(request.body, request.content_type)
    return JSONResponse(payload, status_code=status)

Accepted bodies:

* ``text/plain`` or ``text/markdown`` -- the body is the markdown.
* ``application/json`` (or an already-decoded mapping) -- the first
  non-empty string among the ``markdown``, ``content`` and ``text`` fields.

Responses:

* ``200`` -- ``{"success": True, "data": <RICOS document>}``
* ``400`` -- ``{"error": <message>}`` when no markdown could be extracted
* ``500`` -- ``{"error": <message>, "details": <exception text>}`` when the
  conversion itself failed
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from mdricos.config import RicosConfig
from mdricos.converter.md_to_ricos import MarkdownToRicosConverter
from mdricos.converter.serialize import document_to_dict
from mdricos.errors import ConversionError, MissingInputError
from mdricos.observability import get_logger

log = get_logger("mdricos.service")

MARKDOWN_FIELDS: tuple[str, ...] = ("markdown", "content", "text")
"""JSON body fields checked for markdown, in priority order."""

TEXT_CONTENT_TYPES: frozenset[str] = frozenset({"text/plain", "text/markdown"})

EXAMPLE_MARKDOWN = """# Main title

This is a paragraph with **bold**, *italic* and a [link](https://example.com).

## Subtitle

- Item 1
- Item 2
- Item 3

### Ordered list

1. First
2. Second
3. Third

> This is a quote

---

```javascript
console.log('Hello World');
```
"""


# ---------------------------------------------------------------------------
# Input extraction
# ---------------------------------------------------------------------------

def extract_markdown(body: Any, content_type: str | None = None) -> str:
    """Pull the markdown text out of a request body.

    Parameters
    ----------
    body:
        Raw ``bytes``/``str`` body, or a decoded JSON mapping.
    content_type:
        The request's ``Content-Type`` header, parameters allowed.

    Raises
    ------
    MissingInputError
        If the body holds no non-blank markdown.
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()

    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MissingInputError(
                "Request body is not valid UTF-8",
                context={"content_type": media_type},
                cause=exc,
            ) from exc

    if isinstance(body, str) and media_type == "application/json":
        try:
            body = json.loads(body)
        except ValueError as exc:
            raise MissingInputError(
                "Request body is not valid JSON",
                context={"content_type": media_type},
                cause=exc,
            ) from exc

    if isinstance(body, str):
        if body.strip():
            return body
    elif isinstance(body, Mapping):
        for field in MARKDOWN_FIELDS:
            value = body.get(field)
            if isinstance(value, str) and value.strip():
                return value

    raise MissingInputError(
        "Request body must contain markdown (text/markdown, text/plain) or a "
        "JSON object with a 'markdown', 'content' or 'text' field",
        context={"content_type": media_type, "fields": list(MARKDOWN_FIELDS)},
    )


# ---------------------------------------------------------------------------
# Conversion endpoint
# ---------------------------------------------------------------------------

def convert_markdown(
    markdown: str,
    converter: MarkdownToRicosConverter,
) -> dict[str, Any]:
    """Convert *markdown* to a RICOS dict, wrapping any failure.

    Raises
    ------
    ConversionError
        Wrapping whatever exception the pipeline raised.  ``context["stage"]``
        names the step that failed: ``"tokenize"``, ``"build"`` or
        ``"serialize"``.
    """
    stage = "tokenize"
    try:
        tokens = converter.tokenize(markdown)
        stage = "build"
        document = converter.convert_tokens(tokens)
        stage = "serialize"
        return document_to_dict(document)
    except Exception as exc:
        raise ConversionError(
            f"Markdown conversion failed: {exc}",
            context={"stage": stage, "exception_type": type(exc).__name__},
            cause=exc,
        ) from exc


def handle_convert(
    body: Any,
    content_type: str | None = None,
    *,
    config: RicosConfig | None = None,
    converter: MarkdownToRicosConverter | None = None,
) -> tuple[int, dict[str, Any]]:
    """Handle one conversion request.

    Returns
    -------
    tuple[int, dict]
        HTTP status code and JSON-serialisable response payload.
    """
    try:
        markdown = extract_markdown(body, content_type)
    except MissingInputError as exc:
        log.info(
            "rejected request without markdown",
            extra={"extra_fields": {"code": exc.code, **exc.context}},
        )
        return 400, {"error": exc.message}

    converter = converter or MarkdownToRicosConverter(config)
    try:
        data = convert_markdown(markdown, converter)
    except ConversionError as exc:
        log.error(
            "conversion failed",
            exc_info=exc.cause,
            extra={"extra_fields": {"code": exc.code, **exc.context}},
        )
        return 500, {
            "error": "Error while converting markdown",
            "details": str(exc.cause),
        }

    return 200, {"success": True, "data": data}


# ---------------------------------------------------------------------------
# Informational payloads
# ---------------------------------------------------------------------------

def service_info() -> dict[str, Any]:
    """Describe the conversion endpoints."""
    return {
        "message": "Markdown to RICOS conversion API",
        "endpoints": {
            "POST /convert": "Convert markdown to a RICOS rich-content document",
            "GET /example": "Return an example conversion",
        },
    }


def example_conversion(config: RicosConfig | None = None) -> dict[str, Any]:
    """Convert :data:`EXAMPLE_MARKDOWN` and return both sides."""
    document = MarkdownToRicosConverter(config).convert(EXAMPLE_MARKDOWN)
    return {"markdown": EXAMPLE_MARKDOWN, "ricos": document_to_dict(document)}
