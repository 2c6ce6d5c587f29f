"""lxml-based product XML parser and schema detection.

Decodes the percent-encoded request payload, parses it once with a
hardened lxml parser and flattens the tree into a ``ProductDocument``.
Element names are matched by local name so namespaced annotation files
parse the same as the plain catalog XML.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import unquote_to_bytes

from s1_metadata.activities.extract_metadata._validation import MalformedInputError
from s1_metadata.core.constants import (
    DEFAULT_MAX_INPUT_BYTES,
    GRID_POINT_TAG,
    LEGACY_MARKER_TAG,
)
from s1_metadata.models.document import GridPoint, ProductDocument, SchemaVariant

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("s1_metadata.activities.extract_metadata")

RawInput = str | bytes | Iterable[str]

_XML_DECLARATION_RE = re.compile(
    rb"^\s*<\?xml[^>]*?\sencoding=[\"']([A-Za-z][A-Za-z0-9._-]*)[\"']"
)


def decode_input(raw: RawInput, *, max_bytes: int = DEFAULT_MAX_INPUT_BYTES) -> bytes:
    """Join and percent-decode a raw product payload into XML bytes.

    Escapes are decoded to raw bytes and left for lxml to decode
    according to the document's own ``<?xml encoding=...?>`` declaration
    (UTF-8 when there is none).  Literal characters of a text payload are
    encoded with that declared encoding.

    Args:
        raw: The payload as text, bytes, or an iterable of text chunks.
        max_bytes: Largest accepted decoded document size.

    Returns:
        The decoded XML document bytes.

    Raises:
        MalformedInputError: If the payload is empty, too large, or holds
            characters its declared encoding cannot represent.
    """
    if isinstance(raw, bytes):
        content = unquote_to_bytes(raw)
    else:
        text = raw if isinstance(raw, str) else "".join(raw)
        content = unquote_to_bytes(text)
        encoding = _declared_encoding(content)
        if encoding and not text.isascii():
            try:
                content = unquote_to_bytes(text.encode(encoding))
            except (LookupError, UnicodeEncodeError) as exc:
                msg = f"Payload cannot be encoded as declared {encoding!r}: {exc}"
                raise MalformedInputError(msg) from exc

    if not content.strip():
        msg = "Product XML is empty"
        raise MalformedInputError(msg)
    if len(content) > max_bytes:
        msg = f"Product XML is {len(content)} bytes, limit is {max_bytes}"
        raise MalformedInputError(msg)
    return content


def parse_product_xml(content: bytes) -> ProductDocument:
    """Parse product XML into a ``ProductDocument``.

    Raises:
        MalformedInputError: If the content is not well-formed XML.
    """
    from lxml import etree  # type: ignore[attr-defined]

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root: _Element = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise MalformedInputError(msg) from exc

    elements: dict[str, str] = {}
    grid_points: list[GridPoint] = []
    for elem in root.iter():
        if not isinstance(elem.tag, str):
            # comments and processing instructions
            continue
        name = etree.QName(elem).localname
        if name not in elements:
            elements[name] = _leaf_text(elem)
        if name == GRID_POINT_TAG:
            grid_points.append(_parse_grid_point(elem))

    return ProductDocument(
        root_tag=etree.QName(root).localname,
        elements=elements,
        grid_points=grid_points,
    )


def detect_variant(document: ProductDocument) -> SchemaVariant:
    """Return the schema variant of *document*.

    The legacy annotation schema is recognised by its header block;
    every document without it is treated as the current schema.
    """
    variant = (
        SchemaVariant.LEGACY if document.has_element(LEGACY_MARKER_TAG) else SchemaVariant.MODERN
    )
    logger.debug("Detected %s product schema (root=<%s>)", variant.value, document.root_tag)
    return variant


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_grid_point(elem: _Element) -> GridPoint:
    """Read the line/pixel/latitude/longitude children of a grid point."""
    from lxml import etree  # type: ignore[attr-defined]

    values: dict[str, str] = {}
    for child in elem:
        if not isinstance(child.tag, str):
            continue
        name = etree.QName(child).localname
        if name in ("line", "pixel", "latitude", "longitude") and name not in values:
            values[name] = _leaf_text(child).strip()

    return GridPoint(
        line=values.get("line"),
        pixel=values.get("pixel"),
        latitude=values.get("latitude"),
        longitude=values.get("longitude"),
    )


def _leaf_text(elem: _Element) -> str:
    """Return the full text of *elem*, joined across comments and PIs.

    Elements with child elements keep only their leading text; their
    values live in the children.
    """
    if any(isinstance(child.tag, str) for child in elem):
        return elem.text or ""
    return (elem.text or "") + "".join(child.tail or "" for child in elem)


def _declared_encoding(content: bytes) -> str | None:
    """Return the non-UTF-8 encoding named in the XML declaration, if any."""
    match = _XML_DECLARATION_RE.match(content)
    if match is None:
        return None
    encoding = match.group(1).decode("ascii")
    return None if encoding.lower().replace("_", "-") in ("utf-8", "utf8") else encoding
