"""SVG document reader — facade over the element codec + path-data parser.

Converts raw SVG string -> SvgDocument with every <path> element's ``d`` parsed.
"""

from __future__ import annotations

import logging
import re

from pathdata.models.svg_document import SvgDocument, SvgPathElement, commands_to_models
from pathdata.svg.element import parse_element
from pathdata.svg.errors import PathDataError
from pathdata.svg.path import parse_path

logger = logging.getLogger(__name__)

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG markup. Paths with bad data are logged and listed in ``errors``.

    Raises ElementDecodeError if the markup itself is malformed.
    """
    doc = SvgDocument()

    root = parse_element(svg_text)
    if root is None:
        logger.info("Parsed SVG: empty document")
        return doc

    doc.viewbox = _parse_viewbox(root.attributes.get("viewBox", ""))

    for z_order, element in enumerate(root.iter("path")):
        el_id = f"E{z_order + 1}"
        d = element.attributes.get("d", "")

        try:
            path = parse_path(d)
        except PathDataError as e:
            logger.warning("Failed to parse path %s: %s", el_id, e)
            doc.errors[el_id] = e.message
            continue

        doc.paths.append(
            SvgPathElement(
                id=el_id,
                attributes=element.attributes,
                commands=commands_to_models(path),
                subpath_count=len(path.subpaths()),
            )
        )

    logger.info("Parsed SVG: %d paths, %d failed", len(doc.paths), len(doc.errors))
    return doc


def _parse_viewbox(value: str) -> tuple[float, float, float, float] | None:
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    return (x, y, w, h)
