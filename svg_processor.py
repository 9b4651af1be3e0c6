"""
SVG Processing Utilities

Functions for cleaning raw icon SVG text and parsing it into an element tree.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Tuple

from lxml import etree

logger = logging.getLogger(__name__)

XML_DECLARATION_RE = re.compile(r'^.*<\?xml.*?>')
# Full-canvas scaffolding rect left in by the design tool (256x256 viewBox)
BACKGROUND_RECT_RE = re.compile(r'<rect width="25[\d,.]+" height="25[\d,.]+" fill="none".*?/>')
TITLE_RE = re.compile(r'<title')
ZERO_HEX_COLOR_RE = re.compile(r'"#0+"')

_parser = etree.XMLParser(
    remove_blank_text=True,
    remove_comments=True,
    remove_pis=True,
    resolve_entities=False,
    no_network=True,
)


class SVGParseError(ValueError):
    """The SVG text is not well-formed XML"""


class MalformedIconError(ValueError):
    """The document parsed, but its root element is not <svg>"""

    def __init__(self, root_name: str):
        super().__init__(f"Root element was {root_name}")
        self.root_name = root_name


@dataclass(frozen=True)
class ElementNode:
    """One parsed SVG element: tag, attributes in document order, child elements"""
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Tuple["ElementNode", ...] = ()


def strip_xml_declaration(svg_content: str) -> str:
    return XML_DECLARATION_RE.sub('', svg_content)


def strip_background_rect(svg_content: str) -> str:
    return BACKGROUND_RECT_RE.sub('', svg_content)


def strip_title(svg_content: str) -> str:
    return TITLE_RE.sub('', svg_content)


def normalize_colors(svg_content: str) -> str:
    """
    Rewrite all-zero hex colors to currentColor so icons inherit the text color.

    Only runs of zeros are rewritten: "#000" and "#000000" change,
    "#3a3a3a" and "#000001" do not.
    """
    return ZERO_HEX_COLOR_RE.sub('"currentColor"', svg_content)


def sanitize_svg(svg_content: str) -> str:
    """
    Clean raw icon SVG before parsing.

    Applied in order: XML declaration, decorative background rect, leftover
    <title fragments, zero hex colors. Running it twice changes nothing.

    Args:
        svg_content: Raw SVG string

    Returns:
        Sanitized SVG string
    """
    svg_content = strip_xml_declaration(svg_content)
    svg_content = strip_background_rect(svg_content)
    svg_content = strip_title(svg_content)
    return normalize_colors(svg_content)


def _to_node(element) -> ElementNode:
    children = tuple(_to_node(child) for child in element if isinstance(child.tag, str))
    attributes = {etree.QName(key).localname: value for key, value in element.attrib.items()}
    return ElementNode(
        name=etree.QName(element).localname,
        attributes=attributes,
        children=children,
    )


def parse_svg(svg_content: str) -> ElementNode:
    """
    Parse sanitized SVG text into an element tree.

    Namespaces are dropped from tag and attribute names; comments and
    processing instructions are discarded.

    Raises:
        SVGParseError: the text is not well-formed XML
        MalformedIconError: the root element is not <svg>
    """
    try:
        root = etree.fromstring(svg_content.encode('utf-8'), _parser)
    except etree.XMLSyntaxError as e:
        raise SVGParseError(f"Error parsing SVG: {e}") from e

    node = _to_node(root)
    if node.name != "svg":
        raise MalformedIconError(node.name)

    logger.debug(f"Parsed <svg> with {len(node.children)} child element(s)")
    return node
