"""
Elm Rendering

Turns a parsed SVG element tree into an elm/svg expression, e.g.

    <svg><g><path d="M0 0"/></g></svg>

becomes

    [ S.g [] [ S.path [ A.d "M0 0" ] [] ] ]

The generated module imports Svg as S and Svg.Attributes as A.
"""

import re
from typing import Iterable, List, Mapping

from svg_processor import ElementNode

SVG_MODULE = "S"
ATTRIBUTES_MODULE = "A"

# Svg.Attributes names that would clash with Elm keywords
ELM_KEYWORDS = {"type", "in", "let", "case", "of", "if", "then", "else", "module", "import", "port"}


def camel_case_attribute(attribute: str) -> str:
    """stroke-width -> strokeWidth, type -> type_"""
    name = re.sub(r'-(.)', lambda m: m.group(1).upper(), attribute)
    if name in ELM_KEYWORDS:
        name += "_"
    return name


def elm_string(value: str) -> str:
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def elm_list(items: Iterable[str]) -> str:
    items = list(items)
    if not items:
        return "[]"
    return f"[ {', '.join(items)} ]"


def render_attributes(attributes: Mapping[str, str]) -> List[str]:
    return [
        f"{ATTRIBUTES_MODULE}.{camel_case_attribute(name)} {elm_string(value)}"
        for name, value in attributes.items()
    ]


def render_element(element: ElementNode) -> str:
    """
    Render an element and its subtree.

    The <svg> root renders as the plain list of its children; the enclosing
    icon supplies the real <svg> envelope.
    """
    children = elm_list(render_element(child) for child in element.children)
    if element.name == "svg":
        return children
    attributes = elm_list(render_attributes(element.attributes))
    return f"{SVG_MODULE}.{element.name} {attributes} {children}"
