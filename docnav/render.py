"""Serialize metadata forests and navigation trees into script literals.

The output is consumed by client-side scripts, so every string leaf is
reduced to printable ASCII. Anything else, the backslash included, becomes a
``\\uXXXX`` escape whose four hex digits are written low nibble first:
``"\\\\"`` (U+005C) renders as ``\\uc500``. Readers decode with
:func:`unescape_js`.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .metadata.tags import build_tag_forest
from .models import MetadataNode, NavNode

_HEX_DIGITS = "0123456789abcdef"
NULL = "null"


def _code_units(value: str) -> Iterable[int]:
    for char in value:
        point = ord(char)
        if point > 0xFFFF:
            point -= 0x10000
            yield 0xD800 + (point >> 10)
            yield 0xDC00 + (point & 0x3FF)
        else:
            yield point


def escape_js(value: str, *, quote: Optional[str] = None) -> str:
    """Escape ``value`` so that only printable ASCII remains."""
    parts: List[str] = []
    for unit in _code_units(value):
        char = chr(unit)
        if 0x20 <= unit <= 0x7E and char != "\\" and char != quote:
            parts.append(char)
            continue
        digits = []
        for _ in range(4):
            digits.append(_HEX_DIGITS[unit & 0xF])
            unit >>= 4
        parts.append("\\u" + "".join(digits))
    return "".join(parts)


def unescape_js(text: str) -> str:
    """Reverse :func:`escape_js`."""
    units: List[int] = []
    index = 0
    while index < len(text):
        if text.startswith("\\u", index) and index + 6 <= len(text):
            digits = text[index + 2 : index + 6]
            unit = 0
            for position, digit in enumerate(digits):
                unit |= int(digit, 16) << (4 * position)
            units.append(unit)
            index += 6
        else:
            units.append(ord(text[index]))
            index += 1
    raw = b"".join(unit.to_bytes(2, "little") for unit in units)
    return raw.decode("utf-16-le", "surrogatepass")


def render_string(value: Optional[str]) -> str:
    """Render ``value`` as a double-quoted literal, or ``null``."""
    if value is None:
        return NULL
    escaped = escape_js(value, quote='"')
    return f'"{escaped}"'


def escape_token(token: str) -> str:
    """Escape a stored value, keeping the single quotes that wrap a token.

    Quotes inside the token body are escaped so that ``'it's'`` stays a
    single literal.
    """
    if len(token) >= 2 and token[0] == token[-1] == "'":
        return "'" + escape_js(token[1:-1], quote="'") + "'"
    return escape_js(token)


def render_array_value(values: Optional[Sequence[str]]) -> str:
    """Render the body of an array literal; values are emitted as stored."""
    if not values:
        return ""
    return ",".join(escape_token(str(value)) for value in values)


def _render_array_field(key: str, values: Optional[Sequence[str]]) -> str:
    return f"        {key}: [{render_array_value(values)}],\n"


def _render_resource(node: MetadataNode) -> str:
    return (
        "\n      {\n"
        f"        title:{render_string(node.label)},\n"
        f"        titleFriendly:{render_string(node.title_friendly)},\n"
        f"        summary:{render_string(node.summary)},\n"
        f"        url:{render_string(node.link)},\n"
        f"        group:{render_string(node.group)},\n"
        + _render_array_field("keywords", node.keywords)
        + _render_array_field("tags", node.tags)
        + f"        image:{render_string(node.image)},\n"
        f"        lang:{render_string(node.lang)},\n"
        f"        type:{render_string(node.type)}"
        "\n      }"
    )


def render_types(children: Optional[Sequence[MetadataNode]]) -> str:
    """Render the records of one type root."""
    if not children:
        return NULL
    return ", ".join(_render_resource(child) for child in children)


def render_type_resources(roots: Sequence[MetadataNode]) -> str:
    """Render a ``<TYPE>_RESOURCES`` array for every type root."""
    if not roots:
        return NULL
    buf: List[str] = []
    for root in roots:
        buf.append(f"var {root.type.upper()}_RESOURCES = [")
        buf.append(render_types(root.children))
        buf.append("\n];\n\n")
    return "".join(buf)


def render_tag_indices(tag_roots: Sequence[MetadataNode]) -> str:
    """Render ``label:[indices]`` pairs for the tag roots of one type."""
    entries = [
        f"\n    {escape_token(tag_root.label)}:[{render_array_value(tag_root.tags)}]"
        for tag_root in tag_roots
    ]
    return ", ".join(entries)


def render_types_by_tag(roots: Sequence[MetadataNode]) -> str:
    """Render a ``<TYPE>_BY_TAG`` object for every type root."""
    if not roots:
        return NULL
    buf: List[str] = []
    for root in roots:
        buf.append(f"var {root.type.upper()}_BY_TAG = {{")
        buf.append(render_tag_indices(build_tag_forest(root.children or [])))
        buf.append("\n};\n\n")
    return "".join(buf)


def render_nav_children(children: Optional[Sequence[NavNode]]) -> str:
    """Render a list of navigation nodes, or ``null`` when there are none."""
    if not children:
        return NULL
    return "[ " + ", ".join(render_nav_node(child) for child in children) + " ]\n"


def render_nav_node(node: NavNode) -> str:
    """Render ``[ label, link, children, type ]`` for one navigation node."""
    node_type = node.type.value if node.type is not None else None
    return (
        "[ "
        f"{render_string(node.label)}, "
        f"{render_string(node.link)}, "
        f"{render_nav_children(node.children)}, "
        f"{render_string(node_type)}"
        " ]"
    )


__all__ = [
    "NULL",
    "escape_js",
    "escape_token",
    "render_array_value",
    "render_nav_children",
    "render_nav_node",
    "render_string",
    "render_tag_indices",
    "render_type_resources",
    "render_types",
    "render_types_by_tag",
    "unescape_js",
]
