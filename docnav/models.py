"""Core data models shared across docnav components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class MetadataNode:
    """Metadata for one documentation page, or a root grouping pages by type or tag.

    Leaf nodes never carry ``children``. Root nodes own a ``children`` list
    that only ever grows by appending.
    """

    label: str = ""
    title_friendly: str = ""
    summary: str = ""
    link: str = ""
    group: str = ""
    image: str = ""
    lang: str = ""
    type: str = ""
    keywords: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    children: Optional[List["MetadataNode"]] = None

    @classmethod
    def leaf(
        cls,
        *,
        label: str = "",
        title_friendly: str = "",
        summary: str = "",
        link: str = "",
        group: str = "",
        image: str = "",
        lang: str = "",
        type: str = "",
        keywords: Sequence[str] = (),
        tags: Sequence[str] = (),
    ) -> "MetadataNode":
        """Build a page node; ``None`` values are treated as empty."""
        return cls(
            label=label or "",
            title_friendly=title_friendly or "",
            summary=summary or "",
            link=link or "",
            group=group or "",
            image=image or "",
            lang=lang or "",
            type=type or "",
            keywords=tuple(keywords or ()),
            tags=tuple(tags or ()),
        )

    @classmethod
    def type_root(cls, type_name: str, first_child: "MetadataNode") -> "MetadataNode":
        """Build the root that groups every page of ``type_name``."""
        return cls(label=type_name, type=type_name, children=[first_child])

    @classmethod
    def tag_root(cls, label: str, indices: Sequence[str]) -> "MetadataNode":
        """Build a tag root whose ``tags`` hold child positions as strings."""
        return cls(label=label, tags=tuple(indices), children=[])

    @property
    def is_leaf(self) -> bool:
        return self.children is None


class NavType(str, Enum):
    """Kinds of entries in the sample navigation tree."""

    FILE = "file"
    IMAGE = "img"
    DIRECTORY = "dir"
    MANIFEST = "manifest"
    JAVA = "java"
    XML = "xml"

    def __str__(self) -> str:
        return self.value


@dataclass
class NavNode:
    """Navigation node mirroring a file or directory of a sample project."""

    label: str
    link: Optional[str] = None
    children: Optional[List["NavNode"]] = None
    type: Optional[NavType] = None


@dataclass
class PageRecord:
    """Raw metadata for one documentation page."""

    link: str
    fields: Dict[str, str] = field(default_factory=dict)
    exclude: bool = False
