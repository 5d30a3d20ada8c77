"""Group page metadata into a forest of type roots."""

from __future__ import annotations

from typing import Iterator, List, Mapping

from ..logging import get_logger
from ..models import MetadataNode
from .normalize import (
    DEFAULT_CONFIG,
    GROUP_KEY,
    KEYWORDS_KEY,
    TAGS_KEY,
    NormalizationConfig,
    get_lang_string_normalized,
    get_page_tags_normalized,
    get_string_value_normalized,
    get_title_normalized,
    split_tokens,
)

EXCLUDE_KEY = "excludeFromSuggestions"

logger = get_logger("metadata")


def build_page_node(
    fields: Mapping[str, str],
    link: str,
    config: NormalizationConfig = DEFAULT_CONFIG,
) -> MetadataNode:
    """Extract the supported metadata values of one page into a leaf node."""
    return MetadataNode.leaf(
        label=get_title_normalized(fields, "page.title", config),
        title_friendly=fields.get("page.titleFriendly") or "",
        summary=fields.get("page.summary") or "",
        link=link,
        group=get_string_value_normalized(fields, GROUP_KEY, config),
        keywords=split_tokens(get_page_tags_normalized(fields, KEYWORDS_KEY, config)),
        tags=split_tokens(get_page_tags_normalized(fields, TAGS_KEY, config)),
        image=get_string_value_normalized(fields, "page.image", config),
        lang=get_lang_string_normalized(link, config),
        type=get_string_value_normalized(fields, "page.type", config),
    )


class TypeForest:
    """Ordered roots, one per distinct page type, each owning its pages."""

    def __init__(self, config: NormalizationConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._roots: List[MetadataNode] = []

    @property
    def roots(self) -> List[MetadataNode]:
        return list(self._roots)

    def __len__(self) -> int:
        return len(self._roots)

    def __iter__(self) -> Iterator[MetadataNode]:
        return iter(list(self._roots))

    def index_page(
        self, exclude: bool, fields: Mapping[str, str], link: str
    ) -> "TypeForest":
        """Add one page unless it is excluded from suggestions."""
        if exclude or (fields.get(EXCLUDE_KEY) or "") == "true":
            logger.debug("Excluding %s from metadata lists", link)
            return self
        return self.append(build_page_node(fields, link, self.config))

    def append(self, node: MetadataNode) -> "TypeForest":
        """Attach ``node`` to the first root of the same type, creating one if needed."""
        for root in self._roots:
            if root.type == node.type:
                root.children.append(node)
                return self
        self._roots.append(MetadataNode.type_root(node.type, node))
        return self

    def sorted_roots(self) -> List[MetadataNode]:
        """Return the roots ordered by type name."""
        return sorted(self._roots, key=lambda root: root.type)


__all__ = ["EXCLUDE_KEY", "TypeForest", "build_page_node"]
