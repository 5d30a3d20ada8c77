"""Derive a per-type index from tag label to page positions."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..models import MetadataNode


def build_tag_forest(children: Sequence[MetadataNode]) -> List[MetadataNode]:
    """Return one tag root per distinct tag, in first-seen order.

    Each root's ``tags`` holds the positions (as strings) of the children that
    carry the tag. A child listing the same tag twice contributes its
    position twice.
    """
    positions: Dict[str, List[str]] = {}
    for index, child in enumerate(children):
        if not child.tags:
            continue
        for tag in child.tags:
            positions.setdefault(tag, []).append(str(index))
    return [MetadataNode.tag_root(label, indices) for label, indices in positions.items()]


__all__ = ["build_tag_forest"]
