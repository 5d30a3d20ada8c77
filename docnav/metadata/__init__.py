"""Page metadata normalization, grouping and tag indexing."""

from __future__ import annotations

from .indexer import TypeForest, build_page_node
from .normalize import NormalizationConfig
from .tags import build_tag_forest

__all__ = ["NormalizationConfig", "TypeForest", "build_page_node", "build_tag_forest"]
