"""Write the unified metadata lists consumed by client-side scripts."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .metadata.indexer import TypeForest
from .render import NULL, render_type_resources, render_types_by_tag
from .writer import PageWriter

LISTS_TEMPLATE = "jd_lists_unified.cs"
LISTS_OUTPUT = "jd_lists_unified.js"

logger = get_logger("lists")


def render_lists(forest: TypeForest) -> str:
    """Render resources followed by tag indexes, roots ordered by type."""
    roots = forest.sorted_roots()
    if not roots:
        return NULL
    return render_type_resources(roots) + render_types_by_tag(roots)


def write_list(forest: TypeForest, writer: PageWriter) -> Path:
    """Write the metadata lists for every type in ``forest``."""
    store = {"reference_tree": render_lists(forest)}
    target = writer.write(store, LISTS_TEMPLATE, LISTS_OUTPUT)
    logger.info("Wrote metadata lists for %d type(s) to %s", len(forest), target)
    return target


__all__ = ["LISTS_OUTPUT", "LISTS_TEMPLATE", "render_lists", "write_list"]
