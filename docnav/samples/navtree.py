"""Write the navigation tree of all mirrored sample projects."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..logging import get_logger
from ..models import NavNode
from ..render import render_nav_children
from ..writer import PageWriter

NAVTREE_TEMPLATE = "samples_navtree_data.cs"
NAVTREE_OUTPUT = "samples_navtree_data.js"

logger = get_logger("samples")


def write_samples_nav_tree(nodes: List[NavNode], writer: PageWriter) -> Path:
    """Render the sample roots (without an enclosing root) to the navtree script."""
    root = NavNode("Reference", "packages.html", nodes, None)
    store = {"reference_tree": render_nav_children(root.children)}
    target = writer.write(store, NAVTREE_TEMPLATE, NAVTREE_OUTPUT)
    logger.info("Wrote navigation tree for %d sample project(s)", len(nodes))
    return target


__all__ = ["NAVTREE_OUTPUT", "NAVTREE_TEMPLATE", "write_samples_nav_tree"]
