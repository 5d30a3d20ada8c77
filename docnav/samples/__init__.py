"""Sample-code mirroring and navigation tree output."""

from __future__ import annotations

from .mirror import SampleCode
from .navtree import write_samples_nav_tree

__all__ = ["SampleCode", "write_samples_nav_tree"]
