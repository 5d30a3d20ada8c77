from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.sample_builder import SampleBuilder


@pytest.fixture
def sample_builder(tmp_path: Path) -> SampleBuilder:
    """Provide a reusable sample project builder rooted at the pytest tmp_path."""
    return SampleBuilder(tmp_path)
