"""Pipeline orchestration for the lists and samples commands."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .config import DocNavConfig, SampleConfig, load_config
from .lists import write_list
from .logging import get_logger
from .manifest import load_pages
from .metadata.indexer import TypeForest
from .models import NavNode, PageRecord
from .samples.mirror import SampleCode
from .samples.navtree import write_samples_nav_tree
from .writer import PageWriter


class Orchestrator:
    """Coordinates the metadata-list and sample-mirror pipelines."""

    def __init__(self, writer: PageWriter | None = None) -> None:
        self._writer = writer
        self.logger = get_logger("orchestrator")

    def run_lists(self, path: str, pages: str | None = None) -> Path:
        """Index every page of the manifest and write the metadata lists."""
        config = load_config(Path(path))
        manifest_path = Path(pages).expanduser().resolve() if pages else config.pages
        if manifest_path is None:
            raise FileNotFoundError(
                "No page manifest configured; pass --pages or set `pages` in .docnav.yml"
            )
        if not manifest_path.exists():
            raise FileNotFoundError(f"Page manifest not found: {manifest_path}")

        records = load_pages(manifest_path)
        self.logger.info("Indexing %d page(s) from %s", len(records), manifest_path)
        forest = self.index_pages(records, config)
        return write_list(forest, self._resolve_writer(config))

    def run_samples(self, path: str, *, offline: bool = False) -> Optional[Path]:
        """Mirror every configured sample project and write the navigation tree."""
        config = load_config(Path(path))
        if not config.samples:
            self.logger.warning("No sample projects configured in %s", config.root)
            return None

        writer = self._resolve_writer(config)
        roots: List[NavNode] = []
        for sample in config.samples:
            node = self._mirror_sample(config, sample, writer, offline=offline or sample.offline)
            if node is not None:
                roots.append(node)

        if offline:
            return None
        return write_samples_nav_tree(roots, writer)

    @staticmethod
    def index_pages(records: Iterable[PageRecord], config: DocNavConfig) -> TypeForest:
        forest = TypeForest(config.normalization)
        for record in records:
            forest.index_page(record.exclude, record.fields, record.link)
        return forest

    def _mirror_sample(
        self,
        config: DocNavConfig,
        sample: SampleConfig,
        writer: PageWriter,
        *,
        offline: bool,
    ) -> Optional[NavNode]:
        if sample.source.is_absolute():
            source, base_dir = sample.source, None
        else:
            source, base_dir = config.root / sample.source, config.root
        self.logger.info("Mirroring sample %s from %s", sample.title, source)
        code = SampleCode(source, sample.dest, sample.title, writer, base_dir=base_dir)
        return code.write(offline)

    def _resolve_writer(self, config: DocNavConfig) -> PageWriter:
        if self._writer is not None:
            return self._writer
        return PageWriter(config.output_dir, config.templates_dir)


__all__ = ["Orchestrator"]
