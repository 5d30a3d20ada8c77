"""Template rendering, asset copying and file reading for generated pages."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, List, Mapping, Optional

from jinja2 import Environment, FileSystemLoader

from .logging import get_logger

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


class PageWriter:
    """Renders key-value stores through named templates into an output tree."""

    def __init__(self, output_dir: Path, templates_dir: Path | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("writer")

    def write(self, store: Mapping[str, Any], template_name: str, output_path: str) -> Path:
        """Render ``template_name`` with ``store`` and write it below the output dir."""
        template = self._env.get_template(template_name)
        target = self._resolve(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(template.render(**store), encoding="utf-8")
        self.logger.debug("Wrote %s using %s", target, template_name)
        return target

    def copy_file(self, source: Path, output_path: str) -> Path:
        """Copy ``source`` verbatim to ``output_path`` below the output dir."""
        target = self._resolve(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        self.logger.debug("Copied %s to %s", source, target)
        return target

    def read_file(self, path: Path, *, strip: bool = True) -> Optional[str]:
        """Return the text of ``path``, or ``None`` when it does not exist."""
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None
        return text.strip() if strip else text

    def _resolve(self, output_path: str) -> Path:
        relative = output_path.lstrip("/")
        return self.output_dir / relative

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        # ensure uniqueness preserving order
        seen: set[str] = set()
        ordered: List[str] = []
        for directory in directories:
            if directory not in seen:
                ordered.append(directory)
                seen.add(directory)
        loader = FileSystemLoader(ordered)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["DEFAULT_TEMPLATES_DIR", "PageWriter"]
