"""Mirror a sample-code project into browsable pages and a navigation tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import TemplateError
from markupsafe import escape

from ..logging import get_logger
from ..models import NavNode, NavType
from ..writer import PageWriter

HTML_EXTENSION = ".html"
INDEX_TEMPLATE = "sampleindex.cs"
PAGE_TEMPLATE = "sample.cs"
MANIFEST_NAME = "AndroidManifest.xml"

IMAGES: tuple[str, ...] = (".png", ".jpg", ".gif")
TEMPLATED: tuple[str, ...] = (".java", ".xml", ".aidl", ".rs", ".txt", ".TXT")

_EXCLUDED_NAMES = frozenset({"default.properties", "build.properties", "Android.mk"})
_EXCLUDED_SUFFIXES: tuple[str, ...] = (".ttf",)

# Leading path segments reserved for the build root (e.g. "samples/<project>").
_BREADCRUMB_OFFSET = 2
_PROJECT_ROOT_SEGMENTS = 3

logger = get_logger("samples")


def convert_extension(path: str, ext: str) -> str:
    """Replace the extension of ``path`` with ``ext``."""
    dot = path.rfind(".")
    if dot == -1:
        return path + ext
    return path[:dot] + ext


def in_list(path: str, suffixes: Sequence[str]) -> bool:
    return path.endswith(tuple(suffixes))


def map_types(name: str) -> NavType:
    """Classify a file for the navigation tree by its name."""
    extension = name[name.rfind(".") + 1 :]
    if name == MANIFEST_NAME:
        return NavType.MANIFEST
    if extension == "java":
        return NavType.JAVA
    if extension == "xml":
        return NavType.XML
    return NavType.FILE


def is_excluded(name: str) -> bool:
    """Return True for hidden, private and build-metadata entries."""
    return (
        name.startswith((".", "_"))
        or name in _EXCLUDED_NAMES
        or name.endswith(_EXCLUDED_SUFFIXES)
    )


def parent_dirs(relative: str) -> List[str]:
    """Return the breadcrumb segments for a path relative to the output root."""
    segments = relative.split("/")
    while segments and not segments[-1]:
        segments.pop()
    return segments[_BREADCRUMB_OFFSET:]


def is_project_root(directory: Path | str) -> bool:
    """A directory whose raw path has exactly three segments is a project root."""
    return len(str(directory).split("/")) == _PROJECT_ROOT_SEGMENTS


@dataclass
class DirectoryListing:
    """Entries written to a directory's index page."""

    entries: List[Dict[str, Any]] = field(default_factory=list)
    summary: Optional[str] = None


class SampleCode:
    """Writes the pages of one sample project and builds its navigation tree."""

    def __init__(
        self,
        source: str | Path,
        dest: str,
        title: str,
        writer: PageWriter,
        *,
        base_dir: Path | None = None,
    ) -> None:
        self.source = Path(source)
        # Project roots are judged on paths as configured, relative to base_dir.
        self.base_dir = base_dir
        self.title = title
        self.writer = writer
        if len(dest) > 1 and not dest.endswith("/"):
            dest += "/"
        self.dest = dest

    def write(self, offline: bool = False) -> Optional[NavNode]:
        """Mirror the project; return its navigation root unless offline."""
        if not self.source.is_dir():
            logger.error("Sample code source is not a directory: %s", self.source)
            return None

        if offline:
            self.write_index_only(self.source, self.dest)
            return None

        name = self.source.name
        children: List[NavNode] = []
        listing = self.write_project_directory(children, self.source, self.dest)

        store = self._base_store()
        store.update(
            {
                "page": {"title": "Project Structure"},
                "parentdirs": [{"Name": name}],
                "showProjectPaths": "true",
                "summary": listing.summary or "",
                "files": listing.entries,
            }
        )
        self._write_index(store, f"{self.dest}project{HTML_EXTENSION}")
        return NavNode(self.title, f"samples/{name}/index.html", children, None)

    def write_project_directory(
        self, parent: List[NavNode], directory: Path, relative: str
    ) -> DirectoryListing:
        """Walk ``directory`` depth-first, appending accepted entries to ``parent``."""
        listing = DirectoryListing()
        try:
            paths = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            logger.warning("Cannot list sample directory %s: %s", directory, exc)
            paths = []

        for path in paths:
            name = path.name
            if is_excluded(name):
                logger.debug("Skipping %s", path)
                continue
            if path.is_file() and "." in name:
                self._mirror_file(parent, listing, path, relative)
            elif path.is_dir():
                children: List[NavNode] = []
                sub_listing = self.write_project_directory(children, path, f"{relative}{name}/")
                entry: Dict[str, Any] = {
                    "name": name,
                    "type": NavType.DIRECTORY.value,
                    "href": f"{relative}{name}/index.html",
                    "children": sub_listing.entries,
                }
                if sub_listing.summary is not None:
                    entry["summary_flag"] = True
                    entry["summary_href"] = f"{relative}{name}/index.html"
                listing.entries.append(entry)
                if children:
                    parent.append(NavNode(name, None, children, NavType.DIRECTORY))

        listing.summary = self.read_summary(directory)
        store = self._base_store()
        store.update(
            {
                "page": {"title": directory.name},
                "summary": listing.summary or "",
                "showProjectPaths": "true" if is_project_root(self._raw_path(directory)) else "false",
                "parentdirs": [{"Name": segment} for segment in parent_dirs(relative)],
                "subdir": relative,
                "files": listing.entries,
            }
        )
        self._write_index(store, f"{relative}index{HTML_EXTENSION}")
        return listing

    def write_index_only(self, directory: Path, relative: str) -> None:
        """Write just the project's index page."""
        store = {
            "page": {"title": f"{directory.name} - {self.title}"},
            "projectTitle": self.title,
            "summary": self.read_summary(directory) or "",
        }
        self._write_index(store, f"{relative}index{HTML_EXTENSION}")

    def read_summary(self, directory: Path) -> Optional[str]:
        """Return the text of the directory's ``_index.html``, if present."""
        try:
            return self.writer.read_file(directory / "_index.html")
        except OSError as exc:
            logger.warning("Cannot read summary for %s: %s", directory, exc)
            return None

    def write_page(self, source: Path, out: str, subdir: str) -> None:
        """Render a source file as an escaped listing page."""
        contents = self.writer.read_file(source, strip=False) or ""
        self._write_file_page(source.name, str(escape(contents)), out, subdir)

    def write_image_page(self, source: Path, out: str, subdir: str) -> None:
        name = source.name
        self._write_file_page(name, f'<img src="{name}" title="{name}" />', out, subdir)

    # ------------------------------------------------------------------
    # Internal helpers

    def _mirror_file(
        self, parent: List[NavNode], listing: DirectoryListing, path: Path, relative: str
    ) -> None:
        name = path.name
        out = relative + name
        node_type = map_types(name)
        link = convert_extension(out, HTML_EXTENSION)
        try:
            if in_list(out, IMAGES):
                node_type = NavType.IMAGE
                self.writer.copy_file(path, out)
                self.write_image_page(path, link, relative)
                listing.entries.append({"name": name, "type": node_type.value, "href": link})
            if in_list(out, TEMPLATED):
                self.writer.copy_file(path, out)
                self.write_page(path, link, relative)
                listing.entries.append({"name": name, "type": node_type.value, "href": link})
        except (OSError, TemplateError) as exc:
            logger.warning("Failed to write sample page for %s: %s", path, exc)
            return
        parent.append(NavNode(name, link, None, node_type))

    def _raw_path(self, directory: Path) -> str:
        if self.base_dir is not None:
            try:
                return directory.relative_to(self.base_dir).as_posix()
            except ValueError:
                pass
        return str(directory)

    def _write_file_page(self, name: str, contents: str, out: str, subdir: str) -> None:
        store = self._base_store()
        store.update(
            {
                "page": {"title": name},
                "parentdirs": [{"Name": segment} for segment in parent_dirs(subdir)],
                "subdir": subdir,
                "realFile": name,
                "fileContents": contents,
            }
        )
        self.writer.write(store, PAGE_TEMPLATE, out)

    def _write_index(self, store: Dict[str, Any], out: str) -> None:
        try:
            self.writer.write(store, INDEX_TEMPLATE, out)
        except (OSError, TemplateError) as exc:
            logger.warning("Failed to write sample index %s: %s", out, exc)
        else:
            logger.debug("Wrote sample index %s", out)

    def _base_store(self) -> Dict[str, Any]:
        return {
            "samples": "true",
            "projectTitle": self.title,
            "resType": "Sample Code",
            "resTag": "sample",
        }


__all__ = [
    "DirectoryListing",
    "IMAGES",
    "SampleCode",
    "TEMPLATED",
    "convert_extension",
    "in_list",
    "is_excluded",
    "is_project_root",
    "map_types",
    "parent_dirs",
]
