"""Load page metadata records from a YAML manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from .logging import get_logger
from .models import PageRecord

logger = get_logger("manifest")


class ManifestError(RuntimeError):
    """Raised when a page manifest cannot be read."""


def load_pages(path: Path) -> List[PageRecord]:
    """Return the page records listed in ``path``.

    The document is either a list of pages or a mapping with a ``pages``
    list. Each page is a mapping with ``link``, an optional ``exclude`` flag
    and a ``fields`` mapping of raw metadata keys such as ``page.title``.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Failed to read page manifest {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text) if text.strip() else []
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to parse page manifest {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("pages") or []
    if not isinstance(data, list):
        raise ManifestError(f"Page manifest {path} must contain a list of pages")

    records: List[PageRecord] = []
    for position, raw in enumerate(data):
        record = _record_from_dict(raw)
        if record is None:
            logger.warning("Skipping malformed page entry #%d in %s", position, path)
            continue
        records.append(record)
    return records


def _record_from_dict(payload: Any) -> PageRecord | None:
    if not isinstance(payload, dict):
        return None
    link = payload.get("link")
    if not isinstance(link, str) or not link:
        return None
    raw_fields = payload.get("fields") or {}
    if not isinstance(raw_fields, dict):
        return None
    fields: Dict[str, str] = {}
    for key, value in raw_fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, list):
            value = ",".join(str(item) for item in value)
        fields[str(key)] = str(value)
    exclude = payload.get("exclude") is True or str(payload.get("exclude", "")).lower() == "true"
    return PageRecord(link=link, fields=fields, exclude=exclude)


__all__ = ["ManifestError", "load_pages"]
