"""Normalization of raw page metadata values.

Every helper reads one key from a page's raw field mapping and returns a
canonical string. Missing keys behave like empty strings and malformed input
degrades to empty or default values; nothing here raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Tuple

DEFAULT_LANGUAGE = "en"

DEFAULT_LANGUAGES: Tuple[str, ...] = (
    "es",
    "id",
    "ja",
    "ko",
    "pt-br",
    "ru",
    "vi",
    "zh-cn",
    "zh-tw",
)

TAGS_KEY = "meta.tags"
KEYWORDS_KEY = "page.tags"
GROUP_KEY = "sample.group"

_SPAN_PATTERN = re.compile(r"<span(.*?)</span>")


@dataclass(frozen=True)
class NormalizationConfig:
    """Switches that shape metadata normalization."""

    lowercase_tags: bool = True
    lowercase_keywords: bool = True
    keep_title_tail: bool = False
    locale_prefix: str = "intl"
    languages: Tuple[str, ...] = DEFAULT_LANGUAGES


DEFAULT_CONFIG = NormalizationConfig()


def get_page_tags_normalized(
    fields: Mapping[str, str],
    key: str,
    config: NormalizationConfig = DEFAULT_CONFIG,
) -> str:
    """Return a comma-delimited list of single-quoted, trimmed tokens for ``key``."""
    raw = fields.get(key) or ""
    if not raw:
        return ""

    lowercase = (key == TAGS_KEY and config.lowercase_tags) or (
        key == KEYWORDS_KEY and config.lowercase_keywords
    )
    parts = raw.replace('"', "").split(",")
    # Trailing empty segments ("a,b,") carry no tag.
    while parts and not parts[-1]:
        parts.pop()

    tokens = []
    for part in parts:
        if lowercase:
            part = part.lower()
        tokens.append(f"'{part.strip()}'")
    return ",".join(tokens)


def get_string_value_normalized(
    fields: Mapping[str, str],
    key: str,
    config: NormalizationConfig = DEFAULT_CONFIG,
) -> str:
    """Return the first comma-separated segment of ``key`` with quotes and a leading slash removed."""
    value = fields.get(key) or ""
    if not value:
        return ""

    value = value.replace('"', "").split(",", 1)[0]
    if value.startswith("/"):
        value = value[1:]
    if key == GROUP_KEY and config.lowercase_tags:
        value = value.lower()
    return value.strip()


def get_title_normalized(
    fields: Mapping[str, str],
    key: str,
    config: NormalizationConfig = DEFAULT_CONFIG,
) -> str:
    """Return the page title with double quotes swapped for single quotes and span markup handled."""
    title = fields.get(key) or ""
    if not title:
        return ""

    title = title.replace('"', "'")
    if "<span" in title:
        if config.keep_title_tail:
            title = _SPAN_PATTERN.sub("", title)
        else:
            # Only the text before the first span survives.
            title = _SPAN_PATTERN.split(title, maxsplit=1)[0]
    return title.strip()


def get_lang_string_normalized(
    path: str, config: NormalizationConfig = DEFAULT_CONFIG
) -> str:
    """Return the language code encoded in a page path, or ``"en"``."""
    segments = (path or "").lower().split("/")
    if len(segments) > 1 and segments[0] == config.locale_prefix:
        if segments[1] in config.languages:
            return segments[1]
    return DEFAULT_LANGUAGE


def split_tokens(normalized: str) -> Tuple[str, ...]:
    """Split a normalized tag string back into its quoted tokens."""
    if not normalized:
        return ()
    return tuple(normalized.split(","))


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_LANGUAGE",
    "DEFAULT_LANGUAGES",
    "GROUP_KEY",
    "KEYWORDS_KEY",
    "NormalizationConfig",
    "TAGS_KEY",
    "get_lang_string_normalized",
    "get_page_tags_normalized",
    "get_string_value_normalized",
    "get_title_normalized",
    "split_tokens",
]
