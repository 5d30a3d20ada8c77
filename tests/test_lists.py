"""End-to-end tests for the metadata lists output."""

from __future__ import annotations

from pathlib import Path

from docnav.lists import LISTS_OUTPUT, render_lists, write_list
from docnav.metadata.indexer import TypeForest
from docnav.writer import PageWriter

_EXPECTED = (
    "var GUIDE_RESOURCES = [\n"
    "      {\n"
    "        title:\"Intro\",\n"
    "        titleFriendly:\"\",\n"
    "        summary:\"\",\n"
    "        url:\"guide/intro.html\",\n"
    "        group:\"\",\n"
    "        keywords: [],\n"
    "        tags: ['setup','basics'],\n"
    "        image:\"\",\n"
    "        lang:\"en\",\n"
    "        type:\"guide\"\n"
    "      }\n"
    "];\n"
    "\n"
    "var REFERENCE_RESOURCES = [\n"
    "      {\n"
    "        title:\"API\",\n"
    "        titleFriendly:\"\",\n"
    "        summary:\"\",\n"
    "        url:\"reference/api.html\",\n"
    "        group:\"\",\n"
    "        keywords: [],\n"
    "        tags: [],\n"
    "        image:\"\",\n"
    "        lang:\"en\",\n"
    "        type:\"reference\"\n"
    "      }\n"
    "];\n"
    "\n"
    "var GUIDE_BY_TAG = {\n"
    "    'setup':[0], \n"
    "    'basics':[0]\n"
    "};\n"
    "\n"
    "var REFERENCE_BY_TAG = {\n"
    "};\n"
    "\n"
)


def _forest() -> TypeForest:
    forest = TypeForest()
    forest.index_page(
        False,
        {"page.title": "API", "page.type": "reference", "meta.tags": ""},
        "reference/api.html",
    )
    forest.index_page(
        False,
        {"page.title": "Intro", "page.type": "guide", "meta.tags": "Setup,Basics"},
        "guide/intro.html",
    )
    return forest


def test_render_lists_matches_expected_layout() -> None:
    assert render_lists(_forest()) == _EXPECTED


def test_render_lists_for_empty_forest_is_null() -> None:
    assert render_lists(TypeForest()) == "null"


def test_write_list_writes_script(tmp_path: Path) -> None:
    writer = PageWriter(tmp_path / "out")

    target = write_list(_forest(), writer)

    assert target == tmp_path / "out" / LISTS_OUTPUT
    assert target.read_text(encoding="utf-8") == _EXPECTED


def test_write_list_escapes_non_ascii_titles(tmp_path: Path) -> None:
    forest = TypeForest()
    forest.index_page(False, {"page.title": "Café", "page.type": "guide"}, "intl/es/cafe.html")

    text = write_list(forest, PageWriter(tmp_path)).read_text(encoding="utf-8")

    assert 'title:"Caf\\u9e00",' in text
    assert 'lang:"es",' in text
    assert text.isascii()
