"""Tests for docnav.metadata.indexer."""

from __future__ import annotations

from docnav.metadata.indexer import TypeForest, build_page_node
from docnav.metadata.normalize import NormalizationConfig
from docnav.models import MetadataNode


def _page(title: str, page_type: str, tags: str = "") -> dict[str, str]:
    return {"page.title": title, "page.type": page_type, "meta.tags": tags}


def test_build_page_node_maps_fields() -> None:
    fields = {
        "page.title": 'The "Intro"',
        "page.titleFriendly": "Intro card",
        "page.summary": "Start here.",
        "sample.group": "Basics",
        "page.tags": "Getting Started, Setup",
        "meta.tags": "Beginner",
        "page.image": "/images/intro.png",
        "page.type": "guide",
    }

    node = build_page_node(fields, "intl/ko/guide/intro.html")

    assert node == MetadataNode(
        label="The 'Intro'",
        title_friendly="Intro card",
        summary="Start here.",
        link="intl/ko/guide/intro.html",
        group="basics",
        image="images/intro.png",
        lang="ko",
        type="guide",
        keywords=("'getting started'", "'setup'"),
        tags=("'beginner'",),
    )
    assert node.is_leaf


def test_build_page_node_defaults_missing_fields() -> None:
    node = build_page_node({}, "foo.html")

    assert node.label == ""
    assert node.type == ""
    assert node.lang == "en"
    assert node.keywords == ()
    assert node.tags == ()
    assert node.children is None


def test_grouping_by_type_keeps_first_seen_order() -> None:
    forest = TypeForest()
    forest.index_page(False, _page("A", "x"), "a.html")
    forest.index_page(False, _page("B", "y"), "b.html")
    forest.index_page(False, _page("C", "x"), "c.html")

    roots = forest.roots
    assert [root.type for root in roots] == ["x", "y"]
    assert [child.label for child in roots[0].children] == ["A", "C"]
    assert [child.label for child in roots[1].children] == ["B"]
    assert roots[0].label == "x"


def test_index_page_returns_forest_for_chaining() -> None:
    forest = TypeForest()

    result = forest.index_page(False, _page("A", "x"), "a.html").index_page(
        False, _page("B", "x"), "b.html"
    )

    assert result is forest
    assert len(forest) == 1


def test_excluded_pages_are_omitted() -> None:
    forest = TypeForest()
    forest.index_page(True, _page("Hidden", "x"), "hidden.html")
    fields = _page("Also hidden", "x")
    fields["excludeFromSuggestions"] = "true"
    forest.index_page(False, fields, "also.html")

    assert len(forest) == 0
    assert list(forest) == []


def test_sorted_roots_are_ordinal_and_stable() -> None:
    forest = TypeForest()
    for title, page_type in (("1", "b"), ("2", "a"), ("3", "B"), ("4", "a")):
        forest.index_page(False, _page(title, page_type), f"{title}.html")

    ordered = forest.sorted_roots()

    assert [root.type for root in ordered] == ["B", "a", "b"]
    assert [child.label for child in ordered[1].children] == ["2", "4"]
    # Sorting does not reorder the forest itself.
    assert [root.type for root in forest.roots] == ["b", "a", "B"]


def test_forest_uses_its_normalization_config() -> None:
    forest = TypeForest(NormalizationConfig(lowercase_tags=False))
    forest.index_page(False, _page("A", "x", "Setup"), "a.html")

    assert forest.roots[0].children[0].tags == ("'Setup'",)
