"""Tests for the node repository and its child index."""

import pytest

from dendron_nav.core.repository import NodeRepository, build_repository, to_imported_node
from dendron_nav.models.node import DocEntryConfig, VirtualNode
from tests.unit.fakes import make_note


def test_children_are_direct_descendants_only() -> None:
    repository = build_repository(
        [make_note("a"), make_note("a.b"), make_note("a.b.c"), make_note("ab")]
    )
    assert [n.key for n in repository.children("a")] == ["a.b"]
    assert [n.key for n in repository.children("a.b")] == ["a.b.c"]
    assert repository.children("a.b.c") == ()


def test_children_sorted_by_order_then_key() -> None:
    repository = build_repository(
        [
            make_note("r"),
            make_note("r.zeta", order=1),
            make_note("r.alpha", order=1),
            make_note("r.first", order=0),
            make_note("r.unordered"),
        ]
    )
    assert [n.key for n in repository.children("r")] == [
        "r.first",
        "r.alpha",
        "r.zeta",
        "r.unordered",
    ]


def test_roots_are_level_one_nodes_in_order() -> None:
    repository = build_repository(
        [make_note("b", order=5), make_note("c.d"), make_note("a", order=5)]
    )
    # c is virtual with order 0
    assert [n.key for n in repository.roots()] == ["c", "a", "b"]


def test_entry_payload_is_interpreted() -> None:
    node = to_imported_node(make_note("docs", entry={"leafLandingPoint": "last"}))
    assert node.doc_entry_config == DocEntryConfig(landing_point="last")
    assert node.link == "/docs"
    assert node.filename == "docs.md"


def test_duplicate_keys_are_rejected() -> None:
    node = to_imported_node(make_note("a"))
    with pytest.raises(ValueError, match="Duplicate"):
        NodeRepository([node, VirtualNode(key="a", title="a")])


def test_orphans_are_rejected() -> None:
    with pytest.raises(ValueError, match="Orphaned"):
        NodeRepository([to_imported_node(make_note("a.b"))])
