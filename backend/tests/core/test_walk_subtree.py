"""Subtree Walker: tests for action emission order and linking.

Tests:
    - Layer: create immediately followed by its link
    - Group: create, nested block, then the group's own link
    - Document order preserved among siblings
    - Unrecognized nodes (and anything beneath them) emit nothing
    - emit_subtree_actions appends to the caller's list
"""

from mapcatalog.core.assign_ids import assign_identifiers, node_id
from mapcatalog.core.catalog_entities import CreateGroup, CreateLayer, LinkChild
from mapcatalog.core.walk_subtree import emit_subtree_actions, subtree_actions
from tests.fakes import (
    FakeMapSources, SequentialIds, assert_links_follow_descendants,
    catalog, group, layer, other,
)


def _kinds(actions):
    return [type(a).__name__ for a in actions]


def test_single_layer_create_then_link():
    lyr = layer(title="Parcels")
    root = catalog(lyr)
    assign_identifiers(root, SequentialIds())
    actions = subtree_actions(root, None, FakeMapSources())
    assert _kinds(actions) == ["CreateLayer", "LinkChild"]
    assert actions[1] == LinkChild(None, node_id(lyr))


def test_group_link_comes_after_nested_block():
    inner_layer = layer()
    g = group(inner_layer, title="G")
    root = catalog(g)
    assign_identifiers(root, SequentialIds())
    actions = subtree_actions(root, None, FakeMapSources())

    assert _kinds(actions) == ["CreateGroup", "CreateLayer", "LinkChild", "LinkChild"]
    assert actions[2] == LinkChild(node_id(g), node_id(inner_layer))
    assert actions[3] == LinkChild(None, node_id(g))


def test_deep_nesting_order():
    l1, l2 = layer(title="l1"), layer(title="l2")
    inner = group(l1, title="inner")
    outer = group(inner, l2, title="outer")
    root = catalog(outer)
    assign_identifiers(root, SequentialIds())
    actions = subtree_actions(root, None, FakeMapSources())

    o, i = node_id(outer), node_id(inner)
    assert actions == [
        actions[0],
        actions[1],
        actions[2],
        LinkChild(i, node_id(l1)),
        LinkChild(o, i),
        actions[5],
        LinkChild(o, node_id(l2)),
        LinkChild(None, o),
    ]
    assert isinstance(actions[0], CreateGroup) and actions[0].entity.id == o
    assert isinstance(actions[1], CreateGroup) and actions[1].entity.id == i
    assert isinstance(actions[2], CreateLayer) and actions[2].entity.label == "l1"
    assert isinstance(actions[5], CreateLayer) and actions[5].entity.label == "l2"
    assert_links_follow_descendants(actions)


def test_siblings_keep_document_order():
    names = ["a", "b", "c", "d"]
    root = catalog(*(layer(title=n) for n in names))
    assign_identifiers(root, SequentialIds())
    actions = subtree_actions(root, None, FakeMapSources())
    labels = [a.entity.label for a in actions if isinstance(a, CreateLayer)]
    assert labels == names


def test_unrecognized_nodes_are_skipped_with_their_subtrees():
    before, after = layer(title="before"), layer(title="after")
    hidden = layer(title="hidden")
    root = catalog(before, other(hidden), after)
    assign_identifiers(root, SequentialIds())
    actions = subtree_actions(root, None, FakeMapSources())

    assert _kinds(actions) == ["CreateLayer", "LinkChild", "CreateLayer", "LinkChild"]
    labels = [a.entity.label for a in actions if isinstance(a, CreateLayer)]
    assert labels == ["before", "after"]
    assert node_id(hidden) not in {
        a.child_id for a in actions if isinstance(a, LinkChild)
    }


def test_emit_appends_to_existing_list():
    lyr = layer()
    root = catalog(lyr)
    assign_identifiers(root, SequentialIds())
    sentinel = LinkChild(None, "pre-existing")
    actions = [sentinel]
    emit_subtree_actions(root, None, FakeMapSources(), actions)
    assert actions[0] is sentinel
    assert len(actions) == 3


def test_explicit_parent_id_used_for_top_links():
    lyr = layer()
    g = group(lyr)
    assign_identifiers(catalog(g), SequentialIds())
    actions = subtree_actions(g, node_id(g), FakeMapSources())
    assert actions[-1] == LinkChild(node_id(g), node_id(lyr))
