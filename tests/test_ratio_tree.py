import pytest

from xenvox.config import TreeConfig
from xenvox.core.ratio import Rational, mediant
from xenvox.tuning.tree import RatioTree
from xenvox.ui.draw import DrawBatch, ScreenSize


def test_new_tree_is_root_only():
    tree = RatioTree()
    assert tree.depth == 0
    assert len(tree.layers) == 1
    root = tree.root
    assert root.ratio.same_terms(Rational(3, 2))
    assert root.left_bound.same_terms(Rational(1, 1))
    assert root.right_bound.same_terms(Rational(2, 1))


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
def test_layer_counts(n):
    tree = RatioTree().set_layers_number(n)
    assert len(tree.layers) == n + 1
    for k, layer in enumerate(tree.layers):
        assert len(layer) == 2 ** k
    assert len(tree) == 2 ** (n + 1) - 1


def test_every_node_is_the_mediant_of_its_bounds_to_depth_16():
    tree = RatioTree().set_layers_number(16)
    for _, _, node in tree.nodes():
        assert node.left_bound < node.ratio < node.right_bound
        assert node.ratio.same_terms(mediant(node.left_bound, node.right_bound))
        assert node.is_valid()


def test_layers_are_ascending():
    tree = RatioTree().set_layers_number(6)
    for layer in tree.layers:
        ratios = [node.ratio for node in layer]
        assert ratios == sorted(ratios)
        assert all(a < b for a, b in zip(ratios, ratios[1:]))


def test_first_children():
    tree = RatioTree()
    tree.add_layer()
    left, right = tree.layers[1]
    assert left.ratio.same_terms(Rational(4, 3))
    assert right.ratio.same_terms(Rational(5, 3))
    assert right.left_bound.same_terms(Rational(3, 2))


def test_children_follow_parent_order():
    tree = RatioTree().set_layers_number(4)
    parents = tree.layers[3]
    children = tree.layers[4]
    for i, parent in enumerate(parents):
        left, right = children[2 * i], children[2 * i + 1]
        assert left.right_bound.same_terms(parent.ratio)
        assert right.left_bound.same_terms(parent.ratio)


def test_set_layers_number_is_idempotent():
    once = RatioTree().set_layers_number(5)

    twice = RatioTree()
    twice.set_layers_number(5)
    twice.set_layers_number(5)
    assert twice == once

    shrunk = RatioTree().set_layers_number(9)
    shrunk.set_layers_number(5)
    assert shrunk == once


def test_root_is_unchanged_by_rebuilds():
    tree = RatioTree().set_layers_number(7)
    tree.set_layers_number(2)
    assert tree.root.ratio.same_terms(Rational(3, 2))


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        RatioTree().set_layers_number(-1)


def test_draw_places_one_glyph_per_node():
    config = TreeConfig()
    tree = RatioTree().set_layers_number(3)
    batch = DrawBatch()
    tree.draw(ScreenSize(960.0, 600.0), batch, config)
    assert len(batch.triangles) == len(tree) == 15
    assert not batch.rects


def test_draw_positions():
    config = TreeConfig()
    tree = RatioTree().set_layers_number(8)
    batch = DrawBatch()
    tree.draw(ScreenSize(960.0, 600.0), batch, config)

    # Root glyph: top vertex is half a glyph above the center
    top = batch.triangles[0].vertices[0]
    assert top.pos[0] == pytest.approx(960.0 * 0.5849625007)
    assert top.pos[1] == pytest.approx(600.0 * 0.90 * 0.05 - 4.0)

    assert tree.layer_y(8, 600.0, config) == pytest.approx(600.0 * 0.90 * 1.05)


def test_colors_alternate_within_a_layer():
    config = TreeConfig()
    tree = RatioTree().set_layers_number(2)
    batch = DrawBatch()
    tree.draw(ScreenSize(960.0, 600.0), batch, config)
    colors = [t.vertices[0].color for t in batch.triangles]
    # layer 0: [0], layer 1: [0, 1], layer 2: [0, 1, 0, 1]
    a, b = config.colors
    assert colors == [a, a, b, a, b, a, b]


def test_root_only_tree_draws_without_division_by_zero():
    config = TreeConfig()
    tree = RatioTree()
    batch = DrawBatch()
    tree.draw(ScreenSize(960.0, 600.0), batch, config)
    assert len(batch.triangles) == 1
    assert tree.layer_y(0, 600.0, config) == pytest.approx(27.0)
