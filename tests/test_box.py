"""Tests for the Box composite."""
import pytest

from toolbox import (
    Box,
    BoxIndexError,
    ClosedError,
    Indent,
    Indented,
    OneLine,
    PlainProduct,
    SharedTool,
    UniqueTool,
    nullStrategy,
)


def test_add_product_chains_and_indexes():
    """add_product() returns the box; index(i) returns the i-th item."""
    pliers = UniqueTool("Pliers", "Plier-type")
    wrench = SharedTool("10", "Wrench")
    box = Box("B1")
    assert box.add_product(PlainProduct(pliers)).add_product(PlainProduct(wrench)) is box
    assert box.index(0) is pliers
    assert box.index(1) is wrench
    assert box[1] is box[1]
    assert len(box) == 2


def test_add_product_assigns_child_indent():
    """Children are placed one offset below the box."""
    pliers = UniqueTool("Pliers", "Plier-type")
    Box("B1").add_product(PlainProduct(pliers))
    assert pliers.indent == Indent(2)


def test_set_indent_propagates_to_children():
    """Re-placing a box moves its whole subtree."""
    tester = UniqueTool("Tester", "Voltage")
    inner = Box("B2").add_product(PlainProduct(tester))
    outer = Box("B1").add_product(PlainProduct(inner))
    assert inner.indent == Indent(2)
    assert tester.indent == Indent(4)

    outer.set_indent(Indent(2))
    assert inner.indent == Indent(4)
    assert tester.indent == Indent(6)


def test_iadd_and_extend():
    """+= and extend() are add_product in other clothes."""
    box = Box("B1")
    box += PlainProduct(SharedTool("10", "Wrench"))
    box.extend([PlainProduct(SharedTool("12", "Wrench"))])
    assert [p.item.name for p in box] == ["10", "12"]
    assert [p.item.name for p in box.products] == ["10", "12"]


def test_add_product_requires_product():
    """Adding a bare item is a TypeError."""
    with pytest.raises(TypeError):
        Box("B1").add_product(UniqueTool("Pliers", "Plier-type"))


@pytest.mark.parametrize("i", [2, 10, -1])
def test_index_out_of_range(i):
    """Indexing past the children raises BoxIndexError."""
    box = Box("B1").add_product(PlainProduct(SharedTool("10", "Wrench"))) \
                   .add_product(PlainProduct(SharedTool("12", "Wrench")))
    with pytest.raises(BoxIndexError) as info:
        box.index(i)
    assert info.value.size == 2
    assert info.value.index == i
    with pytest.raises(IndexError):
        box[i]


def test_index_empty_box():
    """An empty box has no valid index."""
    with pytest.raises(BoxIndexError):
        Box("B1")[0]


def test_box_is_never_shared():
    """A box is unique and reports itself as a box."""
    box = Box("B1")
    assert not box.is_shared
    assert box.is_unique
    assert box.is_box
    assert box.as_box() is box


def test_render_ignores_indent_argument():
    """A box renders at the indent it was placed at."""
    box = Box("B1", strategy=nullStrategy)
    box.set_indent(Indent(2))
    assert [str(line) for line in box.render(Indent(8))] == ["  B1"]


def test_default_strategy_is_indented():
    """New boxes lay out their children indented."""
    assert isinstance(Box("B1").strategy, Indented)


def test_set_strategy_swaps_layout_only(toolbox):
    """Swapping strategies changes the text, not the children."""
    before = [toolbox.index(i) for i in range(len(toolbox))]
    assert toolbox.set_strategy(OneLine()) is toolbox
    assert str(toolbox) == "B1, containing: { Pliers Plier-type, 10 Wrench, 12 Wrench }"
    toolbox.set_strategy(nullStrategy)
    assert str(toolbox) == "B1"
    assert [toolbox.index(i) for i in range(len(toolbox))] == before


def test_set_strategy_requires_strategy():
    """Only strategies can be installed."""
    with pytest.raises(TypeError):
        Box("B1").set_strategy("one line")


def test_empty_box_renders():
    """An empty box still renders its braces."""
    assert str(Box("B0")) == "B0, containing: {\n}"
    assert str(Box("B0", strategy=OneLine())) == "B0, containing: {  }"


def test_close_keeps_shared_children_open():
    """Closing a box closes unique children only."""
    pliers = UniqueTool("Pliers", "Plier-type")
    wrench = SharedTool("10", "Wrench")
    tester = UniqueTool("Tester", "Voltage")
    inner = Box("B2").add_product(PlainProduct(tester))
    box = Box("B1").add_product(PlainProduct(pliers)) \
                   .add_product(PlainProduct(wrench)) \
                   .add_product(PlainProduct(inner))
    box.close()

    assert box.closed
    assert pliers.closed
    assert inner.closed
    assert tester.closed
    assert not wrench.closed
    assert len(box) == 0


def test_closed_box_refuses_use():
    """A closed box cannot be filled, indexed or rendered."""
    with Box("B1") as box:
        box.add_product(PlainProduct(SharedTool("10", "Wrench")))
    assert box.closed
    with pytest.raises(ClosedError):
        box.add_product(PlainProduct(SharedTool("12", "Wrench")))
    with pytest.raises(ClosedError):
        box.index(0)
    with pytest.raises(ClosedError):
        str(box)


def test_default_strategy_accepts_plain_function():
    """DEFAULT_STRATEGY may be any zero-argument callable."""
    class OneLineBox(Box):
        DEFAULT_STRATEGY = lambda: OneLine()

    box = OneLineBox("B1").add_product(PlainProduct(SharedTool("10", "Wrench")))
    assert isinstance(box.strategy, OneLine)
    assert str(box) == "B1, containing: { 10 Wrench }"


def test_closed_box_refuses_new_strategy():
    """A closed box cannot be given a strategy."""
    box = Box("B1")
    box.close()
    with pytest.raises(ClosedError):
        box.set_strategy(OneLine())
