import pytest

from deskresume.layouts import (
    BODY_FONT,
    RESOLUTION_X,
    FlexDirection,
    Justify,
    Node,
    PositionType,
    header_layout,
    menu_layout,
)


@pytest.mark.parametrize("width", [0.0, 400.0, RESOLUTION_X - 64.0, RESOLUTION_X])
def test_menu_layout_is_centred(width):
    node = menu_layout(width)
    assert node.width == width
    assert node.left + width / 2 == pytest.approx(RESOLUTION_X / 2)


def test_menu_layout_properties():
    node = menu_layout(500.0)
    assert node.name == "MenuLayout"
    assert node.position_type is PositionType.ABSOLUTE
    assert node.flex_direction is FlexDirection.COLUMN
    assert node.top == 30.0


def test_header_layout_holds_text():
    node = header_layout("Hello")
    assert node.name == "Menu Title"
    assert node.pickable is True
    (span,) = node.children
    assert span.text == "Hello"
    assert span.parent is node
    assert span.pickable is False


def test_header_layout_text_style():
    style = header_layout("x").children[0].text_style
    assert style.font == BODY_FONT
    assert style.size == pytest.approx(20.0)
    assert style.line_height == 2.5
    assert style.justify is Justify.CENTER


def test_add_child_links_parent():
    parent = Node(name="p")
    child = parent.add_child(Node(name="c"))
    assert child.parent is parent
    assert parent.children == [child]


def test_walk_is_preorder():
    a = Node(name="a", children=[Node(name="b", children=[Node(name="c")]), Node(name="d")])
    assert [n.name for n in a.walk()] == ["a", "b", "c", "d"]


def test_absolute_position_adds_parent_offset():
    parent = Node(left=10.0, top=20.0)
    child = parent.add_child(Node(left=5.0, top=7.0))
    px, py = parent.absolute_position()
    cx, cy = child.absolute_position()
    assert (cx - px, cy - py) == (child.left, child.top)


def test_absolute_position_of_root_is_its_offset():
    node = Node(left=3.0, top=4.0)
    assert node.absolute_position() == (node.left, node.top)


def test_contains_inside_and_edges():
    parent = Node(left=100.0, top=50.0)
    child = parent.add_child(Node(left=10.0, top=10.0, width=20.0, height=30.0))
    x, y = child.absolute_position()
    assert child.contains(x, y)
    assert child.contains(x + 19.5, y + 29.5)
    assert not child.contains(x + child.width, y)
    assert not child.contains(x, y + child.height)
    assert not child.contains(x - 1, y)


def test_contains_without_size_is_false():
    node = Node(width=None, height=None)
    assert node.contains(0.0, 0.0) is False