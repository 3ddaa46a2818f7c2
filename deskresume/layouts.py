"""A small UI node tree and the standard menu layouts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator

RESOLUTION_X = 1024.0
RESOLUTION_Y = 640.0

BODY_FONT = "body"
SPLASH_FONT = "splash"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

HEADER_FONT_SIZE = RESOLUTION_Y * 6.0 / 8.0 / 30.0
BODY_FONT_SIZE = RESOLUTION_Y * 6.0 / 8.0 / 36.0


class PositionType(enum.Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class FlexDirection(enum.Enum):
    ROW = "row"
    COLUMN = "column"


class Justify(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class TextStyle:
    """Font, size, line height, colour and justification of a run of text."""

    font: str = BODY_FONT
    size: float = 20.0
    line_height: float = 1.2
    color: tuple[int, int, int] = WHITE
    justify: Justify = Justify.LEFT


@dataclass(eq=False)
class Node:
    """A UI element: a box that may carry an image, text and child nodes."""

    name: str = ""
    position_type: PositionType = PositionType.RELATIVE
    left: float = 0.0
    top: float = 0.0
    width: float | None = None
    height: float | None = None
    margin_y: float = 0.0
    flex_direction: FlexDirection = FlexDirection.ROW
    justify: Justify | None = None
    pickable: bool = True
    image: Any = None
    atlas_layout: Any = None
    atlas_index: int | None = None
    text: str | None = None
    text_style: TextStyle | None = None
    components: dict[str, Any] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list, repr=False)
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    def add_child(self, child: Node) -> Node:
        """Attach ``child`` under this node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator[Node]:
        """Yield this node and all its descendants, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    def absolute_position(self) -> tuple[float, float]:
        """Top-left corner in screen coordinates: offsets summed up the tree."""
        x, y = self.left, self.top + self.margin_y
        if self.parent is not None:
            px, py = self.parent.absolute_position()
            x, y = x + px, y + py
        return x, y

    def contains(self, x: float, y: float) -> bool:
        """Whether the screen point lies inside this node's box."""
        if self.width is None or self.height is None:
            return False
        ax, ay = self.absolute_position()
        return ax <= x < ax + self.width and ay <= y < ay + self.height


def menu_layout(width: float) -> Node:
    """A column container of ``width`` pixels centred horizontally on screen."""
    return Node(
        name="MenuLayout",
        position_type=PositionType.ABSOLUTE,
        flex_direction=FlexDirection.COLUMN,
        width=width,
        left=(RESOLUTION_X - width) / 2.0,
        top=30.0,
        justify=Justify.CENTER,
    )


def header_layout(text: str) -> Node:
    """A centred title line holding ``text`` in the body font."""
    span = Node(
        pickable=False,
        text=text,
        text_style=TextStyle(
            font=BODY_FONT,
            size=HEADER_FONT_SIZE,
            line_height=2.5,
            justify=Justify.CENTER,
        ),
    )
    return Node(
        name="Menu Title",
        position_type=PositionType.RELATIVE,
        margin_y=1.0,
        justify=Justify.CENTER,
        text="",
        children=[span],
    )