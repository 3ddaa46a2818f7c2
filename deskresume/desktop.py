"""The desktop screen: builds menus from desktop data and reacts to pointer input."""

from __future__ import annotations

import enum
import logging
from collections import deque
from typing import Any, Callable, Iterable, Iterator

from .assets import IconAssets
from .layouts import (
    BLACK,
    BODY_FONT,
    BODY_FONT_SIZE,
    RESOLUTION_X,
    RESOLUTION_Y,
    WHITE,
    FlexDirection,
    Justify,
    Node,
    PositionType,
    TextStyle,
    header_layout,
    menu_layout,
)
from .lexicon import DesktopData, Icon, Lexicon

logger = logging.getLogger(__name__)

HOME_MENU = "home"
CLEAR_COLOR = (0.2, 0.2, 0.2)

# Component keys stored in Node.components.
DIALOG_DISPLAY = "dialog_display"
SELECTION = "selection"
GO_TO_MENU = "go_to_menu"
MENU_OPTION = "menu_option"
HOVER = "hover"
CLICK = "click"


class Hover(enum.Enum):
    """How a node reacts to the pointer entering and leaving it."""

    GENERIC = "generic"
    SELECTION = "selection"


class ClickAction(enum.Enum):
    """What a click on a node does."""

    LINK = "link"
    MENU = "menu"


def font_color(style: str | None) -> tuple[int, int, int]:
    """Text colour for a lexicon style: black when asked for, white otherwise."""
    return BLACK if style == "black" else WHITE


def open_link(link: str) -> None:
    """Report that an external link cannot be opened from this build."""
    logger.warning("External links can only be opened in a browser build: %s", link)


def _span(text: str, color: tuple[int, int, int]) -> Node:
    return Node(
        pickable=False,
        text=text,
        text_style=TextStyle(font=BODY_FONT, size=BODY_FONT_SIZE, line_height=1.5, color=color),
    )


def _propagation(node: Node | None) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.parent


def _step_atlas(node: Node, step: int) -> None:
    if node.atlas_index is not None:
        node.atlas_index += step


class Desktop:
    """Shows one desktop menu at a time and handles hover and click input."""

    def __init__(
        self,
        data: Iterable[DesktopData],
        assets: IconAssets,
        language: str = "english",
        hud: Node | None = None,
        link_opener: Callable[[str], Any] = open_link,
        image_loader: Callable[[str], Any] | None = None,
    ) -> None:
        self.data = list(data)
        self.assets = assets
        self.language = language
        self.hud = hud if hud is not None else Node(
            name="Hud", width=RESOLUTION_X, height=RESOLUTION_Y
        )
        self.link_opener = link_opener
        self.image_loader = image_loader if image_loader is not None else (lambda path: path)
        self.active_menu: DesktopData | None = None
        self.active_link: str | None = None
        self.current_selection: Icon | None = None
        self.clear_color: tuple[float, float, float] | None = None
        self.active = False
        self._pending: deque[str] = deque()

    def setup(self) -> None:
        """Enter the desktop and ask for the home menu."""
        logger.info("Menu")
        self.active = True
        self.clear_color = CLEAR_COLOR
        self.change_menu(HOME_MENU)

    def change_menu(self, menu_id: str) -> None:
        """Queue a request to show the menu ``menu_id``."""
        self._pending.append(menu_id)

    def process_events(self) -> DesktopData | None:
        """Handle one queued menu change; return the menu built, if any."""
        if not self.active or not self._pending:
            return None
        menu_id = self._pending.popleft()
        self.active_menu = next((d for d in self.data if d.id == menu_id), None)
        dialog = self.active_menu
        if dialog is None:
            return None
        for node in list(self.hud.children):
            shown = node.components.get(DIALOG_DISPLAY)
            if shown is None:
                continue
            if shown != dialog.id:
                self.hud.children.remove(node)
                node.parent = None
            else:
                return None
        self.hud.add_child(self._build(dialog))
        return dialog

    def mouse_over(self, node: Node) -> None:
        """The pointer entered ``node``; the event bubbles up to its ancestors."""
        for target in _propagation(node):
            kind = target.components.get(HOVER)
            if kind is Hover.SELECTION:
                link = target.components.get(SELECTION)
                if link is not None:
                    self.active_link = link.link
                _step_atlas(target, 1)
            elif kind is Hover.GENERIC:
                _step_atlas(target, 1)

    def mouse_out(self, node: Node) -> None:
        """The pointer left ``node``; the event bubbles up to its ancestors."""
        for target in _propagation(node):
            kind = target.components.get(HOVER)
            if kind is Hover.SELECTION:
                self.active_link = None
                _step_atlas(target, -1)
            elif kind is Hover.GENERIC:
                _step_atlas(target, -1)

    def click(self, node: Node) -> None:
        """``node`` was clicked; the event bubbles up to its ancestors."""
        for target in _propagation(node):
            for action in target.components.get(CLICK, ()):
                if action is ClickAction.LINK:
                    if self.active_link is not None:
                        self.link_opener(self.active_link)
                elif action is ClickAction.MENU:
                    menu_id = target.components.get(GO_TO_MENU)
                    if menu_id is not None:
                        self.change_menu(menu_id)

    def leave(self) -> None:
        """Leave the desktop: forget the menu and remove what it showed."""
        self.active = False
        self.active_menu = None
        for node in list(self.hud.children):
            if DIALOG_DISPLAY in node.components:
                self.hud.children.remove(node)
                node.parent = None

    def _text(self, lex: Lexicon) -> str:
        return lex.from_language(self.language)

    def _build(self, dialog: DesktopData) -> Node:
        padding_x = RESOLUTION_X / 32.0
        container = menu_layout(RESOLUTION_X - 2.0 * padding_x)
        container.components[DIALOG_DISPLAY] = dialog.id
        text = self._text(dialog.lex)

        if dialog.window is None:
            container.add_child(header_layout(text))
        elif dialog.window:
            self._build_window(container, dialog, text, padding_x)

        for icon in dialog.icons or ():
            self._build_icon(container, icon)
        for link in dialog.links or ():
            self._build_link(container, link)
        return container

    def _build_window(
        self, container: Node, dialog: DesktopData, text: str, padding_x: float
    ) -> None:
        framed = dialog.window_image is not None
        window = container.add_child(
            Node(
                name=f"Button {text}",
                position_type=PositionType.ABSOLUTE,
                left=112.0 - padding_x,
                top=70.0,
                width=800.0,
                height=500.0,
                flex_direction=FlexDirection.COLUMN,
                image=self.assets.window2 if framed else self.assets.window,
            )
        )

        if dialog.image is not None:
            picture = Node(pickable=False, image=self.image_loader(dialog.image))
            window.add_child(
                Node(
                    name="Note",
                    left=60.0,
                    top=80.0,
                    width=400.0,
                    height=300.0,
                    children=[picture],
                )
            )

        if dialog.note is not None:
            note = dialog.note
            window.add_child(
                Node(
                    name="Note",
                    left=note.position[0],
                    top=note.position[1],
                    width=700.0,
                    height=500.0,
                    text="",
                    justify=Justify.LEFT,
                    children=[_span(self._text(note.lex), font_color(note.lex.style))],
                )
            )

        adjustment = 10.0 if framed else 0.0
        close = container.add_child(
            Node(
                name="Close",
                position_type=PositionType.ABSOLUTE,
                left=112.0 - padding_x + 800.0 - 34.0,
                top=74.0 + adjustment,
                width=24.0,
                height=24.0,
                image=self.assets.close,
                atlas_layout=self.assets.close_layout,
                atlas_index=0,
            )
        )
        close.components[HOVER] = Hover.GENERIC
        if dialog.next_id is not None:
            close.components[GO_TO_MENU] = dialog.next_id
            close.components[CLICK] = [ClickAction.MENU]

        container.add_child(
            Node(
                name="Close",
                position_type=PositionType.ABSOLUTE,
                left=140.0,
                top=76.0 + adjustment,
                width=800.0,
                height=24.0,
                pickable=False,
                text=text,
                text_style=TextStyle(font=BODY_FONT, size=BODY_FONT_SIZE, line_height=1.5),
            )
        )

    def _build_icon(self, container: Node, icon: Icon) -> None:
        text = f"  {self._text(icon.lex)}"
        width, height = icon.icon.size
        label = Node(
            position_type=PositionType.ABSOLUTE,
            left=-1.7 * width,
            top=height,
            width=width * 4.0,
            height=height,
            text="",
            justify=Justify.CENTER,
            children=[_span(text, font_color(icon.lex.style))],
        )
        button = container.add_child(
            Node(
                name=f"Button {text}",
                position_type=PositionType.ABSOLUTE,
                left=icon.position[0],
                top=icon.position[1],
                width=width,
                height=height,
                image=self.assets.notepad,
                atlas_layout=self.assets.notepad_layout,
                atlas_index=icon.icon.index,
                children=[label],
            )
        )
        button.components[MENU_OPTION] = True
        button.components[SELECTION] = None
        button.components[HOVER] = Hover.SELECTION
        actions = []
        if icon.link is not None:
            actions.append(ClickAction.LINK)
        if icon.next_id is not None:
            button.components[GO_TO_MENU] = icon.next_id
            actions.append(ClickAction.MENU)
        button.components[CLICK] = actions

    def _build_link(self, container: Node, link) -> None:
        text = self._text(link.lex)
        width, height = link.icon.size
        label = Node(
            position_type=PositionType.ABSOLUTE,
            left=-1.7 * width,
            top=height,
            width=700.0,
            height=120.0,
            text="",
            justify=Justify.LEFT,
            children=[_span(text, font_color(link.lex.style))],
        )
        button = container.add_child(
            Node(
                name=f"Button {text}",
                position_type=PositionType.ABSOLUTE,
                left=link.position[0],
                top=link.position[1],
                width=width,
                height=height,
                image=self.assets.links,
                atlas_layout=self.assets.links_layout,
                atlas_index=link.icon.index,
                children=[label],
            )
        )
        button.components[MENU_OPTION] = True
        button.components[SELECTION] = link
        button.components[HOVER] = Hover.SELECTION
        button.components[CLICK] = [ClickAction.LINK] if link.link is not None else []