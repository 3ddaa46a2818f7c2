"""The application: state machine, pointer routing and the pygame main loop."""

from __future__ import annotations

import argparse
import enum
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

import pygame

from .assets import IconAssets
from .desktop import Desktop, open_link
from .layouts import (
    BODY_FONT,
    RESOLUTION_X,
    RESOLUTION_Y,
    SPLASH_FONT,
    Justify,
    Node,
)
from .lexicon import DESKTOP_FILES, DesktopData, load_collection

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Aspect Ratio Mask"
MASK_COLOR = (5, 5, 5)
DEFAULT_CLEAR_COLOR = (43, 44, 47)
FONT_FILE = "fonts/PressStart2P-vaV7.ttf"
FRAME_RATE = 60


class AppState(enum.Enum):
    """The phases the application moves through."""

    PRELOAD = "preload"
    LOADING = "loading"
    SPLASH = "splash"
    RESUME = "resume"
    MENU = "menu"
    RESET = "reset"
    LOAD_LEVEL = "load_level"
    TRANSITION_OUT = "transition_out"
    READY_CHECK = "ready_check"


AFTER_LOADING_STATE = AppState.RESUME


def _attached(node: Node, root: Node) -> bool:
    while node is not None:
        if node is root:
            return True
        node = node.parent
    return False


class App:
    """Loads the content, runs the state machine and routes pointer input."""

    def __init__(
        self,
        asset_root: str | Path = "assets",
        language: str = "english",
        *,
        data: Iterable[DesktopData] | None = None,
        assets: IconAssets | None = None,
        files: Iterable[str] = DESKTOP_FILES,
        link_opener: Callable[[str], Any] = open_link,
        image_loader: Callable[[str], Any] | None = None,
    ) -> None:
        self.asset_root = Path(asset_root)
        self.language = language
        self.data = None if data is None else list(data)
        self.assets = assets
        self.files = list(files)
        self.link_opener = link_opener
        self.image_loader = image_loader if image_loader is not None else self._load_image
        self.hud = Node(name="Hud", width=RESOLUTION_X, height=RESOLUTION_Y)
        self.desktop: Desktop | None = None
        self.state = AppState.PRELOAD
        self.next_state: AppState | None = None
        self.hovered: Node | None = None
        self._started = False

    # -- state machine --

    def advance(self) -> AppState:
        """Run one frame: apply a pending state change, then the state's update."""
        if not self._started:
            self._started = True
            self._enter(self.state)
        if self.next_state is not None:
            target, self.next_state = self.next_state, None
            if target is not self.state:
                self._exit(self.state)
                self.state = target
                self._enter(target)

        if self.state is AppState.PRELOAD:
            self.next_state = AppState.LOADING
        elif self.state is AppState.LOADING:
            if self.assets is None:
                self.assets = IconAssets.load(self.asset_root)
            self.next_state = AFTER_LOADING_STATE
        elif self.state is AppState.RESUME and self.desktop is not None:
            self.desktop.process_events()
        return self.state

    def _enter(self, state: AppState) -> None:
        if state is AppState.PRELOAD:
            logger.info("Loading Resume")
            if self.data is None:
                self.data = load_collection(self.asset_root, self.files)
        elif state is AppState.RESUME:
            if self.desktop is None:
                self.desktop = Desktop(
                    self.data or [],
                    self.assets,
                    language=self.language,
                    hud=self.hud,
                    link_opener=self.link_opener,
                    image_loader=self.image_loader,
                )
            self.desktop.setup()

    def _exit(self, state: AppState) -> None:
        if state is AppState.RESUME and self.desktop is not None:
            self.desktop.leave()
            self.hovered = None

    def _load_image(self, path: str) -> Any:
        try:
            return pygame.image.load(str(self.asset_root / path))
        except (pygame.error, OSError) as exc:
            logger.error("Could not load image %s: %s", path, exc)
            return None

    # -- pointer input --

    def node_at(self, x: float, y: float) -> Node | None:
        """The topmost pickable node under the point, or None."""
        found = None
        for child in self.hud.children:
            for node in child.walk():
                if node.pickable and node.contains(x, y):
                    found = node
        return found

    def pointer_moved(self, x: float, y: float) -> Node | None:
        """Move the pointer to the point, sending out and over events as it changes node."""
        if self.state is not AppState.RESUME or self.desktop is None:
            return None
        node = self.node_at(x, y)
        if node is self.hovered:
            return node
        previous, self.hovered = self.hovered, node
        if previous is not None and _attached(previous, self.hud):
            self.desktop.mouse_out(previous)
        if node is not None:
            self.desktop.mouse_over(node)
        return node

    def pointer_clicked(self, x: float, y: float) -> Node | None:
        """Click at the point; returns the node that received the click."""
        node = self.pointer_moved(x, y)
        if node is not None:
            self.desktop.click(node)
        return node

    # -- rendering and main loop --

    def _font_path(self) -> Path:
        path = self.asset_root / FONT_FILE
        if not path.is_file():
            raise FileNotFoundError(f"missing font {path}")
        return path

    def run(self) -> None:
        """Open the window and run until it is closed."""
        font_path = self._font_path()
        pygame.init()
        try:
            self._loop(_FontCache({BODY_FONT: font_path, SPLASH_FONT: font_path}))
        finally:
            pygame.quit()

    def _loop(self, fonts: _FontCache) -> None:
        screen = pygame.display.set_mode((int(RESOLUTION_X), int(RESOLUTION_Y)), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = pygame.Surface((int(RESOLUTION_X), int(RESOLUTION_Y)))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    point = _to_canvas(screen, event.pos)
                    if point is not None:
                        self.pointer_moved(*point)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    point = _to_canvas(screen, event.pos)
                    if point is not None:
                        self.pointer_clicked(*point)
            self.advance()
            self._draw(canvas, fonts)
            _present(screen, canvas)
            pygame.display.flip()
            clock.tick(FRAME_RATE)

    def _draw(self, canvas: pygame.Surface, fonts: _FontCache) -> None:
        clear = DEFAULT_CLEAR_COLOR
        if self.desktop is not None and self.desktop.clear_color is not None:
            clear = tuple(round(c * 255) for c in self.desktop.clear_color)
        canvas.fill(clear)
        for child in self.hud.children:
            for node in child.walk():
                _draw_image(canvas, node)
                _draw_text(canvas, node, fonts)


class _FontCache:
    def __init__(self, paths: dict[str, Path]) -> None:
        self._paths = paths
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def get(self, name: str, size: float) -> pygame.font.Font:
        key = (name, max(1, round(size)))
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(str(self._paths[name]), key[1])
        return self._fonts[key]


def _fit(screen: pygame.Surface) -> tuple[float, int, int]:
    width, height = screen.get_size()
    scale = min(width / RESOLUTION_X, height / RESOLUTION_Y)
    offset_x = int((width - RESOLUTION_X * scale) / 2)
    offset_y = int((height - RESOLUTION_Y * scale) / 2)
    return scale, offset_x, offset_y


def _to_canvas(screen: pygame.Surface, pos: tuple[int, int]) -> tuple[float, float] | None:
    scale, offset_x, offset_y = _fit(screen)
    if scale <= 0:
        return None
    x = (pos[0] - offset_x) / scale
    y = (pos[1] - offset_y) / scale
    if 0 <= x < RESOLUTION_X and 0 <= y < RESOLUTION_Y:
        return x, y
    return None


def _present(screen: pygame.Surface, canvas: pygame.Surface) -> None:
    scale, offset_x, offset_y = _fit(screen)
    screen.fill(MASK_COLOR)
    size = (max(1, int(RESOLUTION_X * scale)), max(1, int(RESOLUTION_Y * scale)))
    screen.blit(pygame.transform.scale(canvas, size), (offset_x, offset_y))


def _draw_image(canvas: pygame.Surface, node: Node) -> None:
    image = node.image
    if not isinstance(image, pygame.Surface):
        return
    if node.atlas_layout is not None and node.atlas_index is not None:
        try:
            rect = node.atlas_layout.frame_rect(node.atlas_index)
        except IndexError:
            return
        rect = rect.clip(image.get_rect())
        if rect.width == 0 or rect.height == 0:
            return
        image = image.subsurface(rect)
    width = node.width if node.width is not None else image.get_width()
    height = node.height if node.height is not None else image.get_height()
    if width <= 0 or height <= 0:
        return
    scaled = pygame.transform.scale(image, (int(width), int(height)))
    canvas.blit(scaled, tuple(int(v) for v in node.absolute_position()))


def _wrap(font: pygame.font.Font, text: str, width: float | None) -> list[str]:
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if width is None:
            lines.append(paragraph)
            continue
        current = ""
        for word in paragraph.split(" "):
            candidate = word if not current else f"{current} {word}"
            if current and font.size(candidate)[0] > width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def _draw_text(canvas: pygame.Surface, node: Node, fonts: _FontCache) -> None:
    if not node.text or node.text_style is None:
        return
    style = node.text_style
    font = fonts.get(style.font, style.size)
    box = node if node.width is not None else (node.parent or node)
    width = box.width
    justify = node.justify or (box.justify if box is not node else None) or style.justify
    x, y = node.absolute_position()
    line_height = style.size * style.line_height
    for number, line in enumerate(_wrap(font, node.text, width)):
        rendered = font.render(line, False, style.color)
        left = x
        if width is not None and justify is Justify.CENTER:
            left = x + (width - rendered.get_width()) / 2
        elif width is not None and justify is Justify.RIGHT:
            left = x + width - rendered.get_width()
        top = y + number * line_height + (line_height - rendered.get_height()) / 2
        canvas.blit(rendered, (int(left), int(top)))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the desktop résumé window."""
    parser = argparse.ArgumentParser(description="Interactive desktop résumé.")
    parser.add_argument("--assets", default="assets", help="asset directory")
    parser.add_argument("--language", default="english", help="display language")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    App(args.assets, args.language).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())