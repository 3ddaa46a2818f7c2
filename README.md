# deskresume

A small interactive résumé that looks like a desktop, drawn with pygame. Each
screen is described by a JSON file: a title, desktop icons that lead to other
screens, windows with notes and pictures, and link icons that carry an
external address.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
deskresume [--assets DIR] [--language NAME]
```

`--assets` is the asset directory (default `assets`). `--language` is the
display language used to pick translations (default `english`).

The window opens at 1024×640. If you resize it, the picture is scaled to fit
and the spare space is filled with a dark mask. The program starts on the
`home` screen:

- Moving the pointer over an icon or a close button moves its sprite to the
  next frame of its sheet, and moving off moves it back.
- Clicking an icon that has a `next_id` switches to that screen.
- Clicking a window's close button switches to the window's `next_id` screen.
- Clicking a link icon does not open a browser. It logs a warning that names
  the link.

## Asset directory

The asset directory must contain:

- the screen files `lexi/desktop/home.json`, `work.json`,
  `work/illumina.json`, `work/tillster.json`, `work/audit.json`,
  `homedev.json`, `homedev/picoparty.json`, `homedev/pumpkinsound.json` and
  `links.json`, all below `lexi/desktop/`;
- the sprite sheets `notepad.png` (8 frames of 32×32), `links.png` (4 frames
  of 32×32), `close.png` (2 frames of 14×14), and the window images
  `window.png` and `window2.png`;
- the font `fonts/PressStart2P-vaV7.ttf`.

If a sheet or the font is missing, the program raises `FileNotFoundError`. If
a picture named by a screen's `image` key cannot be loaded, it logs an error
and shows nothing in its place.

## Screen files

```json
{
  "id": "home",
  "lex": {"translations": {"english": "Welcome"}, "style": "white"},
  "icons": [
    {
      "icon": {"size": [32, 32], "index": 0},
      "lex": {"translations": {"english": "Work"}},
      "next_id": "work",
      "position": [100, 120]
    }
  ]
}
```

Required keys are `id` and `lex`. The optional keys are:

- `image`: a picture path relative to the asset directory, shown inside the
  window.
- `icons`: a list of icons. Each needs `icon`, `lex` and `position`, and may
  have `next_id` and `link`.
- `links`: a list of links. Each needs `icon`, `lex` and `position`, and may
  have `link`.
- `window`: when absent, the title is shown as a centred header. When `true`,
  a window is shown with the title in its bar and a close button. When
  `false`, no title is shown.
- `window_image`: if present, the window uses `window2.png` and the close
  button sits 10 px lower.
- `next_id`: the screen the close button leads to.
- `note`: a note inside the window, with `lex` and `position`.

Text is looked up by display language. A missing translation shows as empty
text. A `style` of `black` gives black text; any other style, or none, gives
white.

A document with the wrong shape raises `deskresume.lexicon.DataError`, which
is a subclass of `ValueError`.

## Using it as a library

- `deskresume.lexicon`: `load_desktop_data(path)`, `load_collection(root,
  files)`, and the dataclasses `DesktopData`, `Icon`, `Link`, `Note`,
  `IconData` and `Lexicon`. Each dataclass has a `from_dict` method, and
  `Lexicon` has `from_language`.
- `deskresume.assets`: `AtlasLayout` provides `frame_rect(index)` and
  `frame_count()`. `IconAssets.load(root)` loads the sprite sheets.
- `deskresume.layouts`: `Node`, a UI tree with `add_child`, `walk`,
  `absolute_position` and `contains`. Also `TextStyle`, `menu_layout(width)`
  and `header_layout(text)`.
- `deskresume.desktop.Desktop`: keeps track of the active screen.
  - `setup()` enters the desktop and queues `home`.
  - `change_menu(id)` queues a screen change.
  - `process_events()` handles one queued change.
  - `mouse_over(node)`, `mouse_out(node)` and `click(node)` handle pointer
    events.
  - `leave()` clears the screen.

  The constructor accepts a `link_opener` callable, which is called with the
  link address when a link is clicked.
- `deskresume.app.App`: runs the state machine from `PRELOAD` through
  `LOADING` to `RESUME`, one step per call to `advance()`.
  - `node_at(x, y)`, `pointer_moved(x, y)` and `pointer_clicked(x, y)` route
    pointer input.
  - `run()` opens the window.
  - Screen data, assets, a link opener and an image loader can be passed in
    instead of being loaded from disk.

## What it does not do

Only the desktop screens are implemented. `AppState` also lists splash, menu,
reset, level-loading, transition and ready-check states, but nothing enters
them. External links are never opened. Text is drawn with the single bundled
font and wrapped at word boundaries.