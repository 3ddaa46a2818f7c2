"""Desktop content definitions read from JSON lexicon files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

DESKTOP_FILES: tuple[str, ...] = (
    "lexi/desktop/home.json",
    "lexi/desktop/work.json",
    "lexi/desktop/work/illumina.json",
    "lexi/desktop/work/tillster.json",
    "lexi/desktop/work/audit.json",
    "lexi/desktop/homedev.json",
    "lexi/desktop/homedev/picoparty.json",
    "lexi/desktop/homedev/pumpkinsound.json",
    "lexi/desktop/links.json",
)


class DataError(ValueError):
    """Raised when a desktop document does not have the expected shape."""


def _mapping(data: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DataError(f"{where}: expected an object")
    return data


def _required(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data or data[key] is None:
        raise DataError(f"{where}: missing field {key!r}")
    return data[key]


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise DataError(f"{where}: expected a string")
    return value


def _optional_string(data: Mapping[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    return None if value is None else _string(value, f"{where}.{key}")


def _pair(value: Any, where: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise DataError(f"{where}: expected an array of two numbers")
    if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in value):
        raise DataError(f"{where}: expected an array of two numbers")
    return float(value[0]), float(value[1])


def _index(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DataError(f"{where}: expected a non-negative integer")
    return value


def _optional_list(data: Mapping[str, Any], key: str, where: str, parse) -> list | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise DataError(f"{where}.{key}: expected an array")
    return [parse(item, f"{where}.{key}[{n}]") for n, item in enumerate(value)]


@dataclass
class Lexicon:
    """Translated text for one element, with an optional colour style."""

    translations: dict[str, str] = field(default_factory=dict)
    style: str | None = None

    def from_language(self, language: str) -> str:
        """Return the text for ``language``, or an empty string if there is none."""
        return self.translations.get(language, "")

    @classmethod
    def from_dict(cls, data: Any) -> Lexicon:
        """Build a lexicon from a decoded JSON object."""
        return cls._parse(data, "lex")

    @classmethod
    def _parse(cls, data: Any, where: str) -> Lexicon:
        data = _mapping(data, where)
        raw = _mapping(_required(data, "translations", where), f"{where}.translations")
        translations = {
            _string(k, f"{where}.translations"): _string(v, f"{where}.translations.{k}")
            for k, v in raw.items()
        }
        return cls(translations, _optional_string(data, "style", where))


@dataclass
class IconData:
    """Size on screen and atlas frame of an icon."""

    size: tuple[float, float] = (0.0, 0.0)
    index: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> IconData:
        """Build icon data from a decoded JSON object."""
        return cls._parse(data, "icon")

    @classmethod
    def _parse(cls, data: Any, where: str) -> IconData:
        data = _mapping(data, where)
        return cls(
            size=_pair(_required(data, "size", where), f"{where}.size"),
            index=_index(_required(data, "index", where), f"{where}.index"),
        )


@dataclass
class Note:
    """Text shown inside a window at a fixed offset."""

    lex: Lexicon = field(default_factory=Lexicon)
    position: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def from_dict(cls, data: Any) -> Note:
        """Build a note from a decoded JSON object."""
        return cls._parse(data, "note")

    @classmethod
    def _parse(cls, data: Any, where: str) -> Note:
        data = _mapping(data, where)
        return cls(
            lex=Lexicon._parse(_required(data, "lex", where), f"{where}.lex"),
            position=_pair(_required(data, "position", where), f"{where}.position"),
        )


@dataclass
class Icon:
    """A desktop icon that may lead to another menu or to a link."""

    icon: IconData = field(default_factory=IconData)
    lex: Lexicon = field(default_factory=Lexicon)
    next_id: str | None = None
    position: tuple[float, float] = (0.0, 0.0)
    link: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Icon:
        """Build an icon from a decoded JSON object."""
        return cls._parse(data, "icon")

    @classmethod
    def _parse(cls, data: Any, where: str) -> Icon:
        data = _mapping(data, where)
        return cls(
            icon=IconData._parse(_required(data, "icon", where), f"{where}.icon"),
            lex=Lexicon._parse(_required(data, "lex", where), f"{where}.lex"),
            next_id=_optional_string(data, "next_id", where),
            position=_pair(_required(data, "position", where), f"{where}.position"),
            link=_optional_string(data, "link", where),
        )


@dataclass
class Link:
    """A labelled external link."""

    icon: IconData = field(default_factory=IconData)
    lex: Lexicon = field(default_factory=Lexicon)
    position: tuple[float, float] = (0.0, 0.0)
    link: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Link:
        """Build a link from a decoded JSON object."""
        return cls._parse(data, "link")

    @classmethod
    def _parse(cls, data: Any, where: str) -> Link:
        data = _mapping(data, where)
        return cls(
            icon=IconData._parse(_required(data, "icon", where), f"{where}.icon"),
            lex=Lexicon._parse(_required(data, "lex", where), f"{where}.lex"),
            position=_pair(_required(data, "position", where), f"{where}.position"),
            link=_optional_string(data, "link", where),
        )


@dataclass
class DesktopData:
    """One desktop screen: its title, icons, links and optional window."""

    id: str = ""
    lex: Lexicon = field(default_factory=Lexicon)
    image: str | None = None
    icons: list[Icon] | None = None
    links: list[Link] | None = None
    window: bool | None = None
    window_image: str | None = None
    next_id: str | None = None
    note: Note | None = None

    @classmethod
    def from_dict(cls, data: Any) -> DesktopData:
        """Build a desktop screen from a decoded JSON object."""
        return cls._parse(data, "desktop")

    @classmethod
    def _parse(cls, data: Any, where: str) -> DesktopData:
        data = _mapping(data, where)
        window = data.get("window")
        if window is not None and not isinstance(window, bool):
            raise DataError(f"{where}.window: expected a boolean")
        note = data.get("note")
        return cls(
            id=_string(_required(data, "id", where), f"{where}.id"),
            lex=Lexicon._parse(_required(data, "lex", where), f"{where}.lex"),
            image=_optional_string(data, "image", where),
            icons=_optional_list(data, "icons", where, Icon._parse),
            links=_optional_list(data, "links", where, Link._parse),
            window=window,
            window_image=_optional_string(data, "window_image", where),
            next_id=_optional_string(data, "next_id", where),
            note=None if note is None else Note._parse(note, f"{where}.note"),
        )


def load_desktop_data(path: str | Path) -> DesktopData:
    """Read one desktop document from a JSON file."""
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataError(f"{path}: invalid JSON: {exc}") from exc
    return DesktopData._parse(document, str(path))


def load_collection(root: str | Path, files: Iterable[str] = DESKTOP_FILES) -> list[DesktopData]:
    """Read every listed document below ``root``, keeping the given order."""
    root = Path(root)
    return [load_desktop_data(root / name) for name in files]