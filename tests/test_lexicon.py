import json

import pytest

from deskresume.lexicon import (
    DESKTOP_FILES,
    DataError,
    DesktopData,
    Icon,
    IconData,
    Lexicon,
    Link,
    Note,
    load_collection,
    load_desktop_data,
)


def sample_document():
    return {
        "id": "home",
        "lex": {"translations": {"english": "Home", "german": "Start"}, "style": "black"},
        "icons": [
            {
                "icon": {"size": [32, 32], "index": 0},
                "lex": {"translations": {"english": "Work"}},
                "next_id": "work",
                "position": [100, 200],
            }
        ],
        "links": [
            {
                "icon": {"size": [32, 32], "index": 2},
                "lex": {"translations": {"english": "Site"}, "style": "white"},
                "position": [10, 20.5],
                "link": "https://example.com",
            }
        ],
        "window": True,
        "window_image": "wide",
        "next_id": "home",
        "note": {"lex": {"translations": {"english": "Hello"}}, "position": [5, 6]},
        "unknown_field": 1,
    }


def test_from_language_finds_translation():
    lex = Lexicon({"english": "Home", "german": "Start"})
    assert lex.from_language("german") == "Start"


def test_from_language_missing_gives_empty_string():
    lex = Lexicon({"english": "Home"})
    assert lex.from_language("french") == ""


def test_lexicon_from_dict_style_optional():
    lex = Lexicon.from_dict({"translations": {"english": "A"}})
    assert lex.style is None
    assert lex.translations == {"english": "A"}


def test_lexicon_requires_translations():
    with pytest.raises(DataError):
        Lexicon.from_dict({"style": "black"})


def test_lexicon_rejects_non_string_translation():
    with pytest.raises(DataError):
        Lexicon.from_dict({"translations": {"english": 3}})


def test_desktop_from_dict_full_document():
    data = DesktopData.from_dict(sample_document())
    assert data.id == "home"
    assert data.lex.style == "black"
    assert data.window is True
    assert data.window_image == "wide"
    assert data.next_id == "home"
    assert data.image is None
    assert data.icons[0].next_id == "work"
    assert data.icons[0].position == (100.0, 200.0)
    assert data.icons[0].link is None
    assert data.links[0].link == "https://example.com"
    assert data.links[0].position == (10.0, 20.5)
    assert data.links[0].icon.index == 2
    assert data.note.lex.from_language("english") == "Hello"
    assert data.note.position == (5.0, 6.0)


def test_desktop_optional_fields_default_to_none():
    data = DesktopData.from_dict({"id": "x", "lex": {"translations": {}}})
    assert (data.icons, data.links, data.window, data.note) == (None, None, None, None)


def test_desktop_null_optionals_are_none():
    data = DesktopData.from_dict({"id": "x", "lex": {"translations": {}}, "icons": None})
    assert data.icons is None


def test_desktop_requires_id():
    doc = sample_document()
    del doc["id"]
    with pytest.raises(DataError):
        DesktopData.from_dict(doc)


def test_desktop_window_must_be_bool():
    doc = sample_document()
    doc["window"] = "yes"
    with pytest.raises(DataError):
        DesktopData.from_dict(doc)


@pytest.mark.parametrize("position", [[1], [1, 2, 3], ["a", 2], [True, 2], "12"])
def test_position_must_be_pair_of_numbers(position):
    with pytest.raises(DataError):
        Note.from_dict({"lex": {"translations": {}}, "position": position})


@pytest.mark.parametrize("index", [-1, 1.5, "0", True])
def test_icon_index_must_be_non_negative_integer(index):
    with pytest.raises(DataError):
        IconData.from_dict({"size": [1, 1], "index": index})


def test_icon_and_link_require_fields():
    with pytest.raises(DataError):
        Icon.from_dict({"lex": {"translations": {}}, "position": [0, 0]})
    with pytest.raises(DataError):
        Link.from_dict({"icon": {"size": [1, 1], "index": 0}, "lex": {"translations": {}}})


def test_icons_must_be_array():
    doc = sample_document()
    doc["icons"] = {"not": "a list"}
    with pytest.raises(DataError):
        DesktopData.from_dict(doc)


def test_load_desktop_data_reads_file(tmp_path):
    path = tmp_path / "home.json"
    path.write_text(json.dumps(sample_document()), encoding="utf-8")
    assert load_desktop_data(path) == DesktopData.from_dict(sample_document())


def test_load_desktop_data_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataError):
        load_desktop_data(path)


def test_load_collection_keeps_order(tmp_path):
    names = ["b.json", "sub/a.json"]
    (tmp_path / "sub").mkdir()
    for name in names:
        doc = {"id": name, "lex": {"translations": {}}}
        (tmp_path / name).write_text(json.dumps(doc), encoding="utf-8")
    loaded = load_collection(tmp_path, names)
    assert [d.id for d in loaded] == names


def test_load_collection_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_collection(tmp_path, ["absent.json"])


def test_default_collection_loads_home_first(tmp_path):
    for name in DESKTOP_FILES:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        doc = {"id": name.rsplit("/", 1)[-1].removesuffix(".json"), "lex": {"translations": {}}}
        path.write_text(json.dumps(doc), encoding="utf-8")
    loaded = load_collection(tmp_path)
    assert len(loaded) == 9
    assert loaded[0].id == "home"
    assert loaded[-1].id == "links"