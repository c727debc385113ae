import json
from pathlib import Path

import pytest

from detective_quest.casefile import CaseFile

REPO_ROOT = Path(__file__).resolve().parent.parent


def test_default_case_is_the_mansion():
    case = CaseFile.default()
    assert case.rooms["name"] == "Hall de Entrada"
    assert case.clues_for("Biblioteca") == [("Livros deslocados", "Joaquim")]
    assert case.clues_for("Sótão") == case.clues_for("Sotao")
    assert case.clues_for("Jardim") == []
    assert case.unknown_suspect == "Desconhecido"
    assert case.bucket_count == 27


def test_default_case_is_a_fresh_copy():
    first = CaseFile.default()
    first.rooms["name"] = "Changed"
    assert CaseFile.default().rooms["name"] == "Hall de Entrada"


def test_shipped_case_file_matches_default():
    loaded = CaseFile.load(REPO_ROOT / "config" / "mansion.json")
    default = CaseFile.default()
    assert loaded.rooms == default.rooms
    assert loaded.room_clues == default.room_clues
    assert loaded.name == default.name


def test_load_falls_back_to_defaults(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps({
        "rooms": {"name": "Porch", "left": {"name": "Shed"}},
        "room_clues": {"Shed": [["Muddy boots", "Gardener"]]},
    }), encoding="utf-8")
    case = CaseFile.load(path)
    assert case.name == "tiny"
    assert case.clues_for("Shed") == [("Muddy boots", "Gardener")]
    assert case.unknown_suspect == "Desconhecido"
    assert case.bucket_count == 27


@pytest.mark.parametrize("raw", [
    {"rooms": {"left": {"name": "X"}}},
    {"rooms": {"name": "A", "right": {"name": ""}}},
    {"room_clues": {"Hall": [["only clue"]]}},
    {"bucket_count": 1},
    {"bucket_count": None},
    {"bucket_count": "many"},
    {"room_clues": ["x"]},
    {"room_clues": {"Hall": 5}},
])
def test_malformed_case_raises_value_error(raw):
    with pytest.raises(ValueError):
        CaseFile.from_dict(raw)


def test_load_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        CaseFile.load(path)
