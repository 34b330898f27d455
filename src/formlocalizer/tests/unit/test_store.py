"""
Unit tests for reading and writing language pack files.
"""
import json
from unittest.mock import patch

import pytest

from formlocalizer import constants
from formlocalizer.core.document import FontSpec, ResourceDocument
from formlocalizer.core.errors import PackMalformedError, PackMissingError, PackWriteError
from formlocalizer.core.store import ResourceStore


@pytest.fixture
def store():
    return ResourceStore()


def test_load_missing_file_returns_empty_document(store, tmp_path):
    document = store.load(tmp_path / "de-DE.json")
    assert document == ResourceDocument()


def test_load_strict_missing_file_raises(store, tmp_path):
    with pytest.raises(PackMissingError):
        store.load_strict(tmp_path / "de-DE.json")


@pytest.mark.parametrize("content", ["{ not json", "[1, 2, 3]", "\"just a string\"", ""])
def test_malformed_pack(store, tmp_path, content):
    path = tmp_path / "fr-FR.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(PackMalformedError):
        store.load_strict(path)
    assert store.load(path) == ResourceDocument()


def test_load_accepts_utf8_bom(store, tmp_path):
    path = tmp_path / "fr-FR.json"
    payload = json.dumps({constants.i18n.keys.FORMS: {"frmMain": {"btnStart": "Démarrer"}}}, ensure_ascii=False)
    path.write_bytes(b"\xef\xbb\xbf" + payload.encode("utf-8"))

    assert store.load_strict(path).form("frmMain") == {"btnStart": "Démarrer"}


def test_save_is_deterministic_regardless_of_insertion_order(store, tmp_path):
    first = ResourceDocument(author_name="A", font_primary=FontSpec("Segoe UI", 9),
                             forms={"frmMain": {"b": "2", "a": "1"}, "frmAbout": {"z": "Z"}})
    second = ResourceDocument(author_name="A", font_primary=FontSpec("Segoe UI", 9),
                              forms={"frmAbout": {"z": "Z"}, "frmMain": {"a": "1", "b": "2"}})

    store.save(tmp_path / "one.json", first)
    store.save(tmp_path / "two.json", second)
    store.save(tmp_path / "three.json", first)

    one = (tmp_path / "one.json").read_bytes()
    assert one == (tmp_path / "two.json").read_bytes()
    assert one == (tmp_path / "three.json").read_bytes()


def test_save_writes_readable_indented_utf8(store, tmp_path):
    path = tmp_path / "nested" / "fr-FR.json"
    store.save(path, ResourceDocument(forms={"frmMain": {"btnStart": "Démarrer"}}))

    text = path.read_text(encoding="utf-8")
    assert "Démarrer" in text
    assert '\n  "Forms": {' in text
    assert text.endswith("\n")
    assert store.load_strict(path).form("frmMain") == {"btnStart": "Démarrer"}


def test_save_replaces_whole_file(store, tmp_path):
    path = tmp_path / "en-US.json"
    store.save(path, ResourceDocument(forms={"frmMain": {"a": "1"}, "frmOld": {"x": "X"}}))
    store.save(path, ResourceDocument(forms={"frmMain": {"a": "1"}}))

    assert store.load_strict(path).forms == {"frmMain": {"a": "1"}}
    assert [p.name for p in tmp_path.iterdir()] == ["en-US.json"]


def test_save_failure_raises_pack_write_error(store, tmp_path):
    with patch("formlocalizer.core.store.shutil.move", side_effect=OSError("disk full")):
        with pytest.raises(PackWriteError):
            store.save(tmp_path / "en-US.json", ResourceDocument())
