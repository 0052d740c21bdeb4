"""Tests for the JSON file key-value store."""

from recipe_finder.adapters.json_file_store import JsonFileKeyValueStore


def test_missing_file_reads_as_empty(tmp_path) -> None:
    store = JsonFileKeyValueStore(tmp_path / "missing.json")

    assert store.get("shoppingList") is None


def test_set_then_get_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "store.json"
    JsonFileKeyValueStore(path).set("shoppingList", "[]")
    JsonFileKeyValueStore(path).set("other", "x")

    store = JsonFileKeyValueStore(path)

    assert store.get("shoppingList") == "[]"
    assert store.get("other") == "x"
    assert not path.with_name("store.json.tmp").exists()


def test_corrupt_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileKeyValueStore(path)

    assert store.get("shoppingList") is None

    store.set("shoppingList", "[]")
    assert store.get("shoppingList") == "[]"
