from __future__ import annotations

import pytest

from highlights.storage.errors import MalformedData
from highlights.storage.local_store import LocalStore


def test_missing_collection_loads_empty(local_store: LocalStore) -> None:
    assert local_store.load("posts") == []


def test_save_then_load(local_store: LocalStore) -> None:
    local_store.save("projects", [{"id": "alpha"}])

    assert local_store.load("projects") == [{"id": "alpha"}]
    assert (local_store.store_dir / "projects.json").exists()
    assert local_store.load("posts") == []


def test_invalid_json_is_malformed(local_store: LocalStore) -> None:
    local_store.store_dir.mkdir(parents=True)
    (local_store.store_dir / "posts.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(MalformedData, match="not valid JSON"):
        local_store.load("posts")


def test_non_array_is_malformed(local_store: LocalStore) -> None:
    local_store.store_dir.mkdir(parents=True)
    (local_store.store_dir / "projects.json").write_text("{}", encoding="utf-8")

    with pytest.raises(MalformedData, match="not a JSON array"):
        local_store.load("projects")


def test_save_leaves_no_temp_files(local_store: LocalStore) -> None:
    local_store.save("posts", [{"id": "1"}])
    local_store.save("posts", [{"id": "2"}, {"id": "1"}])

    assert sorted(p.name for p in local_store.store_dir.iterdir()) == ["posts.json"]
