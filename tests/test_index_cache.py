import json
from pathlib import Path

import pytest

from wordsuggest.batch.index_cache import IndexCache
from wordsuggest.spellcheck.engine import DictionaryIndex, normalize_lines
from wordsuggest.spellcheck.errors import CacheWriteError


def _sample_index() -> DictionaryIndex:
    return normalize_lines(["maçã", "maca/S", "Élan", "élan", "zoo", "a"])


def test_store_then_load_round_trips(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path / "cache")
    index = _sample_index()

    cache.store("pt_BR", index)
    loaded = cache.load("pt_BR")

    assert loaded == index
    assert [r.original for r in loaded.bucket(4)] == [r.original for r in index.bucket(4)]


def test_store_overwrites_existing_entry(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)
    cache.store("en", normalize_lines(["old"]))
    cache.store("en", normalize_lines(["new", "newer"]))

    loaded = cache.load("en")
    assert loaded is not None
    assert sorted(r.original for r in loaded.records()) == ["new", "newer"]


def test_load_missing_entry_returns_none(tmp_path: Path) -> None:
    assert IndexCache(tmp_path).load("missing") is None


def test_invalidate_removes_only_the_named_entry(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)
    cache.store("en", normalize_lines(["one"]))
    cache.store("es", normalize_lines(["uno"]))

    cache.invalidate("en")
    cache.invalidate("en")

    assert cache.load("en") is None
    assert cache.load("es") is not None


def test_corrupt_or_foreign_entries_are_treated_as_misses(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)
    cache.path_for("broken").write_text("{not json")
    cache.path_for("old").write_text(json.dumps({"format": "wordsuggest-index", "version": 0, "buckets": {}}))

    assert cache.load("broken") is None
    assert cache.load("old") is None


def test_store_raises_cache_write_error_when_directory_is_unusable(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    cache = IndexCache(blocker / "cache")

    with pytest.raises(CacheWriteError):
        cache.store("en", _sample_index())


def test_path_for_stays_inside_cache_dir(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)

    assert cache.path_for("en_US").name == "en_US.json"
    assert cache.path_for("../etc/passwd").parent == tmp_path


def test_similar_ids_do_not_share_an_entry(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)
    cache.store("en_US", normalize_lines(["color"]))
    cache.store("en US", normalize_lines(["colour"]))

    assert [r.original for r in cache.load("en_US").records()] == ["color"]
    assert [r.original for r in cache.load("en US").records()] == ["colour"]

    cache.invalidate("en US")
    assert cache.load("en_US") is not None


def test_entry_written_for_another_id_is_a_miss(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)
    cache.store("es", normalize_lines(["uno"]))
    cache.path_for("es").rename(cache.path_for("pt"))

    assert cache.load("pt") is None


def test_malformed_buckets_are_treated_as_misses(tmp_path: Path) -> None:
    cache = IndexCache(tmp_path)
    header = {"format": "wordsuggest-index", "version": 1, "dictionary": "en"}
    bodies = [
        [],
        {"3": "cat"},
        {"3": [["cat"]]},
        {"x": [["cat", "cat"]]},
        {"4": [["cat", "cat"]]},
        {"3": [["Cat", "Cat"]]},
        {"3": [[7, "cat"]]},
    ]

    for buckets in bodies:
        cache.path_for("en").write_text(json.dumps({**header, "buckets": buckets}))
        assert cache.load("en") is None
