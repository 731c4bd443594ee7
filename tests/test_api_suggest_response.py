from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import HTTPException

from wordsuggest.api import main
from wordsuggest.api import suggest_service as service_module
from wordsuggest.api.suggest_service import SuggestService
from wordsuggest.common.config import Settings


@pytest.fixture
def service(tmp_path: Path, monkeypatch) -> SuggestService:
    dictionaries = tmp_path / "dicts"
    dictionaries.mkdir()
    (dictionaries / "en.dic").write_text("cat\ncar\ncan\ndog\n")
    config = Settings(
        dictionary_dir=str(dictionaries),
        cache_dir=str(tmp_path / "cache"),
        default_dictionary=None,
    )
    fresh = SuggestService(config=config)
    monkeypatch.setattr(service_module, "suggest_service", fresh)
    monkeypatch.setattr(main, "suggest_service", fresh)
    return fresh


def test_suggest_before_switch_returns_conflict(service: SuggestService) -> None:
    with pytest.raises(HTTPException) as excinfo:
        main.suggest(q="cat", limit=None, window=None)

    assert excinfo.value.status_code == 409


def test_switch_then_suggest(service: SuggestService) -> None:
    switched = main.switch_dictionary(main.DictionarySwitchRequest(name="en"))

    assert switched.name == "en"
    assert switched.words == 4
    assert switched.buckets == 1

    response = main.suggest(q="cat", limit=2, window=None)
    assert response.dictionary == "en"
    assert response.query == "cat"
    assert response.suggestions == ["can", "car"]


def test_switch_to_unknown_dictionary_returns_not_found(service: SuggestService) -> None:
    with pytest.raises(HTTPException) as excinfo:
        main.switch_dictionary(main.DictionarySwitchRequest(name="xx"))

    assert excinfo.value.status_code == 404


def test_current_dictionary_reports_active(service: SuggestService) -> None:
    with pytest.raises(HTTPException):
        main.current_dictionary()

    main.switch_dictionary(main.DictionarySwitchRequest(name="en", force_rebuild=True))

    assert main.current_dictionary().name == "en"
