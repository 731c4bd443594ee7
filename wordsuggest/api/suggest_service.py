from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from wordsuggest.batch.index_builder import build_or_load_index, dictionary_path
from wordsuggest.batch.index_cache import IndexCache
from wordsuggest.common.config import Settings, settings
from wordsuggest.spellcheck.engine import DictionaryIndex, SuggestionEngine
from wordsuggest.spellcheck.errors import NoActiveDictionary, SuggestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveDictionary:
    name: str
    index: DictionaryIndex


class SuggestService:
    """Owns the active dictionary and answers suggestion queries against it.

    The active dictionary is a single reference that is only replaced once a
    complete index is available, so a failed switch keeps the previous one.
    """

    def __init__(
        self,
        *,
        config: Settings | None = None,
        cache: IndexCache | None = None,
        engine: SuggestionEngine | None = None,
    ) -> None:
        self.config = config or settings
        self.cache = cache or IndexCache(self.config.cache_dir)
        self.engine = engine or SuggestionEngine()
        self._active: ActiveDictionary | None = None
        self._default_attempted = False

    @property
    def active(self) -> ActiveDictionary | None:
        return self._active

    def resolve_source(self, dictionary_id: str) -> Path:
        return dictionary_path(self.config.dictionary_dir, dictionary_id)

    def build_or_load_index(self, dictionary_id: str, force_rebuild: bool = False) -> DictionaryIndex:
        return build_or_load_index(
            dictionary_id,
            self.resolve_source(dictionary_id),
            self.cache,
            force_rebuild=force_rebuild,
        )

    def set_active_dictionary(self, index: DictionaryIndex, dictionary_id: str) -> None:
        self._active = ActiveDictionary(name=dictionary_id, index=index)
        logger.info("active dictionary=%s words=%s", dictionary_id, len(index))

    def switch_dictionary(self, dictionary_id: str, force_rebuild: bool = False) -> ActiveDictionary:
        index = self.build_or_load_index(dictionary_id, force_rebuild=force_rebuild)
        self.set_active_dictionary(index, dictionary_id)
        return self._active

    def _ensure_active(self) -> ActiveDictionary:
        active = self._active
        if active is not None:
            return active

        default = self.config.default_dictionary
        if default and not self._default_attempted:
            self._default_attempted = True
            try:
                return self.switch_dictionary(default)
            except SuggestError:
                logger.exception("failed to load default dictionary=%s", default)

        raise NoActiveDictionary()

    def suggest(self, query: str, limit: int | None = None, window: int | None = None) -> list[str]:
        active = self._ensure_active()
        return self.engine.match_words(
            query,
            active.index,
            limit=self.config.result_limit if limit is None else limit,
            window=self.config.match_window if window is None else window,
            symmetric_window=self.config.symmetric_window,
        )


suggest_service = SuggestService()


def perform_suggest(*, q: str, limit: int | None = None, window: int | None = None) -> list[str]:
    return suggest_service.suggest(q, limit=limit, window=window)


def perform_switch(*, name: str, force_rebuild: bool = False) -> ActiveDictionary:
    return suggest_service.switch_dictionary(name, force_rebuild=force_rebuild)
