import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

from wordsuggest.batch.index_cache import IndexCache
from wordsuggest.common.config import Settings, settings
from wordsuggest.spellcheck.engine import DictionaryIndex, normalize_lines
from wordsuggest.spellcheck.errors import CacheWriteError, SourceUnreadable

logger = logging.getLogger(__name__)

WORD_LIST_SUFFIX = ".dic"


def dictionary_path(dictionary_dir: Path | str, dictionary_id: str) -> Path:
    path = Path(dictionary_dir) / f"{dictionary_id}{WORD_LIST_SUFFIX}"
    # ids name a file directly inside dictionary_dir, never a path
    if (
        not dictionary_id
        or dictionary_id in {".", ".."}
        or any(sep in dictionary_id for sep in ("/", "\\", os.sep))
    ):
        raise SourceUnreadable(path)
    return path


def read_word_list(path: Path | str) -> list[str]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", errors="ignore") as fh:
            return fh.read().splitlines()
    except OSError as exc:
        raise SourceUnreadable(path) from exc


def build_index_from_file(path: Path | str) -> DictionaryIndex:
    lines = read_word_list(path)
    index = normalize_lines(lines)
    logger.info(
        "normalized word list path=%s lines=%s words=%s buckets=%s",
        path,
        len(lines),
        len(index),
        len(index.buckets),
    )
    return index


def build_or_load_index(
    dictionary_id: str,
    source_path: Path | str,
    cache: IndexCache,
    *,
    force_rebuild: bool = False,
) -> DictionaryIndex:
    if not force_rebuild:
        cached = cache.load(dictionary_id)
        if cached is not None:
            return cached

    index = build_index_from_file(source_path)
    try:
        cache.store(dictionary_id, index)
    except CacheWriteError:
        if force_rebuild:
            # a stale entry must not outlive a forced rebuild
            cache.invalidate(dictionary_id)
        logger.exception("failed to persist index for dictionary=%s; continuing without cache", dictionary_id)
    return index


def run(dictionary_ids: Sequence[str], *, force_rebuild: bool = False, config: Settings = settings) -> int:
    cache = IndexCache(config.cache_dir)
    failures = 0
    for dictionary_id in dictionary_ids:
        try:
            source = dictionary_path(config.dictionary_dir, dictionary_id)
            index = build_or_load_index(dictionary_id, source, cache, force_rebuild=force_rebuild)
        except SourceUnreadable:
            logger.exception("skipping dictionary=%s", dictionary_id)
            failures += 1
            continue
        logger.info(
            "dictionary ready dictionary=%s words=%s lengths=%s..%s",
            dictionary_id,
            len(index),
            min(index.buckets, default=0),
            max(index.buckets, default=0),
        )
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build or refresh cached suggestion indexes.")
    parser.add_argument("dictionaries", nargs="+", help="Dictionary ids to index")
    parser.add_argument("--force", action="store_true", help="Ignore existing cache entries and rebuild")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    failures = run(args.dictionaries, force_rebuild=args.force)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
