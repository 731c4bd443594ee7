import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote

from wordsuggest.spellcheck.engine import DictionaryIndex, WordRecord
from wordsuggest.spellcheck.errors import CacheWriteError

logger = logging.getLogger(__name__)

CACHE_FORMAT = "wordsuggest-index"
CACHE_VERSION = 1


class IndexCache:
    """One JSON file per dictionary id under ``cache_dir``."""

    def __init__(self, cache_dir: Path | str) -> None:
        self.cache_dir = Path(cache_dir)

    def path_for(self, dictionary_id: str) -> Path:
        # percent-encoding keeps distinct ids in distinct files
        safe_name = quote(dictionary_id, safe="") or "%"
        return self.cache_dir / f"{safe_name}.json"

    def store(self, dictionary_id: str, index: DictionaryIndex) -> Path:
        path = self.path_for(dictionary_id)
        payload = {
            "format": CACHE_FORMAT,
            "version": CACHE_VERSION,
            "dictionary": dictionary_id,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "buckets": {
                str(length): [[record.original, record.folded] for record in bucket]
                for length, bucket in index.buckets.items()
            },
        }

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(payload, fh, ensure_ascii=False)
                os.replace(tmp_name, path)
            except Exception:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise CacheWriteError(path) from exc

        logger.info("stored index cache dictionary=%s words=%s path=%s", dictionary_id, len(index), path)
        return path

    def load(self, dictionary_id: str) -> DictionaryIndex | None:
        path = self.path_for(dictionary_id)
        if not path.exists():
            return None

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("unreadable index cache dictionary=%s path=%s", dictionary_id, path)
            return None

        if (
            not isinstance(payload, dict)
            or payload.get("format") != CACHE_FORMAT
            or payload.get("version") != CACHE_VERSION
            or payload.get("dictionary") != dictionary_id
        ):
            logger.warning("ignoring index cache with unknown format dictionary=%s path=%s", dictionary_id, path)
            return None

        buckets = _decode_buckets(payload.get("buckets"))
        if buckets is None:
            logger.warning("malformed index cache dictionary=%s path=%s", dictionary_id, path)
            return None

        index = DictionaryIndex(buckets=buckets)
        logger.info("loaded index cache dictionary=%s words=%s", dictionary_id, len(index))
        return index

    def invalidate(self, dictionary_id: str) -> None:
        path = self.path_for(dictionary_id)
        try:
            path.unlink()
        except (FileNotFoundError, NotADirectoryError):
            return
        logger.info("invalidated index cache dictionary=%s path=%s", dictionary_id, path)


def _decode_buckets(raw_buckets) -> dict[int, tuple[WordRecord, ...]] | None:
    if not isinstance(raw_buckets, dict):
        return None

    buckets: dict[int, tuple[WordRecord, ...]] = {}
    try:
        for length, rows in raw_buckets.items():
            bucket = []
            for original, folded in rows:
                if not isinstance(original, str):
                    return None
                record = WordRecord.from_word(original)
                # records must match what normalization would produce today
                if record.folded != folded or len(folded) != int(length):
                    return None
                bucket.append(record)
            buckets[int(length)] = tuple(bucket)
    except (AttributeError, TypeError, ValueError):
        return None
    return buckets
