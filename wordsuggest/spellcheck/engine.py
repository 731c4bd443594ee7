from dataclasses import dataclass, field
from typing import Iterable, Iterator

from wordsuggest.spellcheck.folding import fold_string

DEFAULT_LIMIT = 100
DEFAULT_WINDOW = 3


@dataclass(frozen=True)
class WordRecord:
    original: str
    folded: str

    @classmethod
    def from_word(cls, word: str) -> "WordRecord":
        return cls(original=word, folded=normalize_word(word))


@dataclass(frozen=True)
class DictionaryIndex:
    """Word records bucketed by the length of their folded form.

    Buckets are tuples in first-seen order and are never mutated once the
    index is built; switching dictionaries replaces the whole index.
    """

    buckets: dict[int, tuple[WordRecord, ...]] = field(default_factory=dict)

    def bucket(self, length: int) -> tuple[WordRecord, ...]:
        return self.buckets.get(length, ())

    def lengths(self) -> list[int]:
        return sorted(self.buckets)

    def records(self) -> Iterator[WordRecord]:
        for length in self.lengths():
            yield from self.buckets[length]

    def is_empty(self) -> bool:
        return not any(self.buckets.values())

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets.values())


class SuggestionEngine:
    def normalize_word(self, word: str) -> str:
        return fold_string((word or "").lower())

    def extract_word(self, line: str) -> str | None:
        head = (line or "").split("/", 1)[0]
        tokens = head.split()
        if not tokens:
            return None
        return tokens[0]

    def normalize_lines(self, raw_lines: Iterable[str]) -> DictionaryIndex:
        buckets: dict[int, dict[str, WordRecord]] = {}
        for line in raw_lines:
            word = self.extract_word(line)
            if word is None:
                continue

            record = WordRecord.from_word(word)
            bucket = buckets.setdefault(len(record.folded), {})
            # first occurrence of an exact spelling wins
            if record.original not in bucket:
                bucket[record.original] = record

        return DictionaryIndex(
            buckets={length: tuple(bucket.values()) for length, bucket in buckets.items()}
        )

    def levenshtein(self, source: str, target: str) -> int:
        if source == target:
            return 0
        if not source or not target:
            return max(len(source), len(target))

        previous = list(range(len(target) + 1))
        for i in range(1, len(source) + 1):
            current = [i] + [0] * len(target)
            for j in range(1, len(target) + 1):
                cost = 0 if source[i - 1] == target[j - 1] else 1
                current[j] = min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            previous = current

        return previous[-1]

    def length_window(self, query_length: int, window: int, *, symmetric: bool = False) -> tuple[int, int]:
        low = max(query_length - window, 1)
        if symmetric:
            return low, query_length + window
        # Upper bound is clamped to the query length, so only shorter or
        # equal-length buckets are scanned.
        return low, min(query_length + window, query_length)

    def match_words(
        self,
        query: str,
        index: DictionaryIndex,
        limit: int = DEFAULT_LIMIT,
        window: int = DEFAULT_WINDOW,
        *,
        symmetric_window: bool = False,
    ) -> list[str]:
        if not query or index.is_empty() or limit <= 0:
            return []

        folded_query = self.normalize_word(query)
        low, high = self.length_window(len(query), window, symmetric=symmetric_window)

        scored: list[tuple[int, WordRecord]] = []
        for length in index.lengths():
            if length < low or length > high:
                continue
            for record in index.bucket(length):
                if record.original == query:
                    continue
                scored.append((self.levenshtein(folded_query, record.folded), record))

        scored.sort(key=lambda item: item[0])
        closest = [record for _, record in scored[:limit]]
        closest.sort(key=lambda record: record.folded)
        return [record.original for record in closest]


suggestion_engine = SuggestionEngine()


def normalize_word(word: str) -> str:
    return suggestion_engine.normalize_word(word)


def extract_word(line: str) -> str | None:
    return suggestion_engine.extract_word(line)


def normalize_lines(raw_lines: Iterable[str]) -> DictionaryIndex:
    return suggestion_engine.normalize_lines(raw_lines)


def levenshtein(source: str, target: str) -> int:
    return suggestion_engine.levenshtein(source, target)


def length_window(query_length: int, window: int, *, symmetric: bool = False) -> tuple[int, int]:
    return suggestion_engine.length_window(query_length, window, symmetric=symmetric)


def match_words(
    query: str,
    index: DictionaryIndex,
    limit: int = DEFAULT_LIMIT,
    window: int = DEFAULT_WINDOW,
    *,
    symmetric_window: bool = False,
) -> list[str]:
    return suggestion_engine.match_words(
        query,
        index,
        limit=limit,
        window=window,
        symmetric_window=symmetric_window,
    )
