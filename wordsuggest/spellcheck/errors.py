from pathlib import Path


class SuggestError(Exception):
    """Base class for failures surfaced by the suggestion core."""


class SourceUnreadable(SuggestError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"word list is not readable: {self.path}")


class CacheWriteError(SuggestError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"could not write index cache entry: {self.path}")


class NoActiveDictionary(SuggestError):
    def __init__(self) -> None:
        super().__init__("no dictionary is active")
