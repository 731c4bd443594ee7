import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    dictionary_dir: str = os.getenv("SUGGEST_DICTIONARY_DIR", "/usr/share/hunspell")
    cache_dir: str = os.getenv("SUGGEST_CACHE_DIR", "/tmp/wordsuggest")
    default_dictionary: str | None = os.getenv("SUGGEST_DEFAULT_DICTIONARY") or None
    match_window: int = int(os.getenv("SUGGEST_MATCH_WINDOW", "3"))
    result_limit: int = int(os.getenv("SUGGEST_RESULT_LIMIT", "100"))
    symmetric_window: bool = _env_flag("SUGGEST_SYMMETRIC_WINDOW")


settings = Settings()
