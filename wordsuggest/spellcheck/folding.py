"""Accent folding used on both sides of a match.

Each class lists its base character first, followed by the variants that
fold onto it. Characters missing from the table fold to themselves.
"""

ACCENT_CLASSES = (
    "aáâàã",
    "AÁÂÀÃ",
    "eéêè",
    "EÉÊÈ",
    "cç",
    "CÇ",
    "nñ",
    "NÑ",
    "oõóôöò",
    "OÕÓÔÖÒ",
    "iíîïì",
    "IÍÎÏÌ",
    "uúûüù",
    "UÚÛÜÙ",
)


def _build_fold_map(classes: tuple[str, ...]) -> dict[str, str]:
    fold_map: dict[str, str] = {}
    for accent_class in classes:
        base = accent_class[0]
        for variant in accent_class[1:]:
            if variant in fold_map:
                raise ValueError(f"character {variant!r} belongs to more than one accent class")
            fold_map[variant] = base
    return fold_map


FOLD_MAP = _build_fold_map(ACCENT_CLASSES)
_FOLD_TABLE = str.maketrans(FOLD_MAP)


def fold(char: str) -> str:
    return FOLD_MAP.get(char, char)


def fold_string(text: str) -> str:
    return text.translate(_FOLD_TABLE)
