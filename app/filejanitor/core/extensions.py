"""Extension token normalization and matching.

User-supplied extensions arrive as a comma-separated string or a list of
raw tokens ("PDF", ".docx ", "txt"). They are normalized into a frozenset
of lowercase, dot-prefixed tokens before any matching happens.
"""

import os
from collections.abc import Iterable

ExtensionSet = frozenset[str]


def normalize_extensions(value: str | Iterable[object] | None) -> ExtensionSet:
    """Normalize raw extension tokens into a canonical set.

    Splits strings on commas, trims whitespace, lowercases, drops empty
    tokens and prefixes a leading dot where absent. The result is stable
    under repeated normalization.

    Args:
        value: Comma-separated string, iterable of tokens, or None.

    Returns:
        Frozenset of normalized extensions (e.g. {".pdf", ".docx"}).
    """
    if value is None:
        return frozenset()

    tokens = value.split(",") if isinstance(value, str) else [str(v) for v in value]

    normalized: set[str] = set()
    for token in tokens:
        ext = token.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith(".") else f".{ext}")

    return frozenset(normalized)


def file_extension(path: str | os.PathLike[str]) -> str:
    """Return the lowercased extension of a path, including the dot.

    Names consisting only of a leading dot and a stem (".bashrc") have no
    extension.
    """
    return os.path.splitext(os.fspath(path))[1].lower()


def matches_extension(path: str | os.PathLike[str], extensions: ExtensionSet) -> bool:
    """Check if a path's extension is in the normalized set."""
    return file_extension(path) in extensions
