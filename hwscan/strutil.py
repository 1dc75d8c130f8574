"""Small string helpers used when parsing kernel and sysfs text files."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n"


def strip(text: str) -> str:
    """Remove spaces, tabs and newlines (and nothing else) from both ends."""
    return text.strip(_WHITESPACE)


def split(text: str, delimiter: str) -> list[str]:
    """Split at every occurrence of ``delimiter``, keeping the trailing piece."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def split_terminated(text: str, delimiter: str) -> list[str]:
    """Split into the pieces that are followed by ``delimiter``.

    Text after the last delimiter is dropped, so an unterminated final
    record is not returned.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)[:-1]


def count_substring(text: str, substring: str) -> int:
    """Count non-overlapping occurrences of ``substring`` in ``text``."""
    if not substring:
        raise ValueError("substring must not be empty")
    return text.count(substring)


def split_get_index(text: str, delimiter: str, index: int) -> str:
    """Return the piece at ``index`` after splitting at ``delimiter``.

    Negative indices count from the end. An index outside the pieces
    yields an empty string.
    """
    parts = split(text, delimiter)
    if index < 0:
        index += len(parts)
    if not 0 <= index < len(parts):
        return ""
    return parts[index]


def replace_once(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old`` with ``new``."""
    return text.replace(old, new, 1)


def value_at(data: Sequence[T], index: int, default: T) -> T:
    """Return ``data[index]``, or ``default`` when the index is out of range."""
    if 0 <= index < len(data):
        return data[index]
    return default