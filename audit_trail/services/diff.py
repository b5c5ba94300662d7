"""Word-level diff between two text snapshots.

Words are maximal runs of non-whitespace characters, compared case-insensitively.
Results keep first-occurrence order so the same input always yields the same lists.
"""

import re
from dataclasses import dataclass

# ECMAScript \s: ASCII whitespace, NBSP, BOM, the Zs space separators and U+2028/U+2029.
# Narrower than str.split(), which also breaks on U+001C-U+001F and U+0085.
WHITESPACE = re.compile(r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


@dataclass(frozen=True)
class WordDiff:
    added_words: tuple[str, ...]
    removed_words: tuple[str, ...]


def _split(text: str | None) -> list[str]:
    if not text:
        return []
    return [word for word in WHITESPACE.split(text) if word]


def tokenize(text: str | None) -> list[str]:
    return [word.lower() for word in _split(text)]


def word_count(text: str | None) -> int:
    return len(_split(text))


def _unique(words: list[str]) -> dict[str, None]:
    # dict keeps insertion order, unlike set
    return dict.fromkeys(words)


def diff(old_text: str | None, new_text: str | None) -> WordDiff:
    old_words = _unique(tokenize(old_text))
    new_words = _unique(tokenize(new_text))
    return WordDiff(
        added_words=tuple(w for w in new_words if w not in old_words),
        removed_words=tuple(w for w in old_words if w not in new_words),
    )
