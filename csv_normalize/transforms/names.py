"""Name capitalizer for csv-normalize."""

from __future__ import annotations


def capitalize_name(value: str) -> str:
    """Uppercase the first character of every space-separated word.

    The rest of each word is left as-is (``"mcDonald"`` -> ``"McDonald"``),
    and runs of spaces are preserved because the split is on single
    spaces. Never fails; ``""`` stays ``""``.
    """
    return " ".join(_capitalize_word(word) for word in value.split(" "))


def _capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:]
