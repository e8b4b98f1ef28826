"""Naming-convention helpers."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[\W_]+")


def split_words(name: str) -> list[str]:
    """Split *name* into words at case changes, digits and separators.

    Any Unicode letter is kept; scripts without case never split.
    """
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(name):
        start = 0
        for index in range(1, len(chunk)):
            prev, char = chunk[index - 1], chunk[index]
            following = chunk[index + 1] if index + 1 < len(chunk) else ""
            if (
                prev.isdigit() != char.isdigit()
                or (prev.islower() and char.isupper())
                or (prev.isupper() and char.isupper() and following.islower())
            ):
                words.append(chunk[start:index])
                start = index
        if chunk:
            words.append(chunk[start:])
    return words


def snake_case(name: str) -> str:
    """``"HTTPServer"`` -> ``"http_server"``."""
    return "_".join(word.lower() for word in split_words(name))


def pascal_case(name: str) -> str:
    """``"widget service"`` -> ``"WidgetService"``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


def title_case(name: str) -> str:
    """``"widgetService"`` -> ``"Widget Service"``; acronyms are kept."""
    return " ".join(word[:1].upper() + word[1:] for word in split_words(name))
