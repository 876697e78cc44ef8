from __future__ import annotations

from bs4 import BeautifulSoup

DEFAULT_WORDS_PER_MINUTE = 200


def visible_words(html: str) -> int:
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return len(text.split())


def estimate_reading_time(html: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> float:
    """Estimated minutes to read the visible text of rendered HTML."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    return visible_words(html) / words_per_minute
