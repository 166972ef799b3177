"""Word index mapping normalised words to the lines they appear on."""

from __future__ import annotations

from .text import ascii_lower, strip_non_alpha_num


class WordIndex:
    """Maps each word to the ordered, duplicate-free list of lines holding it.

    Words are split on whitespace and stripped of leading and trailing
    non-alphanumeric characters; when ``case_sensitive`` is false they are
    also lower-cased.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive
        self.word_count = 0
        self._lines: dict[str, list[int]] = {}

    def normalize(self, word: str) -> str:
        """Return the key under which ``word`` is stored."""
        key = strip_non_alpha_num(word)
        return key if self.case_sensitive else ascii_lower(key)

    def add_line(self, line: str, line_number: int) -> None:
        """Index every word of ``line`` as occurring on ``line_number``."""
        for token in line.split():
            locations = self._lines.setdefault(self.normalize(token), [])
            if not locations or locations[-1] != line_number:
                locations.append(line_number)
            self.word_count += 1

    def lines_for(self, word: str) -> list[int]:
        """Return the lines on which ``word`` occurs, empty if it never does."""
        return list(self._lines.get(self.normalize(word), ()))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.normalize(word) in self._lines

    def __len__(self) -> int:
        return len(self._lines)