"""Word normalisation helpers shared by the index and the search engine."""

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_LOWER_TABLE = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)


def is_alpha_char(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return len(c) == 1 and ("0" <= c <= "9" or "A" <= c <= "Z" or "a" <= c <= "z")


def strip_non_alpha_num(text: str) -> str:
    """Remove leading and trailing characters that are not ASCII letters or digits.

    Characters between the first and last alphanumeric character are kept
    untouched.
    """
    first = next((i for i, c in enumerate(text) if is_alpha_char(c)), None)
    if first is None:
        return ""
    last = next(i for i in range(len(text) - 1, -1, -1) if is_alpha_char(text[i]))
    return text[first : last + 1]


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as it is."""
    return text.translate(_LOWER_TABLE)