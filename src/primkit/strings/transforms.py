"""String transformations built on `primkit.strings.scanner`.

Every function returns a new string (or the input itself when nothing
changes) and accepts any ``str`` without raising.
"""

from primkit.strings import scanner
from primkit.strings.chars import CR, LF
from primkit.strings.scanner import EMPTY, NOT_FOUND


def abbreviate(text: str, max_length: int, marker: str = "...") -> str:
    """Cut `text` to `max_length` characters and append `marker`.

    `text` is returned unchanged when it already fits or when `max_length`
    is negative.

    Example:
        ```py
        abbreviate("caterpillar", 3)  # "cat..."
        abbreviate("a", 1)  # "a"
        ```
    """
    if max_length < 0 or len(text) <= max_length:
        return text
    return text[:max_length] + marker


def append_if_missing(text: str, suffix: str, ignore_case: bool = False) -> str:
    """Append `suffix` unless `text` already ends with it."""
    if not suffix or scanner.ends_with(text, suffix, ignore_case):
        return text
    return text + suffix


def prepend_if_missing(text: str, prefix: str, ignore_case: bool = False) -> str:
    """Prepend `prefix` unless `text` already starts with it."""
    if not prefix or scanner.starts_with(text, prefix, ignore_case):
        return text
    return prefix + text


def remove(text: str, needle: str) -> str:
    """Remove every non-overlapping occurrence of `needle` from `text`."""
    if not needle:
        return text

    parts: list[str] = []
    start = 0
    while (idx := scanner.index_of(text, needle, start)) != NOT_FOUND:
        parts.append(text[start:idx])
        start = idx + len(needle)
    parts.append(text[start:])
    return EMPTY.join(parts)


def remove_start(text: str, prefix: str, ignore_case: bool = False) -> str:
    """Remove `prefix` from the start of `text` if present."""
    if text and prefix and scanner.starts_with(text, prefix, ignore_case):
        return text[len(prefix) :]
    return text


def remove_end(text: str, suffix: str, ignore_case: bool = False) -> str:
    """Remove `suffix` from the end of `text` if present."""
    if text and suffix and scanner.ends_with(text, suffix, ignore_case):
        return text[: len(text) - len(suffix)]
    return text


def remove_end_ignore_case(text: str, suffix: str) -> str:
    """Case-insensitive `remove_end`."""
    return remove_end(text, suffix, ignore_case=True)


def left(text: str, length: int) -> str:
    """Return the leftmost `length` characters (empty for negative lengths)."""
    if length < 0:
        return EMPTY
    return text[:length]


def longest(*texts: str) -> str:
    """Return the longest argument; the first one wins ties.

    Returns the empty string when called without arguments.
    """
    result = EMPTY
    for text in texts:
        if len(text) > len(result):
            result = text
    return result


def chomp(text: str) -> str:
    """Remove one trailing line terminator (``\\r\\n``, ``\\n`` or ``\\r``).

    Example:
        ```py
        chomp("abc\\r\\n")  # "abc"
        chomp("abc\\n\\r")  # "abc\\n"
        ```
    """
    if text.endswith(CR + LF):
        return text[:-2]
    if text.endswith((LF, CR)):
        return text[:-1]
    return text


def chop(text: str) -> str:
    """Remove the last character, treating a trailing ``\\r\\n`` as one."""
    if text.endswith(CR + LF):
        return text[:-2]
    return text[:-1]


def repeat(text: str, times: int) -> str:
    """Repeat `text` `times` times (empty for negative counts)."""
    if not text or times < 0:
        return EMPTY
    return text * times


def reverse(text: str) -> str:
    """Return `text` with its characters in reverse order."""
    return text[::-1]


def difference(a: str, b: str) -> str:
    """Return the remainder of the longer string from their first difference.

    Example:
        ```py
        difference("Lorem", "Lor")  # "em"
        difference("abc", "abc")  # ""
        ```
    """
    idx = scanner.index_of_difference(a, b)
    if idx == NOT_FOUND:
        return EMPTY
    return a[idx:] if len(a) > len(b) else b[idx:]
