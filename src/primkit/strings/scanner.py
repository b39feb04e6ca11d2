"""String scanning primitives.

Locate one character sequence inside another and test prefix, suffix and
containment relationships, optionally ignoring case.

Conventions:
- A failed search returns `NOT_FOUND` (-1), never ``None``.
- The empty needle matches at index 0: ``index_of(h, "") == 0``,
  ``contains(h, "")``, ``starts_with(h, "")`` and ``ends_with(h, "")`` are
  true for every ``h``.
- Case-insensitive variants fold both operands with `str.lower` and then run
  the case-sensitive algorithm. Indices they return refer to the folded
  text, which only differs in length from the input for a handful of
  characters (e.g. ``"İ"``).
- Every function is total over ``str`` arguments; none of them raises.
"""

from primkit.adapters.comparators import CaseInsensitiveComparator, LocaleComparator

EMPTY = ""
NOT_FOUND = -1

_LOCALE_ORDER = LocaleComparator()
_CASE_INSENSITIVE_ORDER = CaseInsensitiveComparator()


def _fold(text: str) -> str:
    return text.lower()


def _clamp(position: int, length: int) -> int:
    return max(0, min(position, length))


# ============================================================================
#                               Searching
# ============================================================================


def index_of(haystack: str, needle: str, start: int = 0) -> int:
    """Return the lowest index at which `needle` occurs in `haystack`.

    Args:
        haystack: The text to search within.
        needle: The text to search for.
        start: Index to start searching from. Clamped into
            ``[0, len(haystack)]``.

    Returns:
        The index of the first occurrence at or after `start`, the clamped
        `start` itself for an empty needle, or `NOT_FOUND`.

    Example:
        ```py
        index_of("Lorem ipsum", "ipsum")  # 6
        index_of("", "abc")  # -1
        index_of("abc", "")  # 0
        ```
    """
    length, width = len(haystack), len(needle)
    start = _clamp(start, length)
    if width == 0:
        return start

    last = length - width
    if last < start:
        return NOT_FOUND

    first = needle[0]
    for i in range(start, last + 1):
        if haystack[i] == first and haystack[i : i + width] == needle:
            return i
    return NOT_FOUND


def last_index_of(haystack: str, needle: str) -> int:
    """Return the highest index at which `needle` occurs in `haystack`.

    Scans from the end towards the start. An empty needle returns 0, the
    same contract as `index_of`.

    Example:
        ```py
        last_index_of("Abcddemmaxdemala", "dem")  # 10
        last_index_of("d", "da")  # -1
        ```
    """
    length, width = len(haystack), len(needle)
    if width == 0:
        return 0

    first = needle[0]
    for i in range(length - width, -1, -1):
        if haystack[i] == first and haystack[i : i + width] == needle:
            return i
    return NOT_FOUND


def index_of_ignore_case(haystack: str, needle: str, start: int = 0) -> int:
    """Case-insensitive `index_of`."""
    return index_of(_fold(haystack), _fold(needle), start)


def last_index_of_ignore_case(haystack: str, needle: str) -> int:
    """Case-insensitive `last_index_of`."""
    return last_index_of(_fold(haystack), _fold(needle))


def index_of_any(haystack: str, *needles: str) -> int:
    """Return the index of the first needle, in argument order, that occurs.

    Needles are tried one by one; the result is the position of the first
    needle found, which is not necessarily the leftmost match overall.
    Returns `NOT_FOUND` when no needle occurs or none are given.
    """
    for needle in needles:
        if (idx := index_of(haystack, needle)) != NOT_FOUND:
            return idx
    return NOT_FOUND


def count_matches(haystack: str, needle: str) -> int:
    """Count non-overlapping occurrences of `needle` in `haystack`.

    Matches are counted left to right; after each match the scan resumes
    right after it, so ``count_matches("aaaa", "aa") == 2``. An empty needle
    counts 0 matches.

    Example:
        ```py
        count_matches("Lorem ipsum dolor sit", "or")  # 2
        count_matches("ho ho ho", "")  # 0
        ```
    """
    length, width = len(haystack), len(needle)
    if length == 0 or width == 0 or width > length:
        return 0

    count, i, last = 0, 0, length - width
    first = needle[0]
    while i <= last:
        if haystack[i] == first and haystack[i : i + width] == needle:
            count += 1
            i += width
        else:
            i += 1
    return count


def index_of_difference(a: str, b: str) -> int:
    """Return the first index at which `a` and `b` differ.

    Returns:
        The first differing position; ``min(len(a), len(b))`` when one is a
        proper prefix of the other; `NOT_FOUND` when both are identical.

    Example:
        ```py
        index_of_difference("Lorem", "Lor")  # 3
        index_of_difference("Lor", "asc")  # 0
        index_of_difference("abc", "abc")  # -1
        ```
    """
    if a == b:
        return NOT_FOUND

    shortest = min(len(a), len(b))
    for i in range(shortest):
        if a[i] != b[i]:
            return i
    return shortest


# ============================================================================
#                               Predicates
# ============================================================================


def contains(haystack: str, needle: str, ignore_case: bool = False) -> bool:
    """Return True if `needle` occurs in `haystack`.

    An empty needle is always contained.
    """
    if ignore_case:
        return index_of(_fold(haystack), _fold(needle)) != NOT_FOUND
    return index_of(haystack, needle) != NOT_FOUND


def contains_ignore_case(haystack: str, needle: str) -> bool:
    """Case-insensitive `contains`."""
    return contains(haystack, needle, ignore_case=True)


def contains_any(haystack: str, *needles: str) -> bool:
    """Return True if at least one of `needles` occurs in `haystack`."""
    return any(contains(haystack, needle) for needle in needles)


def contains_none(haystack: str, *needles: str) -> bool:
    """Return True if none of `needles` occurs in `haystack`.

    True when no needles are given.
    """
    return not contains_any(haystack, *needles)


def starts_with(
    text: str, prefix: str, ignore_case: bool = False, position: int = 0
) -> bool:
    """Return True if `text` has `prefix` at `position`.

    Args:
        text: The text to test.
        prefix: The expected prefix. The empty prefix always matches.
        ignore_case: Fold both operands before comparing.
        position: Index the prefix is anchored at. Clamped into
            ``[0, len(text)]``.
    """
    if ignore_case:
        text, prefix = _fold(text), _fold(prefix)
    width = len(prefix)
    if width == 0:
        return True

    position = _clamp(position, len(text))
    if position + width > len(text):
        return False
    return text[position : position + width] == prefix


def starts_with_ignore_case(text: str, prefix: str, position: int = 0) -> bool:
    """Case-insensitive `starts_with`."""
    return starts_with(text, prefix, ignore_case=True, position=position)


def starts_with_any(text: str, *prefixes: str) -> bool:
    """Return True if `text` starts with at least one of `prefixes`."""
    return any(starts_with(text, prefix) for prefix in prefixes)


def ends_with(text: str, suffix: str, ignore_case: bool = False) -> bool:
    """Return True if `text` ends with `suffix`.

    The empty suffix always matches, including against the empty text.
    """
    if ignore_case:
        text, suffix = _fold(text), _fold(suffix)
    width = len(suffix)
    if width == 0:
        return True
    if width > len(text):
        return False
    return text[len(text) - width :] == suffix


def ends_with_ignore_case(text: str, suffix: str) -> bool:
    """Case-insensitive `ends_with`."""
    return ends_with(text, suffix, ignore_case=True)


def ends_with_any(text: str, *suffixes: str) -> bool:
    """Return True if `text` ends with at least one of `suffixes`."""
    return any(ends_with(text, suffix) for suffix in suffixes)


def ends_with_none(text: str, *suffixes: str) -> bool:
    """Return True if `text` ends with none of `suffixes`.

    Note:
        Unlike `contains_none`, this returns False when no suffixes are given.
    """
    if not suffixes:
        return False
    return not ends_with_any(text, *suffixes)


# ============================================================================
#                               Equality / ordering
# ============================================================================


def equals_ignore_case(a: str, b: str) -> bool:
    """Return True if `a` and `b` are equal after case folding."""
    return a == b or _fold(a) == _fold(b)


def equals_any_ignore_case(text: str, *candidates: str) -> bool:
    """Return True if `text` equals any of `candidates`, ignoring case."""
    folded = _fold(text)
    return any(folded == _fold(candidate) for candidate in candidates)


def compare(a: str, b: str) -> int:
    """Three-way locale-aware comparison of two strings (-1, 0 or 1)."""
    return _LOCALE_ORDER.compare(a, b)


def compare_ignore_case(a: str, b: str) -> int:
    """Three-way locale-aware comparison after case folding (-1, 0 or 1)."""
    return _CASE_INSENSITIVE_ORDER.compare(a, b)
