"""Character constants and predicates.

Python strings are sequences of code points, so a well-formed astral
character is a single element. Surrogate code points only show up in text
decoded with ``errors="surrogatepass"`` or built from raw code units; these
predicates detect them.
"""

CR = "\r"
LF = "\n"
CRLF = CR + LF

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF


def is_high_surrogate(char: str) -> bool:
    """Return True if `char` is a single UTF-16 high (leading) surrogate."""
    return len(char) == 1 and HIGH_SURROGATE_MIN <= ord(char) <= HIGH_SURROGATE_MAX


def is_low_surrogate(char: str) -> bool:
    """Return True if `char` is a single UTF-16 low (trailing) surrogate."""
    return len(char) == 1 and LOW_SURROGATE_MIN <= ord(char) <= LOW_SURROGATE_MAX


def is_surrogate(char: str) -> bool:
    """Return True if `char` is a high or low surrogate."""
    return is_high_surrogate(char) or is_low_surrogate(char)


def is_surrogate_pair(text: str, index: int) -> bool:
    """Return True if `text[index]` and `text[index + 1]` form a surrogate pair.

    Out-of-range indices (including negative ones) return False.
    """
    if index < 0 or index + 1 >= len(text):
        return False
    return is_high_surrogate(text[index]) and is_low_surrogate(text[index + 1])
