"""Terminal message helpers for the PRIMKIT CLI.

Render user-visible status lines with emoji to ASCII fallbacks. Messages go
to stderr so stdout stays machine-readable (e.g. when piping `primkit sort`).
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Warning marker: "⚠️" when stderr can encode it, otherwise "[!]"."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def error_glyph() -> str:
    """Error marker: "❌" when stderr can encode it, otherwise "[X]"."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  NaN has no defined position in a numeric sort.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  PRIMKIT_SORT_SEED must be an integer, got 'abc'.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
