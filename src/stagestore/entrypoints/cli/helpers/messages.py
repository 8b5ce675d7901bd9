"""Terminal message helpers for the STAGESTORE CLI.

User-visible status lines with emoji→ASCII fallbacks. Everything goes to
stderr so stdout can carry staged content (``stagestore cat``) or JSON.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so a changed stderr is honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" when stderr cannot encode it."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅", or "[OK]" when stderr cannot encode it."""
    return _glyph(SUCCESS)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  'a.txt' already staged; overwriting.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Staged 'a.txt' (5 bytes).``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)

