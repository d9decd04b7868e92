"""Terminal message helpers for the PANELSEED CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Warnings and errors always go to stderr. ``success`` and ``info`` default to
stderr as well; the seeder passes ``err=False`` so its progress lines land on
stdout.
"""

import click

# (emoji, ASCII fallback)
CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate
INFO = ("ℹ️", "[i]")  # pragma: no mutate


def _supports_character(character: str, err: bool = True) -> bool:
    """Return True if *character* can be encoded on the target stream.

    Decides whether to emit emojis or fall back to ASCII so terminals without
    UTF-8 don't raise `UnicodeEncodeError`. The stream is looked up on every
    call.
    """
    stream = click.get_text_stream("stderr" if err else "stdout")
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str], err: bool = True) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji, err) else fallback


def caution_glyph(err: bool = True) -> str:
    """Return "⚠️" when the stream supports it, otherwise "[!]"."""
    return _glyph(CAUTION, err)


def success_glyph(err: bool = True) -> str:
    """Return "✅" when the stream supports it, otherwise "[OK]"."""
    return _glyph(SUCCESS, err)


def error_glyph(err: bool = True) -> str:
    """Return "❌" when the stream supports it, otherwise "[X]"."""
    return _glyph(ERROR, err)


def info_glyph(err: bool = True) -> str:
    """Return "ℹ️" when the stream supports it, otherwise "[i]"."""
    return _glyph(INFO, err)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  This will modify your database.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Node not found: ghost-node``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)


def success(msg: str, err: bool = True) -> None:
    """Emit a green, bold success line.

    Example:
        ``✅  Admin user created: admin@example.com``
    """
    click.secho(f"{success_glyph(err)}  {msg}", fg="green", bold=True, err=err)


def info(msg: str, err: bool = True) -> None:
    """Emit a plain informational line.

    Example:
        ``ℹ️  Admin user already exists.``
    """
    click.secho(f"{info_glyph(err)}  {msg}", err=err)
