"""Name normalisation utilities shared by the generators and the scaffolder."""

from __future__ import annotations

import re
import unicodedata

from .errors import DegenerateNameError

__all__ = ["capitalize_first", "component_file_name", "normalize_identifier"]


_NON_WORD = re.compile(r"[^\w]+")


def _strip_accents(value: str) -> str:
    """Drop combining marks so accented letters fold to their base letter."""

    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _is_identifier_char(char: str) -> bool:
    return char == "_" or f"a{char}".isidentifier()


def _pieces(value: str) -> list[str]:
    cleaned = "".join(char if _is_identifier_char(char) else " " for char in _strip_accents(value))
    return [piece for piece in _NON_WORD.split(cleaned) if piece]


def capitalize_first(raw: str) -> str:
    """Upper-case the first character of ``raw`` and keep the rest verbatim.

    Used for human facing labels such as story titles, so special characters
    are preserved: ``"my-widget"`` becomes ``"My-widget"``.
    """

    return raw[:1].upper() + raw[1:]


def normalize_identifier(raw: str) -> str:
    """Return a class-style identifier derived from ``raw``.

    Every run of characters that cannot appear in an identifier acts as a
    word boundary: it is dropped and the following piece gets an upper-case
    first letter, so ``"my-widget"`` becomes ``"MyWidget"``. Accents are
    stripped (``"é"`` becomes ``"e"``) but letters of any script are kept,
    so ``"straße"`` becomes ``"Straße"``. A leading digit is prefixed with an
    underscore.

    Raises
    ------
    DegenerateNameError
        If ``raw`` has no letter, digit or underscore at all.
    """

    pieces = _pieces(raw)
    if not pieces:
        raise DegenerateNameError(raw)

    identifier = "".join(capitalize_first(piece) for piece in pieces)
    if not identifier.isidentifier():
        identifier = f"_{identifier}"
    return identifier


def component_file_name(raw: str, upper_case: bool) -> str:
    """Return the file stem a component named ``raw`` is written to."""

    if upper_case:
        return normalize_identifier(raw)
    return raw
