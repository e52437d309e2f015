"""Classification of a single argument token."""

from dataclasses import dataclass
from typing import Literal

from kyaa.models import HELP_LONG, HELP_SHORT

TokenKind = Literal['stop', 'stdin', 'help', 'long', 'short', 'positional']

STOP_MARKER = '--'
STDIN_SENTINEL = '-'
HELP_TOKENS = (f'-{HELP_SHORT}', f'--{HELP_LONG}')


@dataclass(frozen=True)
class Token:
    """One argument token and what it looks like in flag position.

    For ``long`` tokens, ``name`` is the text between ``--`` and the first
    ``=`` and ``inline_value`` is everything after it (``None`` when there is
    no ``=``). For ``short`` tokens, ``name`` is the character after ``-``.
    """

    kind: TokenKind
    raw: str
    name: str | None = None
    inline_value: str | None = None

    @property
    def clustered(self) -> bool:
        """True for short tokens carrying more than one character."""
        return self.kind == 'short' and len(self.raw) > 2


def classify(raw: str) -> Token:
    """Classify a token found in flag position."""
    if raw == STOP_MARKER:
        return Token(kind='stop', raw=raw)
    if raw == STDIN_SENTINEL:
        return Token(kind='stdin', raw=raw)
    if raw in HELP_TOKENS:
        return Token(kind='help', raw=raw)
    if raw.startswith('--'):
        name, sep, value = raw[2:].partition('=')
        return Token(kind='long', raw=raw, name=name, inline_value=value if sep else None)
    if raw.startswith('-'):
        return Token(kind='short', raw=raw, name=raw[1])
    return Token(kind='positional', raw=raw)
