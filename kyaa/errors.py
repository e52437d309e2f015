"""Exceptions raised by kyaa."""


class KyaaError(Exception):
    """Base exception for all kyaa errors."""


class FlagRegistryError(KyaaError, ValueError):
    """Raised when a flag table cannot be turned into a registry."""


class KyaaConfigError(KyaaError, RuntimeError):
    """Raised when kyaa configuration is invalid."""


class ParseError(KyaaError):
    """An argument vector could not be parsed.

    Every parse error is fatal to the parse call that raised it. The message
    is exactly the text written to the error sink (without the newline).
    """


class UnknownFlagError(ParseError):
    """A token in flag position matched no registered flag."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'unknown flag: {token}')


class MissingValueError(ParseError):
    """A value-bearing flag was the last available token."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f'expected an argument for {label}')


class UnexpectedValueError(ParseError):
    """A flag that takes no value was given one with ``--name=value``."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f'unexpected argument for {label}')


class InvalidIntegerError(ParseError, ValueError):
    """A token is not a valid 32-bit integer literal."""

    def __init__(self, token: str, label: str | None = None) -> None:
        self.token = token
        self.label = label
        if label is None:
            super().__init__(f'invalid number: {token}')
        else:
            super().__init__(f'invalid number for {label}: {token}')


class MalformedInvocationError(ParseError):
    """The parser itself was called with a bad count or argument vector."""
