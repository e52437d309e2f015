"""kyaa: a small command-line flag parsing engine."""

from kyaa.errors import (
    FlagRegistryError,
    InvalidIntegerError,
    KyaaConfigError,
    KyaaError,
    MalformedInvocationError,
    MissingValueError,
    ParseError,
    UnexpectedValueError,
    UnknownFlagError,
)
from kyaa.help import render_help
from kyaa.integers import parse_integer
from kyaa.models import (
    ExitStatuses,
    FlagDescriptor,
    FlagMatch,
    FlagRegistry,
    OutputSinks,
    ParseOutcome,
    Positional,
)
from kyaa.parsing import Handlers, parse_argv, run
from kyaa.tokens import Token, classify

__version__ = '0.0.0.dev0'

__all__ = [
    'ExitStatuses',
    'FlagDescriptor',
    'FlagMatch',
    'FlagRegistry',
    'FlagRegistryError',
    'Handlers',
    'InvalidIntegerError',
    'KyaaConfigError',
    'KyaaError',
    'MalformedInvocationError',
    'MissingValueError',
    'OutputSinks',
    'ParseError',
    'ParseOutcome',
    'Positional',
    'Token',
    'UnexpectedValueError',
    'UnknownFlagError',
    '__version__',
    'classify',
    'parse_argv',
    'parse_integer',
    'render_help',
    'run',
]
