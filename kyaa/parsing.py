"""The flag dispatch loop."""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from kyaa.errors import (
    InvalidIntegerError,
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
from kyaa.tokens import Token, classify

logger = logging.getLogger(__name__)

FlagHandler = Callable[[FlagMatch], None]
PositionalHandler = Callable[[Positional], None]


@dataclass
class Handlers:
    """Caller code run for recognized flags and for positionals.

    Flag handlers are keyed by long name. A registered flag with no handler
    is still matched and validated, then ignored.
    """

    flags: Mapping[str, FlagHandler] = field(default_factory=dict)
    positional: PositionalHandler | None = None


@dataclass
class ParseCursor:
    """Read position over one argument vector.

    Tokens at or past ``count``, past the end of ``argv``, or set to ``None``
    are absent; the cursor never reads them.
    """

    argv: Sequence[str | None]
    count: int
    index: int = 1
    stop_parsing: bool = False

    @property
    def exhausted(self) -> bool:
        return self.index >= self.count

    def current(self) -> str | None:
        if self.exhausted or self.index >= len(self.argv):
            return None
        return self.argv[self.index]


def _check_invocation(count: object, argv: Sequence[str | None] | None) -> None:
    if argv is None:
        msg = 'missing argument vector'
        raise MalformedInvocationError(msg)
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        msg = f'invalid argument count: {count}'
        raise MalformedInvocationError(msg)


def _emit_positional(cursor: ParseCursor, raw: str, handlers: Handlers, *, read_stdin: bool = False) -> None:
    logger.debug('positional argument %d: %r (stdin=%s)', cursor.index, raw, read_stdin)
    if handlers.positional is not None:
        handlers.positional(Positional(token=raw, index=cursor.index, read_stdin=read_stdin))
    cursor.index += 1


def _take_value(cursor: ParseCursor, flag: FlagDescriptor, token: Token) -> str | None:
    """Acquire the value for a flag whose token has already been consumed."""
    if not flag.takes_value:
        if token.inline_value is not None:
            raise UnexpectedValueError(flag.label)
        return None

    if token.inline_value is not None:
        return token.inline_value

    # the next token is the value whatever it looks like, even -h or --
    value = cursor.current()
    if value is None:
        raise MissingValueError(flag.label)
    cursor.index += 1
    return value


def _dispatch_flag(cursor: ParseCursor, flag: FlagDescriptor, token: Token, handlers: Handlers) -> None:
    cursor.index += 1
    text = _take_value(cursor, flag, token)

    number = None
    if flag.arity == 'integer':
        try:
            number = parse_integer(text)
        except InvalidIntegerError as exc:
            raise InvalidIntegerError(text, flag.label) from exc

    logger.debug('matched %s from %r (value=%r)', flag.label, token.raw, text)
    handler = handlers.flags.get(flag.long_name)
    if handler is not None:
        handler(FlagMatch(flag=flag, token=token.raw, text=text, number=number))


def _lookup(registry: FlagRegistry, token: Token) -> FlagDescriptor:
    if token.kind == 'long':
        flag = registry.by_long(token.name)
    elif token.clustered:
        flag = None
    else:
        flag = registry.by_short(token.name)

    if flag is None:
        raise UnknownFlagError(token.raw)
    return flag


def _scan(cursor: ParseCursor, registry: FlagRegistry, handlers: Handlers, sinks: OutputSinks) -> ParseOutcome:
    while not cursor.exhausted:
        raw = cursor.current()
        if raw is None:
            msg = f'missing argument at position {cursor.index}'
            raise MalformedInvocationError(msg)

        if cursor.stop_parsing:
            _emit_positional(cursor, raw, handlers)
            continue

        token = classify(raw)
        if token.kind == 'stop':
            logger.debug('stop marker at position %d', cursor.index)
            cursor.stop_parsing = True
            cursor.index += 1
        elif token.kind == 'stdin':
            _emit_positional(cursor, raw, handlers, read_stdin=True)
        elif token.kind == 'help':
            sinks.write_out(render_help(registry))
            return ParseOutcome.help_requested()
        elif token.kind in ('long', 'short'):
            _dispatch_flag(cursor, _lookup(registry, token), token, handlers)
        else:
            _emit_positional(cursor, raw, handlers)

    return ParseOutcome.completed()


def parse_argv(
    count: int,
    argv: Sequence[str | None] | None,
    registry: FlagRegistry,
    handlers: Handlers | None = None,
    *,
    sinks: OutputSinks | None = None,
) -> ParseOutcome:
    """Parse ``argv[1:count]`` against a flag registry.

    Flag and positional handlers run in argument order. The first problem
    aborts the parse: its message is written to the error sink and a failed
    outcome is returned. Handlers that already ran are not undone, and
    exceptions raised by handlers propagate unchanged.

    Args:
        count: Number of entries of ``argv`` to consider, program name included.
        argv: The argument vector; ``argv[0]`` is skipped.
        registry: The flags to recognize.
        handlers: Flag and positional callbacks.
        sinks: Where help text and error messages are written.

    Returns:
        The outcome of the parse.
    """
    handlers = handlers or Handlers()
    sinks = sinks or OutputSinks()

    try:
        _check_invocation(count, argv)
        return _scan(ParseCursor(argv=argv, count=count), registry, handlers, sinks)
    except ParseError as exc:
        logger.debug('parse failed: %s', exc)
        sinks.write_err(f'{exc}\n')
        return ParseOutcome.failed(str(exc))


def run(
    count: int,
    argv: Sequence[str | None] | None,
    registry: FlagRegistry,
    handlers: Handlers | None = None,
    *,
    sinks: OutputSinks | None = None,
    statuses: ExitStatuses | None = None,
) -> int:
    """Parse an argument vector and map the outcome to a caller status."""
    statuses = statuses or ExitStatuses()
    outcome = parse_argv(count, argv, registry, handlers, sinks=sinks)
    return statuses.status_for(outcome)
