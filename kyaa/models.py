"""Pydantic models for kyaa."""

import sys
from dataclasses import dataclass
from typing import Literal, TextIO

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from kyaa.errors import FlagRegistryError

Arity = Literal['none', 'string', 'integer']
OutcomeKind = Literal['completed', 'help', 'failed']

HELP_SHORT = 'h'
HELP_LONG = 'help'


class FlagDescriptor(BaseModel):
    """A single registered flag."""

    model_config = ConfigDict(frozen=True)

    long_name: str
    short_char: str | None = None
    arity: Arity = 'none'
    help_text: str = ''

    @field_validator('long_name')
    @classmethod
    def validate_long_name(cls, v: str) -> str:
        """Validate that the long name can appear after ``--``."""
        if not v:
            msg = 'Long flag name cannot be empty'
            raise ValueError(msg)
        if v.startswith('-') or '=' in v:
            msg = f'Long flag name cannot start with "-" or contain "=": {v}'
            raise ValueError(msg)
        return v

    @field_validator('short_char')
    @classmethod
    def validate_short_char(cls, v: str | None) -> str | None:
        """Validate that the short flag is one non-dash character."""
        if v is None:
            return v
        if len(v) != 1 or v == '-':
            msg = f'Short flag must be a single character other than "-": {v!r}'
            raise ValueError(msg)
        return v

    @property
    def takes_value(self) -> bool:
        return self.arity != 'none'

    @property
    def label(self) -> str:
        """The ``--long (-s)`` form used in error messages."""
        if self.short_char is None:
            return f'--{self.long_name}'
        return f'--{self.long_name} (-{self.short_char})'


class FlagRegistry(BaseModel):
    """Ordered, read-only table of flag descriptors.

    Registration order is the order flags are listed in the help text.
    """

    model_config = ConfigDict(frozen=True)

    flags: tuple[FlagDescriptor, ...] = ()

    @model_validator(mode='after')
    def validate_unique(self) -> 'FlagRegistry':
        """Reject duplicate or reserved flag names."""
        longs: set[str] = set()
        shorts: set[str] = set()
        for flag in self.flags:
            if flag.long_name == HELP_LONG or flag.short_char == HELP_SHORT:
                msg = f'--{HELP_LONG} and -{HELP_SHORT} are reserved: {flag.label}'
                raise ValueError(msg)
            if flag.long_name in longs:
                msg = f'duplicate long flag: --{flag.long_name}'
                raise ValueError(msg)
            if flag.short_char is not None and flag.short_char in shorts:
                msg = f'duplicate short flag: -{flag.short_char}'
                raise ValueError(msg)
            longs.add(flag.long_name)
            if flag.short_char is not None:
                shorts.add(flag.short_char)
        return self

    @classmethod
    def of(cls, *flags: FlagDescriptor) -> 'FlagRegistry':
        """Build a registry, raising FlagRegistryError on invalid tables."""
        try:
            return cls(flags=flags)
        except ValidationError as exc:
            messages = '; '.join(str(error['msg']) for error in exc.errors())
            msg = f'invalid flag registry: {messages}'
            raise FlagRegistryError(msg) from exc

    def by_long(self, name: str) -> FlagDescriptor | None:
        return next((flag for flag in self.flags if flag.long_name == name), None)

    def by_short(self, char: str) -> FlagDescriptor | None:
        return next((flag for flag in self.flags if flag.short_char == char), None)


class ParseOutcome(BaseModel):
    """Terminal result of one parse call."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    message: str | None = None

    @classmethod
    def completed(cls) -> 'ParseOutcome':
        return cls(kind='completed')

    @classmethod
    def help_requested(cls) -> 'ParseOutcome':
        return cls(kind='help')

    @classmethod
    def failed(cls, message: str) -> 'ParseOutcome':
        return cls(kind='failed', message=message)

    @property
    def ok(self) -> bool:
        return self.kind != 'failed'


class ExitStatuses(BaseModel):
    """Caller-chosen integer statuses for each outcome kind."""

    model_config = ConfigDict(extra='forbid')

    ok: int = 0
    help: int = 0
    fail: int = 1

    def status_for(self, outcome: ParseOutcome) -> int:
        """Map a parse outcome to its configured status."""
        if outcome.kind == 'completed':
            return self.ok
        if outcome.kind == 'help':
            return self.help
        return self.fail


@dataclass(frozen=True)
class FlagMatch:
    """A recognized flag, as handed to its handler."""

    flag: FlagDescriptor
    token: str
    text: str | None = None
    number: int | None = None

    @property
    def value(self) -> str | int | None:
        if self.flag.arity == 'integer':
            return self.number
        return self.text


@dataclass(frozen=True)
class Positional:
    """A positional argument, as handed to the positional handler."""

    token: str
    index: int
    read_stdin: bool = False


@dataclass
class OutputSinks:
    """The two channels the engine writes to.

    Unset channels resolve to ``sys.stdout`` / ``sys.stderr`` at write time,
    so pytest's capsys and similar redirections keep working.
    """

    out: TextIO | None = None
    err: TextIO | None = None

    def write_out(self, text: str) -> None:
        (self.out or sys.stdout).write(text)

    def write_err(self, text: str) -> None:
        (self.err or sys.stderr).write(text)
